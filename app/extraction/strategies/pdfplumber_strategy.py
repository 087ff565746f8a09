import io
from types import ModuleType

from app.extraction.models import RawExtraction, StrategyKind, UploadedDocument
from app.extraction.strategies.base import BaseExtractionStrategy


class PdfPlumberStrategy(BaseExtractionStrategy):
    """Loads the PDF with pdfplumber and walks it one page at a time.

    Each page's text is followed by a newline, so a page that yields nothing
    still contributes an empty line.
    """

    kind = StrategyKind.PAGE_BY_PAGE_FALLBACK

    def __init__(self, module_path: str = "pdfplumber") -> None:
        super().__init__(module_path)

    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        parts: list[str] = []
        with backend.open(io.BytesIO(document.content)) as pdf:
            for page in pdf.pages:
                parts.append((page.extract_text() or "") + "\n")
        return RawExtraction(text="".join(parts), page_count=len(parts))
