from types import ModuleType

from app.extraction.models import RawExtraction, StrategyKind, UploadedDocument
from app.extraction.strategies.base import BaseExtractionStrategy


class PyMuPdfStrategy(BaseExtractionStrategy):
    """Extracts text with PyMuPDF through its legacy ``fitz`` entry point."""

    kind = StrategyKind.ALTERNATE_ENTRY_POINT

    def __init__(self, module_path: str = "fitz") -> None:
        super().__init__(module_path)

    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        with backend.open(stream=document.content, filetype="pdf") as doc:
            pages = [page.get_text() for page in doc]
            page_count = doc.page_count
        return RawExtraction(text="\n".join(pages), page_count=page_count)
