import io
from types import ModuleType

from app.extraction.exceptions import StrategyError
from app.extraction.models import RawExtraction, StrategyKind, UploadedDocument
from app.extraction.strategies.base import BaseExtractionStrategy

# pdfminer's text converter terminates every page with a form feed.
_PAGE_BREAK = "\f"


class PdfMinerStrategy(BaseExtractionStrategy):
    """Parses the whole PDF buffer with a single pdfminer.six call."""

    kind = StrategyKind.PRIMARY_LIBRARY_CALL

    def __init__(self, module_path: str = "pdfminer.high_level") -> None:
        super().__init__(module_path)

    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        text = backend.extract_text(io.BytesIO(document.content))
        if not isinstance(text, str):
            raise StrategyError(
                f"{self.name} returned {type(text).__name__} instead of text"
            )
        page_count = text.count(_PAGE_BREAK) or None
        return RawExtraction(text=text.replace(_PAGE_BREAK, "\n"), page_count=page_count)
