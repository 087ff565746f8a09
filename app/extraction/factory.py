import importlib

from app.config.settings import Settings
from app.extraction.models import Modality
from app.extraction.selector import ExtractionSelector
from app.extraction.strategies.base import BaseExtractionStrategy
from app.extraction.strategies.pdfminer_strategy import PdfMinerStrategy
from app.extraction.strategies.pdfplumber_strategy import PdfPlumberStrategy
from app.extraction.strategies.pymupdf_strategy import PyMuPdfStrategy
from app.extraction.strategies.tesseract_strategy import TesseractOcrStrategy
from app.languages.catalog import ocr_profile
from app.logging.logger import Log


class ExtractionSelectorFactory:
    """Builds the strategy chains once at startup and wires them into a selector.

    PDF order is fixed: whole-buffer pdfminer call, PyMuPDF through its
    ``fitz`` entry point, then pdfplumber page by page. Images get a single
    OCR strategy; OCR failure is terminal.
    """

    @classmethod
    def create(cls, settings: Settings) -> ExtractionSelector:
        return ExtractionSelector(
            strategies={
                Modality.PDF: cls.pdf_strategies(),
                Modality.IMAGE: cls.image_strategies(settings),
            },
            timeout_seconds=settings.strategy_timeout_seconds,
            max_workers=settings.strategy_max_workers,
        )

    @staticmethod
    def pdf_strategies() -> list[BaseExtractionStrategy]:
        return [PdfMinerStrategy(), PyMuPdfStrategy(), PdfPlumberStrategy()]

    @classmethod
    def image_strategies(cls, settings: Settings) -> list[BaseExtractionStrategy]:
        languages = settings.ocr_languages.strip() or ocr_profile()
        strategy = TesseractOcrStrategy(languages)
        if settings.tesseract_cmd:
            cls.configure_tesseract_cmd(strategy, settings.tesseract_cmd)
        return [strategy]

    @staticmethod
    def configure_tesseract_cmd(strategy: TesseractOcrStrategy, tesseract_cmd: str) -> None:
        """Point pytesseract at a non-default binary, once, at startup.

        pytesseract keeps the binary path in a module global, so it is set
        here rather than on every OCR attempt.
        """
        try:
            backend = importlib.import_module(strategy.module_path)
        except ImportError as exc:
            Log.warning(
                f"Cannot set tesseract command, {strategy.module_path} not importable: {exc}"
            )
            return
        backend.pytesseract.tesseract_cmd = tesseract_cmd
        Log.info("Configured tesseract command", tesseract_cmd=tesseract_cmd)
