from dataclasses import replace

from app.config.settings import Settings
from app.extraction.exceptions import DocumentRejectedError
from app.extraction.factory import ExtractionSelectorFactory
from app.extraction.loader import DocumentLoader
from app.extraction.models import (
    ErrorKind,
    ExtractionFailure,
    ExtractionResult,
    Modality,
)
from app.extraction.selector import MODALITY_LABELS, ExtractionSelector
from app.logging.logger import Log
from app.normalization.base import BaseNormalizer
from app.normalization.factory import NormalizerFactory


class ExtractionService:
    """Orchestrates one upload: load -> select strategy -> normalize."""

    def __init__(
        self,
        loader: DocumentLoader,
        selector: ExtractionSelector,
        normalizers: dict[Modality, BaseNormalizer],
    ) -> None:
        self._loader = loader
        self._selector = selector
        self._normalizers = normalizers

    @property
    def selector(self) -> ExtractionSelector:
        return self._selector

    @property
    def max_upload_bytes(self) -> int:
        return self._loader.max_upload_bytes

    def run(
        self,
        content: bytes,
        mime_type: str | None,
        declared_size: int | None,
        modality: Modality,
        filename: str | None = None,
    ) -> ExtractionResult:
        """Extract normalized text from one upload.

        Loader rejections are returned immediately; strategy failures only
        after the whole chain has been tried.
        """
        label = MODALITY_LABELS[modality]
        try:
            document = self._loader.load(
                content, mime_type, declared_size, modality, filename=filename
            )
        except DocumentRejectedError as exc:
            Log.warning(
                f"Rejected {label} upload: {exc.message}",
                kind=exc.kind.value,
                filename=filename,
            )
            return ExtractionFailure(kind=exc.kind, message=exc.message)

        Log.info(f"Loaded {document.size_bytes} bytes for {label} extraction", filename=filename)

        result = self._selector.extract(document)
        if isinstance(result, ExtractionFailure):
            return result

        text = self._normalizers[modality].normalize(result.text)
        if not text:
            Log.warning(f"Normalization left no text for {label}", strategy=result.strategy)
            return ExtractionFailure(
                kind=ErrorKind.NO_TEXT_FOUND,
                message=f"No text could be extracted from {label}",
            )

        Log.info(
            f"Extracted {len(text)} chars from {label}",
            pages=result.page_count,
            strategy=result.strategy,
        )
        return replace(result, text=text)

    def close(self) -> None:
        self._selector.close()

    @staticmethod
    def missing_file() -> ExtractionFailure:
        return ExtractionFailure(kind=ErrorKind.MISSING_FILE, message="No file provided")


def build_service(settings: Settings) -> ExtractionService:
    """Build an ExtractionService with all strategies constructed up front."""
    return ExtractionService(
        loader=DocumentLoader(max_upload_bytes=settings.max_upload_bytes),
        selector=ExtractionSelectorFactory.create(settings),
        normalizers=NormalizerFactory.for_modalities(settings),
    )
