from typing import ClassVar

from app.extraction.exceptions import DocumentRejectedError
from app.extraction.models import ErrorKind, Modality, UploadedDocument

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class DocumentLoader:
    """Validates an upload's declared type and size and wraps it for extraction."""

    SUPPORTED_TYPES: ClassVar[dict[Modality, frozenset[str]]] = {
        Modality.PDF: frozenset({"application/pdf", "pdf"}),
        Modality.IMAGE: frozenset(
            {
                "image/jpeg",
                "image/jpg",
                "image/png",
                "image/webp",
                "image/bmp",
                "image/tiff",
            }
        ),
    }

    REJECTION_MESSAGES: ClassVar[dict[Modality, str]] = {
        Modality.PDF: "Only PDF files are supported",
        Modality.IMAGE: "Only image files (JPEG, PNG, WebP, BMP, TIFF) are supported",
    }

    def __init__(self, max_upload_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_upload_bytes = max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    def load(
        self,
        content: bytes,
        mime_type: str | None,
        declared_size: int | None,
        modality: Modality,
        filename: str | None = None,
    ) -> UploadedDocument:
        """Validate the upload and return it as an UploadedDocument.

        Checks run in order: type, size, empty payload.

        Raises:
            DocumentRejectedError: with kind INVALID_TYPE, TOO_LARGE or EMPTY_PAYLOAD.
        """
        normalized_type = self._normalize_mime_type(mime_type)
        if normalized_type not in self.SUPPORTED_TYPES[modality]:
            raise DocumentRejectedError(
                ErrorKind.INVALID_TYPE, self.REJECTION_MESSAGES[modality]
            )

        size = len(content) if declared_size is None else declared_size
        if size > self._max_upload_bytes or len(content) > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes // (1024 * 1024)
            raise DocumentRejectedError(
                ErrorKind.TOO_LARGE, f"File size exceeds {limit_mb}MB limit"
            )

        if not content:
            raise DocumentRejectedError(ErrorKind.EMPTY_PAYLOAD, "File is empty")

        return UploadedDocument(
            content=content,
            mime_type=normalized_type,
            size_bytes=size,
            modality=modality,
            filename=filename,
        )

    @staticmethod
    def _normalize_mime_type(mime_type: str | None) -> str:
        if not mime_type:
            return ""
        return mime_type.split(";", 1)[0].strip().lower()
