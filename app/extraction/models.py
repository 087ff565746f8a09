from dataclasses import dataclass, field
from enum import Enum


class Modality(str, Enum):
    """Upload channel; each HTTP endpoint serves exactly one."""

    PDF = "pdf"
    IMAGE = "image"


class ErrorKind(str, Enum):
    """Closed set of reasons an extraction request can fail."""

    MISSING_FILE = "MissingFile"
    INVALID_TYPE = "InvalidType"
    TOO_LARGE = "TooLarge"
    EMPTY_PAYLOAD = "EmptyPayload"
    NO_TEXT_FOUND = "NoTextFound"
    EXTRACTION_EXHAUSTED = "ExtractionExhausted"
    BACKEND_UNAVAILABLE = "BackendUnavailable"

    @property
    def http_status(self) -> int:
        if self in (ErrorKind.EXTRACTION_EXHAUSTED, ErrorKind.BACKEND_UNAVAILABLE):
            return 500
        return 400


class StrategyKind(str, Enum):
    PRIMARY_LIBRARY_CALL = "primary_library_call"
    ALTERNATE_ENTRY_POINT = "alternate_entry_point"
    PAGE_BY_PAGE_FALLBACK = "page_by_page_fallback"
    OCR = "ocr"


@dataclass(frozen=True)
class UploadedDocument:
    """One validated upload. Lives for a single request and is never persisted."""

    content: bytes = field(repr=False)
    mime_type: str
    size_bytes: int
    modality: Modality
    filename: str | None = None


@dataclass(frozen=True)
class RawExtraction:
    """Unnormalized output of a single strategy attempt."""

    text: str
    page_count: int | None = None
    confidence: float | None = None
    word_count: int | None = None


@dataclass(frozen=True)
class ExtractionSuccess:
    text: str
    page_count: int = 1
    confidence: float | None = None
    word_count: int | None = None
    strategy: str = ""

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ExtractionFailure:
    kind: ErrorKind
    message: str
    details: str | None = None

    @property
    def success(self) -> bool:
        return False


ExtractionResult = ExtractionSuccess | ExtractionFailure
