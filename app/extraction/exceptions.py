from app.extraction.models import ErrorKind


class ExtractionError(Exception):
    """Base exception for all extraction-related errors."""


class DocumentRejectedError(ExtractionError):
    """Raised by the loader when an upload fails validation."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


class StrategyError(ExtractionError):
    """Raised when a strategy ran but could not produce text."""


class StrategyUnavailableError(StrategyError):
    """Raised when a strategy's backend module or binary cannot be resolved."""
