import importlib
from abc import ABC, abstractmethod
from types import ModuleType
from typing import ClassVar

from app.extraction.exceptions import StrategyError, StrategyUnavailableError
from app.extraction.models import RawExtraction, StrategyKind, UploadedDocument


class BaseExtractionStrategy(ABC):
    """Contract for every way of turning an UploadedDocument into raw text.

    The backend module is resolved on each attempt rather than at import
    time, so a missing or broken library only fails this strategy.
    """

    kind: ClassVar[StrategyKind]

    def __init__(self, module_path: str) -> None:
        self.module_path = module_path

    @property
    def name(self) -> str:
        return f"{self.kind.value}[{self.module_path}]"

    def attempt(self, document: UploadedDocument) -> RawExtraction:
        """Extract raw, unnormalized text from the document.

        Raises:
            StrategyUnavailableError: if the backend cannot be resolved.
            StrategyError: if extraction fails for any other reason.
        """
        backend = self._resolve(self.module_path)
        try:
            return self._extract(backend, document)
        except StrategyError:
            raise
        except Exception as exc:
            raise StrategyError(f"{self.name} extraction failed: {exc}") from exc

    @staticmethod
    def _resolve(module_path: str) -> ModuleType:
        try:
            return importlib.import_module(module_path)
        except ImportError as exc:
            raise StrategyUnavailableError(
                f"module '{module_path}' could not be loaded: {exc}"
            ) from exc

    @abstractmethod
    def _extract(self, backend: ModuleType, document: UploadedDocument) -> RawExtraction:
        """Run the backend against the document bytes."""
