from abc import ABC, abstractmethod


class BaseNormalizer(ABC):
    """Contract for all text normalizers."""

    @abstractmethod
    def normalize(self, text: str) -> str:
        """Clean raw extracted text.

        Args:
            text: Raw text as produced by an extraction strategy.

        Returns:
            The cleaned text. May be empty; deciding whether an empty result
            is a failure is left to the caller.
        """
