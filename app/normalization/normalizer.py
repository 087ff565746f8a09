from collections.abc import Sequence

from app.normalization.base import BaseNormalizer
from app.normalization.rules import NormalizationRule


class TextNormalizer(BaseNormalizer):
    """Applies an ordered sequence of normalization rules."""

    def __init__(self, rules: Sequence[NormalizationRule]) -> None:
        self._rules = tuple(rules)

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self._rules]

    def normalize(self, text: str) -> str:
        for rule in self._rules:
            text = rule(text)
        return text
