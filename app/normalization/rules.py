"""Pure text-to-text rules applied, in a fixed order, to extracted text.

Every rule only removes characters or shrinks whitespace runs, so a rule
never lengthens its input.
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from app.languages.catalog import script_ranges


@dataclass(frozen=True)
class NormalizationRule:
    """A named, deterministic, side-effect-free text transformation."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def _remove(pattern: re.Pattern[str]) -> Callable[[str], str]:
    return lambda text: pattern.sub("", text)


def _char_class(ranges: Iterable[tuple[int, int]], extra: str = "") -> str:
    parts = [f"{re.escape(chr(lo))}-{re.escape(chr(hi))}" for lo, hi in ranges]
    parts.extend(re.escape(ch) for ch in extra)
    return "".join(parts)


_ASCII_CONTROLS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_C1_CONTROLS_RE = re.compile(r"[\x80-\x9f]")
_WHITESPACE_RUN_RE = re.compile(r"[ \t\r\n]+")
# General punctuation and format controls, BOM, specials. ZWNJ and ZWJ
# (U+200C, U+200D) are kept: Indic conjuncts depend on them.
_PDF_ARTIFACTS_RE = re.compile(r"[\u2000-\u200b\u200e-\u206f\ufeff\ufff0-\uffff]")
_SPACE_RUN_RE = re.compile(r" {2,}")

PRINTABLE_ASCII = ((0x20, 0x7E),)
EXTRA_SYMBOLS = "\u20b9\u00b0\u00a9\u00ae\u00d7\u00f7\u00a7\u00b6"
INDIC_JOINERS = "\u200c\u200d"

_STRICT_ASCII_RE = re.compile(f"[^{_char_class(PRINTABLE_ASCII, EXTRA_SYMBOLS)}]")
_INDIC_RE = re.compile(
    f"[^{_char_class(PRINTABLE_ASCII + script_ranges(), EXTRA_SYMBOLS + INDIC_JOINERS)}]"
)


def _trim(text: str) -> str:
    return _SPACE_RUN_RE.sub(" ", text).strip()


strip_ascii_controls = NormalizationRule("strip_ascii_controls", _remove(_ASCII_CONTROLS_RE))
strip_c1_controls = NormalizationRule("strip_c1_controls", _remove(_C1_CONTROLS_RE))
collapse_whitespace = NormalizationRule(
    "collapse_whitespace", lambda text: _WHITESPACE_RUN_RE.sub(" ", text)
)
strip_pdf_artifacts = NormalizationRule("strip_pdf_artifacts", _remove(_PDF_ARTIFACTS_RE))
allow_strict_ascii = NormalizationRule("allow_strict_ascii", _remove(_STRICT_ASCII_RE))
allow_indic_scripts = NormalizationRule("allow_indic_scripts", _remove(_INDIC_RE))
allow_all = NormalizationRule("allow_all", lambda text: text)
trim = NormalizationRule("trim", _trim)


def pipeline(allow_list: NormalizationRule) -> tuple[NormalizationRule, ...]:
    """The six-step rule order; only the allow-list step varies."""
    return (
        strip_ascii_controls,
        strip_c1_controls,
        collapse_whitespace,
        strip_pdf_artifacts,
        allow_list,
        trim,
    )


PROFILES: dict[str, tuple[NormalizationRule, ...]] = {
    "strict_ascii": pipeline(allow_strict_ascii),
    "indic": pipeline(allow_indic_scripts),
    "passthrough": pipeline(allow_all),
}
