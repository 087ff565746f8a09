from dataclasses import dataclass


@dataclass(frozen=True)
class Script:
    """A writing system and the Unicode code point ranges it occupies."""

    name: str
    ranges: tuple[tuple[int, int], ...]


@dataclass(frozen=True)
class IndianLanguage:
    """Catalog entry for a supported language."""

    code: str
    name: str
    native_name: str
    script: Script
    tesseract_code: str | None = None


LATIN = Script("Latin", ((0x0020, 0x007E),))
DEVANAGARI = Script("Devanagari", ((0x0900, 0x097F), (0xA8E0, 0xA8FF), (0x1CD0, 0x1CFF)))
BENGALI = Script("Bengali", ((0x0980, 0x09FF),))
GURMUKHI = Script("Gurmukhi", ((0x0A00, 0x0A7F),))
GUJARATI = Script("Gujarati", ((0x0A80, 0x0AFF),))
ODIA = Script("Odia", ((0x0B00, 0x0B7F),))
TAMIL = Script("Tamil", ((0x0B80, 0x0BFF),))
TELUGU = Script("Telugu", ((0x0C00, 0x0C7F),))
KANNADA = Script("Kannada", ((0x0C80, 0x0CFF),))
MALAYALAM = Script("Malayalam", ((0x0D00, 0x0D7F),))
PERSO_ARABIC = Script(
    "Perso-Arabic", ((0x0600, 0x06FF), (0x0750, 0x077F), (0xFB50, 0xFDFF), (0xFE70, 0xFEFE))
)
OL_CHIKI = Script("Ol Chiki", ((0x1C50, 0x1C7F),))
MEETEI_MAYEK = Script("Meetei Mayek", ((0xABC0, 0xABFF), (0xAAE0, 0xAAFF)))

# Assamese is written in the Bengali block.
LANGUAGES: tuple[IndianLanguage, ...] = (
    IndianLanguage("hi", "Hindi", "हिन्दी", DEVANAGARI, "hin"),
    IndianLanguage("bn", "Bengali", "বাংলা", BENGALI, "ben"),
    IndianLanguage("pa", "Punjabi", "ਪੰਜਾਬੀ", GURMUKHI, "pan"),
    IndianLanguage("mr", "Marathi", "मराठी", DEVANAGARI, "mar"),
    IndianLanguage("gu", "Gujarati", "ગુજરાતી", GUJARATI, "guj"),
    IndianLanguage("ur", "Urdu", "اردو", PERSO_ARABIC, "urd"),
    IndianLanguage("as", "Assamese", "অসমীয়া", BENGALI, "asm"),
    IndianLanguage("or", "Odia", "ଓଡ଼ିଆ", ODIA, "ori"),
    IndianLanguage("mai", "Maithili", "मैथिली", DEVANAGARI),
    IndianLanguage("ne", "Nepali", "नेपाली", DEVANAGARI, "nep"),
    IndianLanguage("sd", "Sindhi", "سنڌي", PERSO_ARABIC, "snd"),
    IndianLanguage("ks", "Kashmiri", "کٲشُر", PERSO_ARABIC),
    IndianLanguage("doi", "Dogri", "डोगरी", DEVANAGARI),
    IndianLanguage("sa", "Sanskrit", "संस्कृतम्", DEVANAGARI, "san"),
    IndianLanguage("ta", "Tamil", "தமிழ்", TAMIL, "tam"),
    IndianLanguage("te", "Telugu", "తెలుగు", TELUGU, "tel"),
    IndianLanguage("kn", "Kannada", "ಕನ್ನಡ", KANNADA, "kan"),
    IndianLanguage("ml", "Malayalam", "മലയാളം", MALAYALAM, "mal"),
    IndianLanguage("sat", "Santali", "ᱥᱟᱱᱛᱟᱲᱤ", OL_CHIKI),
    IndianLanguage("mni", "Manipuri", "ꯃꯤꯇꯩꯂꯣꯟ", MEETEI_MAYEK),
    IndianLanguage("brx", "Bodo", "बर'", DEVANAGARI),
    IndianLanguage("en", "English", "English", LATIN, "eng"),
)


def find_language(code: str) -> IndianLanguage | None:
    """Return the catalog entry for ``code`` (case-insensitive), if any."""
    wanted = code.strip().lower()
    return next((lang for lang in LANGUAGES if lang.code == wanted), None)


def catalog_scripts() -> tuple[Script, ...]:
    """Distinct scripts used by the catalog, in first-seen order."""
    seen: dict[str, Script] = {}
    for lang in LANGUAGES:
        seen.setdefault(lang.script.name, lang.script)
    return tuple(seen.values())


def script_ranges(include_latin: bool = False) -> tuple[tuple[int, int], ...]:
    """Flattened code point ranges of every catalog script."""
    ranges: list[tuple[int, int]] = []
    for script in catalog_scripts():
        if script is LATIN and not include_latin:
            continue
        ranges.extend(script.ranges)
    return tuple(ranges)


def ocr_profile(codes: list[str] | None = None) -> str:
    """Build a Tesseract ``lang`` argument such as ``eng+hin+tam``.

    English always comes first; languages without a Tesseract model are skipped.
    """
    selected = LANGUAGES if codes is None else tuple(
        lang for lang in (find_language(code) for code in codes) if lang is not None
    )
    parts = ["eng"]
    for lang in selected:
        if lang.tesseract_code and lang.tesseract_code not in parts:
            parts.append(lang.tesseract_code)
    return "+".join(parts)
