"""Static subtag registry data.

Compiled-in lookup tables derived from the IANA Language Subtag Registry
(RFC 5646) and CLDR alias data (UTS #35). Every table is built once at
import time and exposed read-only (MappingProxyType / frozenset); there is
no runtime mutation path.

Tables:
    GRANDFATHERED: Legacy whole-tag exceptions -> preferred value (or None)
    LANGUAGE_ALIASES: Deprecated/ISO 639-2 language -> preferred language
    SCRIPT_ALIASES: Deprecated script -> preferred script
    REGION_ALIASES: Deprecated/numeric region -> preferred region
    VARIANT_ALIASES: Deprecated variant -> preferred variant
    HOUR_CYCLES: Recognized "hc" keyword values
    CALENDARS: Recognized "ca" keyword values
    CALENDAR_ALIASES: Legacy calendar names -> CLDR calendar type

Keys are stored lowercase; values are stored in their canonical case.
Alias targets are never themselves alias keys, so a single substitution
pass is always final.

Thread Safety:
    Read-only after import. Safe for concurrent use across multiple threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from intlocale.enums import HourCycle

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data classes
    "GrandfatheredTag",
    # Tables
    "GRANDFATHERED",
    "LANGUAGE_ALIASES",
    "SCRIPT_ALIASES",
    "REGION_ALIASES",
    "VARIANT_ALIASES",
    "HOUR_CYCLES",
    "CALENDARS",
    "CALENDAR_ALIASES",
    # Lookup functions
    "lookup_grandfathered",
    "resolve_language",
    "resolve_script",
    "resolve_region",
    "resolve_variant",
    "resolve_hour_cycle",
    "resolve_calendar",
]


# ============================================================================
# GRANDFATHERED TAGS
# ============================================================================


@dataclass(frozen=True, slots=True)
class GrandfatheredTag:
    """A legacy tag registered before RFC 4646 grammar existed.

    Attributes:
        tag: Registered form (e.g., 'i-klingon', 'en-GB-oed')
        preferred: Preferred replacement tag, or None if deprecated without one
        irregular: True if the tag does not match the langtag grammar at all
    """

    tag: str
    preferred: str | None
    irregular: bool


_GRANDFATHERED_ENTRIES: tuple[GrandfatheredTag, ...] = (
    # Irregular: not well-formed under the langtag production.
    GrandfatheredTag("en-GB-oed", "en-GB-oxendict", irregular=True),
    GrandfatheredTag("i-ami", "ami", irregular=True),
    GrandfatheredTag("i-bnn", "bnn", irregular=True),
    GrandfatheredTag("i-default", None, irregular=True),
    GrandfatheredTag("i-enochian", None, irregular=True),
    GrandfatheredTag("i-hak", "hak", irregular=True),
    GrandfatheredTag("i-klingon", "tlh", irregular=True),
    GrandfatheredTag("i-lux", "lb", irregular=True),
    GrandfatheredTag("i-mingo", None, irregular=True),
    GrandfatheredTag("i-navajo", "nv", irregular=True),
    GrandfatheredTag("i-pwn", "pwn", irregular=True),
    GrandfatheredTag("i-tao", "tao", irregular=True),
    GrandfatheredTag("i-tay", "tay", irregular=True),
    GrandfatheredTag("i-tsu", "tsu", irregular=True),
    GrandfatheredTag("sgn-BE-FR", "sfb", irregular=True),
    GrandfatheredTag("sgn-BE-NL", "vgt", irregular=True),
    GrandfatheredTag("sgn-CH-DE", "sgg", irregular=True),
    # Regular: well-formed, but registered as whole tags.
    GrandfatheredTag("art-lojban", "jbo", irregular=False),
    GrandfatheredTag("cel-gaulish", None, irregular=False),
    GrandfatheredTag("no-bok", "nb", irregular=False),
    GrandfatheredTag("no-nyn", "nn", irregular=False),
    GrandfatheredTag("zh-guoyu", "cmn", irregular=False),
    GrandfatheredTag("zh-hakka", "hak", irregular=False),
    GrandfatheredTag("zh-min", None, irregular=False),
    GrandfatheredTag("zh-min-nan", "nan", irregular=False),
    GrandfatheredTag("zh-xiang", "hsn", irregular=False),
)

GRANDFATHERED: Mapping[str, GrandfatheredTag] = MappingProxyType(
    {entry.tag.lower(): entry for entry in _GRANDFATHERED_ENTRIES}
)


# ============================================================================
# SUBTAG ALIASES
# ============================================================================

LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # Deprecated ISO 639-1 codes
        "in": "id",
        "iw": "he",
        "ji": "yi",
        "jw": "jv",
        "mo": "ro",
        # CLDR macrolanguage / legacy replacements
        "tl": "fil",
        "cmn": "zh",
        # ISO 639-2 bibliographic and terminology codes with a 639-1 equivalent
        "ara": "ar",
        "ces": "cs",
        "chi": "zh",
        "cze": "cs",
        "dan": "da",
        "deu": "de",
        "dut": "nl",
        "ell": "el",
        "eng": "en",
        "fin": "fi",
        "fra": "fr",
        "fre": "fr",
        "ger": "de",
        "gre": "el",
        "heb": "he",
        "hin": "hi",
        "ita": "it",
        "jpn": "ja",
        "kor": "ko",
        "nld": "nl",
        "nor": "no",
        "pol": "pl",
        "por": "pt",
        "rus": "ru",
        "spa": "es",
        "swe": "sv",
        "tur": "tr",
        "ukr": "uk",
        "zho": "zh",
    }
)

SCRIPT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "qaai": "Zinh",
    }
)

REGION_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # Deprecated ISO 3166-1 codes
        "bu": "MM",
        "dd": "DE",
        "fx": "FR",
        "tp": "TL",
        "uk": "GB",
        "yd": "YE",
        "zr": "CD",
        # UN M.49 numeric codes with an ISO 3166-1 alpha-2 equivalent
        "036": "AU",
        "076": "BR",
        "124": "CA",
        "156": "CN",
        "250": "FR",
        "276": "DE",
        "356": "IN",
        "380": "IT",
        "392": "JP",
        "410": "KR",
        "484": "MX",
        "643": "RU",
        "724": "ES",
        "826": "GB",
        "840": "US",
    }
)

VARIANT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "heploc": "alalc97",
        "polytoni": "polyton",
    }
)


# ============================================================================
# UNICODE EXTENSION KEYWORD VALUES
# ============================================================================

HOUR_CYCLES: frozenset[str] = frozenset(HourCycle)

CALENDARS: frozenset[str] = frozenset(
    {
        "buddhist",
        "chinese",
        "coptic",
        "dangi",
        "ethioaa",
        "ethiopic",
        "gregory",
        "hebrew",
        "indian",
        "islamic",
        "islamic-civil",
        "islamic-rgsa",
        "islamic-tbla",
        "islamic-umalqura",
        "iso8601",
        "japanese",
        "persian",
        "roc",
    }
)

CALENDAR_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "ethiopic-amete-alem": "ethioaa",
        "gregorian": "gregory",
        "islamicc": "islamic-civil",
    }
)


# ============================================================================
# LOOKUP FUNCTIONS
# ============================================================================


def lookup_grandfathered(tag: str) -> GrandfatheredTag | None:
    """Find a grandfathered tag by case-insensitive whole-tag match.

    Example:
        >>> lookup_grandfathered("I-KLINGON").preferred
        'tlh'
        >>> lookup_grandfathered("en-US") is None
        True
    """
    return GRANDFATHERED.get(tag.lower())


def resolve_language(subtag: str) -> str:
    """Return the preferred language subtag, lowercase."""
    lowered = subtag.lower()
    return LANGUAGE_ALIASES.get(lowered, lowered)


def resolve_script(subtag: str) -> str:
    """Return the preferred script subtag, titlecase."""
    lowered = subtag.lower()
    return SCRIPT_ALIASES.get(lowered, lowered[:1].upper() + lowered[1:])


def resolve_region(subtag: str) -> str:
    """Return the preferred region subtag, uppercase."""
    return REGION_ALIASES.get(subtag.lower(), subtag.upper())


def resolve_variant(subtag: str) -> str:
    """Return the preferred variant subtag, lowercase."""
    lowered = subtag.lower()
    return VARIANT_ALIASES.get(lowered, lowered)


def resolve_hour_cycle(value: str) -> str | None:
    """Return the canonical hour cycle, or None if unrecognized.

    Example:
        >>> resolve_hour_cycle("H12")
        'h12'
        >>> resolve_hour_cycle("h25") is None
        True
    """
    lowered = value.lower()
    return lowered if lowered in HOUR_CYCLES else None


def resolve_calendar(value: str) -> str | None:
    """Return the canonical calendar type, or None if unrecognized.

    Legacy names are mapped through CALENDAR_ALIASES first.

    Example:
        >>> resolve_calendar("gregorian")
        'gregory'
        >>> resolve_calendar("lunar") is None
        True
    """
    lowered = value.lower()
    lowered = CALENDAR_ALIASES.get(lowered, lowered)
    return lowered if lowered in CALENDARS else None
