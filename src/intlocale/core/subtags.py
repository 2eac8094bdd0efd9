"""Unified subtag shape validation for BCP-47 language tags.

This module provides the single source of truth for the per-slot grammar
rules of RFC 5646 section 2.1, ensuring consistent validation across the
parser, the LanguageTag constructor, and the options merger.

BCP-47 Subtag Grammar:
    language   = 2*8ALPHA
    extlang    = 3ALPHA
    script     = 4ALPHA
    region     = 2ALPHA / 3DIGIT
    variant    = 5*8alphanum / (DIGIT 3alphanum)
    singleton  = DIGIT / %x41-57 / %x59-5A / %x61-77 / %x79-7A   (not "x")
    extension  = 2*8alphanum   (each value subtag after a singleton)
    privateuse = 1*8alphanum   (each subtag after "x")

Unicode locale extension (UTS #35):
    key        = alphanum alpha
    type       = 3*8alphanum

All checks are ASCII-only: Python's str.isalpha() accepts Unicode letters
(e.g., 'é', 'ñ') which are never valid in a language tag.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from types import MappingProxyType

from intlocale.constants import PRIVATE_USE_SINGLETON
from intlocale.enums import Slot

__all__ = [
    "SLOT_VALIDATORS",
    "is_extension_subtag",
    "is_extlang_subtag",
    "is_language_subtag",
    "is_privateuse_singleton",
    "is_privateuse_subtag",
    "is_region_subtag",
    "is_script_subtag",
    "is_singleton",
    "is_subtag_token",
    "is_unicode_key",
    "is_unicode_type",
    "is_variant_subtag",
    "titlecase",
]

# Compiled once at module load; C-level matching outperforms Python iteration.
# re.ASCII keeps [a-z] semantics strict even with re.IGNORECASE.
_TOKEN = re.compile(r"[a-z0-9]{1,8}", re.ASCII | re.IGNORECASE)
_LANGUAGE = re.compile(r"[a-z]{2,8}", re.ASCII | re.IGNORECASE)
_EXTLANG = re.compile(r"[a-z]{3}", re.ASCII | re.IGNORECASE)
_SCRIPT = re.compile(r"[a-z]{4}", re.ASCII | re.IGNORECASE)
_REGION = re.compile(r"[a-z]{2}|[0-9]{3}", re.ASCII | re.IGNORECASE)
_VARIANT = re.compile(r"[a-z0-9]{5,8}|[0-9][a-z0-9]{3}", re.ASCII | re.IGNORECASE)
_SINGLETON = re.compile(r"[a-wyz0-9]", re.ASCII | re.IGNORECASE)
_EXTENSION = re.compile(r"[a-z0-9]{2,8}", re.ASCII | re.IGNORECASE)
_PRIVATEUSE = re.compile(r"[a-z0-9]{1,8}", re.ASCII | re.IGNORECASE)
_UNICODE_KEY = re.compile(r"[a-z0-9][a-z]", re.ASCII | re.IGNORECASE)
_UNICODE_TYPE = re.compile(r"[a-z0-9]{3,8}", re.ASCII | re.IGNORECASE)


def _matches(pattern: re.Pattern[str], value: object) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_subtag_token(value: object) -> bool:
    """Check lexical validity of a single subtag: 1-8 ASCII alphanumerics.

    This is the only check the scanner performs; slot-specific shape is the
    parser's concern.

    Example:
        >>> is_subtag_token("Latn")
        True
        >>> is_subtag_token("toolongtag")
        False
        >>> is_subtag_token("é")
        False
    """
    return _matches(_TOKEN, value)


def is_language_subtag(value: object) -> bool:
    """Check for a primary language subtag (2-8 ASCII letters).

    Example:
        >>> is_language_subtag("en")
        True
        >>> is_language_subtag("e")
        False
    """
    return _matches(_LANGUAGE, value)


def is_extlang_subtag(value: object) -> bool:
    """Check for an extended language subtag (exactly 3 ASCII letters)."""
    return _matches(_EXTLANG, value)


def is_script_subtag(value: object) -> bool:
    """Check for a script subtag (exactly 4 ASCII letters).

    Example:
        >>> is_script_subtag("Latn")
        True
        >>> is_script_subtag("Lat")
        False
    """
    return _matches(_SCRIPT, value)


def is_region_subtag(value: object) -> bool:
    """Check for a region subtag (2 ASCII letters or 3 digits).

    Example:
        >>> is_region_subtag("US")
        True
        >>> is_region_subtag("419")
        True
        >>> is_region_subtag("USA")
        False
    """
    return _matches(_REGION, value)


def is_variant_subtag(value: object) -> bool:
    """Check for a variant subtag.

    Variants are 5-8 alphanumerics, or 4 characters starting with a digit
    (so that a 4-letter variant can never be confused with a script).

    Example:
        >>> is_variant_subtag("valencia")
        True
        >>> is_variant_subtag("1996")
        True
        >>> is_variant_subtag("abcd")
        False
    """
    return _matches(_VARIANT, value)


def is_singleton(value: object) -> bool:
    """Check for an extension singleton (one alphanumeric other than 'x')."""
    return _matches(_SINGLETON, value)


def is_extension_subtag(value: object) -> bool:
    """Check for an extension value subtag (2-8 alphanumerics)."""
    return _matches(_EXTENSION, value)


def is_privateuse_subtag(value: object) -> bool:
    """Check for a private-use subtag (1-8 alphanumerics)."""
    return _matches(_PRIVATEUSE, value)


def is_privateuse_singleton(value: object) -> bool:
    """Check for the private-use introducer 'x' (either case)."""
    return isinstance(value, str) and value.lower() == PRIVATE_USE_SINGLETON


def is_unicode_key(value: object) -> bool:
    """Check for a Unicode extension key (alphanumeric then letter, e.g. 'ca')."""
    return _matches(_UNICODE_KEY, value)


def is_unicode_type(value: object) -> bool:
    """Check for a Unicode extension type subtag (3-8 alphanumerics)."""
    return _matches(_UNICODE_TYPE, value)


def titlecase(value: str) -> str:
    """Uppercase the first character and lowercase the rest ('latn' -> 'Latn').

    str.title() is not used because it treats digits as word boundaries.
    """
    return value[:1].upper() + value[1:].lower()


# Slot -> single-subtag validator. Extension and private-use slots validate
# the value subtags that follow their singleton.
SLOT_VALIDATORS: Mapping[Slot, Callable[[object], bool]] = MappingProxyType(
    {
        Slot.LANGUAGE: is_language_subtag,
        Slot.EXTLANG: is_extlang_subtag,
        Slot.SCRIPT: is_script_subtag,
        Slot.REGION: is_region_subtag,
        Slot.VARIANT: is_variant_subtag,
        Slot.EXTENSION: is_extension_subtag,
        Slot.PRIVATEUSE: is_privateuse_subtag,
    }
)
