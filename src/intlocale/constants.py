"""Shared constants for intlocale.

This module provides centralized configuration constants used across
syntax and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar: Sentinels and delimiters from RFC 5646
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "UND",
    "SUBTAG_SEPARATOR",
    "POSIX_SEPARATOR",
    "PRIVATE_USE_SINGLETON",
    "UNICODE_EXTENSION_SINGLETON",
    "MAX_SUBTAG_LENGTH",
    "MAX_EXTLANG_COUNT",
    # Input limits
    "MAX_TAG_LENGTH",
    # Cache limits
    "MAX_PARSE_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Defaults
    "DEFAULT_LOCALE",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Language subtag reported when a tag carries none (private-use-only tags).
# RFC 5646 section 4.1: "und" is the registered code for an undetermined language.
UND: str = "und"

SUBTAG_SEPARATOR: str = "-"

# Babel and POSIX locale names join components with underscores (en_US).
POSIX_SEPARATOR: str = "_"

PRIVATE_USE_SINGLETON: str = "x"

UNICODE_EXTENSION_SINGLETON: str = "u"

# RFC 5646 section 2.1: no subtag is longer than 8 characters.
MAX_SUBTAG_LENGTH: int = 8

# RFC 5646 ABNF: extlang = 3ALPHA *2("-" 3ALPHA)
MAX_EXTLANG_COUNT: int = 3

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum accepted tag length in characters.
# RFC 5646 section 4.4.1 recommends implementations accept at least 35
# characters; real tags with extensions rarely exceed 100. Anything past
# this bound is rejected by the scanner before tokenization.
MAX_TAG_LENGTH: int = 1024

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized parse results (parse_tag is called with the same handful
# of tags in most applications).
MAX_PARSE_CACHE_SIZE: int = 512

# Maximum cached Babel Locale instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# DEFAULTS
# ============================================================================

# Returned by get_system_locale() when no locale can be detected.
DEFAULT_LOCALE: str = "en-US"
