"""intlocale - BCP-47 language tags and ECMA-402 style locales.

Parses, validates and canonicalizes BCP-47 (RFC 5646) language tags and
builds immutable Locale objects with constructor options, in the manner of
ECMA-402 ``Intl.Locale``.

Public API:
    Locale - Immutable locale (tag + options), canonical at construction
    LanguageTag - Immutable structured tag, case preserved
    parse_tag - Parse a BCP-47 string to a LanguageTag
    canonicalize_tag - Parse and return the canonical string
    is_well_formed - Grammar check without raising
    Script, Region, HourCycle, Calendar - Locale constructor options
    lookup, fallback_chain - RFC 4647 lookup helpers

Exceptions:
    LocaleError - Base exception class
    ScanError - Lexically malformed input
    ParseError - Grammar violations
    MergeError - Invalid constructor options

Submodules:
    intlocale.syntax - Scanner, parser, serializer, canonicalizer
    intlocale.runtime - Locale, options, Unicode extension keywords
    intlocale.contracts - LanguageIdentifier / Variants / AsBCP47 protocols
    intlocale.diagnostics - Error types, codes and formatting
    intlocale.locale_utils - Babel bridge (likely subtags, display names)
"""

# Essential Public API - Minimal exports for clean namespace
from .contracts import AsBCP47, Identifier, LanguageIdentifier, Variants, collect_variants
from .diagnostics import LocaleError, MergeError, ParseError, ScanError
from .localization import fallback_chain, lookup
from .runtime import Calendar, HourCycle, Locale, Region, Script
from .syntax import LanguageTag, canonicalize_tag, is_well_formed, parse_tag

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    # This should never happen on Python 3.13+ (importlib.metadata is stdlib since 3.8)
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("intlocale")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__rfc__ = "RFC 5646"
__spec_url__ = "https://www.rfc-editor.org/rfc/rfc5646"

__all__ = [
    "AsBCP47",
    "Calendar",
    "HourCycle",
    "Identifier",
    "LanguageIdentifier",
    "LanguageTag",
    "Locale",
    "LocaleError",
    "MergeError",
    "ParseError",
    "Region",
    "ScanError",
    "Script",
    "Variants",
    "__rfc__",
    "__spec_url__",
    "__version__",
    "canonicalize_tag",
    "collect_variants",
    "fallback_chain",
    "is_well_formed",
    "lookup",
    "parse_tag",
]
