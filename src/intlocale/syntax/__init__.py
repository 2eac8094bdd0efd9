"""BCP-47 syntax layer: scanning, parsing, serialization, canonicalization.

Pipeline:
    scan(raw) -> tokens -> parse(tokens) -> LanguageTag
    canonicalize(tag) -> LanguageTag
    serialize(tag) -> str

Python 3.13+. Zero external dependencies.
"""

from .canonicalizer import canonicalize, canonicalize_tag
from .parser import clear_parse_cache, is_well_formed, parse, parse_tag
from .scanner import Token, scan
from .serializer import serialize
from .tag import LanguageTag

__all__ = [
    "LanguageTag",
    "Token",
    "canonicalize",
    "canonicalize_tag",
    "clear_parse_cache",
    "is_well_formed",
    "parse",
    "parse_tag",
    "scan",
    "serialize",
]
