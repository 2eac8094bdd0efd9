"""Core utilities shared across syntax and runtime layers.

This package provides foundational pieces that both the syntax layer
(scanning, parsing, canonicalization) and the runtime layer (options,
Locale objects) depend on:

    core <- syntax <- runtime

Modules:
    subtags: Per-slot subtag shape predicates
    registry: Static grandfathered/alias/keyword tables
    babel_compat: Lazy access to the optional Babel dependency

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .registry import GrandfatheredTag, lookup_grandfathered

__all__ = [
    "BabelImportError",
    "GrandfatheredTag",
    "is_babel_available",
    "lookup_grandfathered",
    "require_babel",
]
