"""Locale negotiation helpers built on canonical tags.

Submodules:
    fallback - fallback_chain (RFC 4647 truncation) and lookup

Python 3.13+. Zero external dependencies.
"""

from intlocale.localization.fallback import LocaleLike, fallback_chain, lookup

__all__ = [
    "LocaleLike",
    "fallback_chain",
    "lookup",
]
