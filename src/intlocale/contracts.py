"""Capability contracts for language identifiers.

Small, independent protocols so that an implementation can offer only the
capabilities it supports, and downstream components (formatters, message
bundles) can depend on exactly what they read:

    LanguageIdentifier: language / script / region accessors
    Variants: variant count and enumeration
    AsBCP47: canonical BCP-47 serialization

All protocols are runtime-checkable, so ``isinstance(obj, AsBCP47)`` works
for structural checks at API boundaries.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Protocol, runtime_checkable

__all__ = [
    "AsBCP47",
    "Identifier",
    "LanguageIdentifier",
    "Variants",
    "collect_variants",
]


@runtime_checkable
class LanguageIdentifier(Protocol):
    """Immutable language identifier components.

    ``language`` is never empty: it is the literal ``"und"`` when the
    identifier has no language. ``script`` and ``region`` are None when
    absent, never an empty string.
    """

    @property
    def language(self) -> str: ...

    @property
    def script(self) -> str | None: ...

    @property
    def region(self) -> str | None: ...


@runtime_checkable
class Variants(Protocol):
    """Access to variant subtags. Variants are guaranteed to be valid.

    There is no ``has_variants`` predicate: ``num_variants() == 0`` is
    equivalent and does not require counting.

    Iteration order is unspecified. Callers must collect into a set (see
    collect_variants) rather than rely on any sequence.
    """

    def num_variants(self) -> int:
        """Number of variants, without enumerating them."""
        ...

    def for_each_variant(self, visit: Callable[[str], object]) -> None:
        """Call visit once per variant, in unspecified order."""
        ...

    def iter_variants(self) -> Iterator[str]:
        """Finite, restartable iterator over variants, in unspecified order."""
        ...


@runtime_checkable
class AsBCP47(Protocol):
    """Conversion to the canonical BCP-47 representation."""

    def as_bcp47(self) -> str:
        """Canonical serialization of all identifier/locale properties."""
        ...


@runtime_checkable
class Identifier(LanguageIdentifier, Variants, AsBCP47, Protocol):
    """All identifier capabilities together."""


def collect_variants(identifier: Variants) -> frozenset[str]:
    """Gather variants into a set, the only order-safe way to compare them.

    Example:
        >>> from intlocale import parse_tag
        >>> collect_variants(parse_tag("sl-rozaj-biske")) == {"biske", "rozaj"}
        True
    """
    seen: set[str] = set()
    identifier.for_each_variant(seen.add)
    return frozenset(seen)
