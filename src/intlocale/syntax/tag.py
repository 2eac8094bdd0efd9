"""LanguageTag: immutable structured BCP-47 tag.

The structured result of parsing. Construction validates every field with
the same slot rules the parser applies, so a LanguageTag with unchecked
fields cannot exist, however it was created.

Variants are stored twice: as a tuple (insertion order, used for
non-canonical serialization) and as a frozenset (used for equality,
hashing, counting and enumeration). Enumeration therefore has no defined
order, and callers must not rely on one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, TypeAlias

from intlocale.constants import MAX_EXTLANG_COUNT, UND
from intlocale.core.registry import lookup_grandfathered
from intlocale.core.subtags import (
    is_extension_subtag,
    is_extlang_subtag,
    is_language_subtag,
    is_privateuse_subtag,
    is_region_subtag,
    is_script_subtag,
    is_singleton,
    is_variant_subtag,
)
from intlocale.diagnostics import (
    DuplicateSingletonError,
    DuplicateVariantError,
    MissingLanguageError,
    MissingSingletonValueError,
    UnexpectedSubtagError,
)
from intlocale.enums import Slot

__all__ = ["ExtensionSequence", "LanguageTag"]

ExtensionSequence: TypeAlias = tuple[tuple[str, tuple[str, ...]], ...]
"""Ordered (singleton, value subtags) pairs, e.g. (("u", ("ca", "gregory")),)."""


def _as_extension_sequence(
    extensions: Mapping[str, Iterable[str]] | Iterable[tuple[str, Iterable[str]]],
) -> ExtensionSequence:
    items = extensions.items() if isinstance(extensions, Mapping) else extensions
    return tuple((singleton, tuple(values)) for singleton, values in items)


@dataclass(frozen=True, slots=True, eq=False)
class LanguageTag:
    """Immutable, validated BCP-47 language tag.

    Fields hold subtags exactly as supplied (case preserved); use
    canonicalize() or as_bcp47() for the normalized form.

    Attributes:
        language: Primary language subtag; "und" when the tag has none
        extlang: Extended language subtags (0-3, each 3 letters)
        script: Script subtag or None
        region: Region subtag or None
        variants: Variant subtags in insertion order, no duplicates
        extensions: Ordered (singleton, values) pairs, singletons unique
        privateuse: Subtags following "x"; empty when absent
        grandfathered: Registered legacy tag this was parsed from, or None

    Example:
        >>> tag = LanguageTag("en", region="US")
        >>> tag.language, tag.region, tag.script
        ('en', 'US', None)
        >>> LanguageTag("ca", variants=("Valencia", "valencia"))
        Traceback (most recent call last):
        ...
        intlocale.diagnostics.errors.DuplicateVariantError: ...
    """

    language: str = UND
    extlang: tuple[str, ...] = ()
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: ExtensionSequence = ()
    privateuse: tuple[str, ...] = ()
    grandfathered: str | None = None
    _variant_set: frozenset[str] = field(init=False, repr=False, default=frozenset())

    def __post_init__(self) -> None:
        """Normalize containers to tuples and validate every field.

        Raises:
            MissingLanguageError: If language is empty
            UnexpectedSubtagError: If any subtag fails its slot's shape rule
            DuplicateVariantError: If a variant repeats (case-insensitive)
            MissingSingletonValueError: If an extension has no value subtags
            DuplicateSingletonError: If an extension singleton repeats
            ValueError: If a grandfathered tag is combined with other fields
        """
        object.__setattr__(self, "extlang", tuple(self.extlang))
        object.__setattr__(self, "variants", tuple(self.variants))
        object.__setattr__(self, "privateuse", tuple(self.privateuse))
        object.__setattr__(self, "extensions", _as_extension_sequence(self.extensions))

        if self.grandfathered is not None:
            self._validate_grandfathered(self.grandfathered)
        else:
            self._validate_language()
            self._validate_optional(self.script, Slot.SCRIPT, is_script_subtag)
            self._validate_optional(self.region, Slot.REGION, is_region_subtag)
            self._validate_variants()
            self._validate_extensions()
            self._validate_privateuse()

        object.__setattr__(self, "_variant_set", frozenset(self.variants))

    # ------------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------------

    def _validate_grandfathered(self, grandfathered: str) -> None:
        if lookup_grandfathered(grandfathered) is None:
            raise UnexpectedSubtagError(token=grandfathered, expected_slot="grandfathered")
        if (
            self.language != UND
            or self.extlang
            or self.script is not None
            or self.region is not None
            or self.variants
            or self.extensions
            or self.privateuse
        ):
            msg = f"Grandfathered tag '{grandfathered}' cannot carry other subtags"
            raise ValueError(msg)

    def _validate_language(self) -> None:
        if not self.language:
            raise MissingLanguageError
        if not is_language_subtag(self.language):
            raise UnexpectedSubtagError(token=str(self.language), expected_slot=Slot.LANGUAGE)
        if self.extlang and (len(self.language) > 3 or len(self.extlang) > MAX_EXTLANG_COUNT):
            raise UnexpectedSubtagError(token=str(self.extlang[0]), expected_slot=Slot.SCRIPT)
        for subtag in self.extlang:
            if not is_extlang_subtag(subtag):
                raise UnexpectedSubtagError(token=str(subtag), expected_slot=Slot.EXTLANG)

    @staticmethod
    def _validate_optional(
        value: str | None, slot: Slot, predicate: Callable[[object], bool]
    ) -> None:
        if value is not None and not predicate(value):
            raise UnexpectedSubtagError(token=str(value), expected_slot=slot)

    def _validate_variants(self) -> None:
        seen: set[str] = set()
        for variant in self.variants:
            if not is_variant_subtag(variant):
                raise UnexpectedSubtagError(token=str(variant), expected_slot=Slot.VARIANT)
            key = variant.lower()
            if key in seen:
                raise DuplicateVariantError(token=variant)
            seen.add(key)

    def _validate_extensions(self) -> None:
        seen: set[str] = set()
        for singleton, values in self.extensions:
            if not is_singleton(singleton):
                raise UnexpectedSubtagError(token=str(singleton), expected_slot=Slot.EXTENSION)
            key = singleton.lower()
            if key in seen:
                raise DuplicateSingletonError(singleton=singleton)
            seen.add(key)
            if not values:
                raise MissingSingletonValueError(singleton=singleton)
            for value in values:
                if not is_extension_subtag(value):
                    raise UnexpectedSubtagError(token=str(value), expected_slot=Slot.EXTENSION)

    def _validate_privateuse(self) -> None:
        for subtag in self.privateuse:
            if not is_privateuse_subtag(subtag):
                raise UnexpectedSubtagError(token=str(subtag), expected_slot=Slot.PRIVATEUSE)

    # ------------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------------

    def _key(self) -> tuple[Any, ...]:
        return (
            self.language,
            self.extlang,
            self.script,
            self.region,
            self._variant_set,
            self.extensions,
            self.privateuse,
            self.grandfathered,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageTag):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # ------------------------------------------------------------------------
    # Variants contract
    # ------------------------------------------------------------------------

    def num_variants(self) -> int:
        """Number of variants. O(1): no enumeration."""
        return len(self._variant_set)

    def for_each_variant(self, visit: Callable[[str], object]) -> None:
        """Call visit once per variant. Iteration order is unspecified.

        Example:
            >>> seen: set[str] = set()
            >>> LanguageTag("sl", variants=("rozaj", "biske")).for_each_variant(seen.add)
            >>> seen == {"rozaj", "biske"}
            True
        """
        for variant in self._variant_set:
            visit(variant)

    def iter_variants(self) -> Iterator[str]:
        """Iterate variants. Finite and restartable; order is unspecified."""
        return iter(self._variant_set)

    # ------------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------------

    def extension(self, singleton: str) -> tuple[str, ...] | None:
        """Value subtags of the extension introduced by singleton, or None."""
        key = singleton.lower()
        for name, values in self.extensions:
            if name.lower() == key:
                return values
        return None

    @property
    def extension_map(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only singleton -> values mapping, in tag order."""
        return MappingProxyType(dict(self.extensions))

    # ------------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------------

    @property
    def is_grandfathered(self) -> bool:
        """True if this tag is a registered legacy whole-tag exception."""
        return self.grandfathered is not None

    @property
    def is_private_use(self) -> bool:
        """True if the tag consists only of a private-use sequence."""
        return (
            self.grandfathered is None
            and self.language == UND
            and not self.extlang
            and self.script is None
            and self.region is None
            and not self.variants
            and not self.extensions
            and bool(self.privateuse)
        )

    def replace(self, **changes: Any) -> LanguageTag:
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)

    def strip_extensions(self) -> LanguageTag:
        """Return a copy without extensions and private use."""
        if not self.extensions and not self.privateuse:
            return self
        return replace(self, extensions=(), privateuse=())

    def as_bcp47(self) -> str:
        """Canonical BCP-47 serialization (case, aliases, and order normalized)."""
        from .canonicalizer import canonicalize  # noqa: PLC0415 - circular
        from .serializer import serialize  # noqa: PLC0415 - circular

        return serialize(canonicalize(self))

    def __str__(self) -> str:
        """Serialization of the fields as stored (not canonicalized)."""
        from .serializer import serialize  # noqa: PLC0415 - circular

        return serialize(self)
