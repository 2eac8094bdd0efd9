"""BCP-47 tag parser and validator.

Assigns scanned tokens to grammar slots with a left-to-right state machine:

    Start -> Language -> ExtLang{0,3} -> Script? -> Region? -> Variant*
          -> Extension* -> PrivateUse? -> Done

The machine only moves forward. A token that does not fit the current slot
but fits a later one advances the state to that slot (a 4-letter token
right after the language skips ExtLang and lands on Script). A token that
fits no remaining slot is an error.

Two alternatives are checked before the main grammar:
    1. Grandfathered tags (fixed list, whole-tag case-insensitive match)
    2. Private-use-only tags ("x-...")

The whole input is validated before a LanguageTag is built; on failure no
partial result is ever produced.

Thread Safety:
    parse() and parse_tag() are pure. parse_tag() memoizes results in an
    lru_cache; cached LanguageTag objects are immutable and safe to share.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence

from intlocale.constants import MAX_EXTLANG_COUNT, MAX_PARSE_CACHE_SIZE, SUBTAG_SEPARATOR
from intlocale.core.registry import lookup_grandfathered
from intlocale.core.subtags import (
    is_extension_subtag,
    is_extlang_subtag,
    is_language_subtag,
    is_privateuse_singleton,
    is_privateuse_subtag,
    is_region_subtag,
    is_script_subtag,
    is_singleton,
    is_variant_subtag,
)
from intlocale.diagnostics import (
    DuplicateSingletonError,
    DuplicateVariantError,
    LocaleError,
    MissingLanguageError,
    MissingSingletonValueError,
    UnexpectedSubtagError,
)
from intlocale.enums import Slot

from .scanner import Token, scan
from .tag import LanguageTag

__all__ = ["clear_parse_cache", "is_well_formed", "parse", "parse_tag"]

logger = logging.getLogger(__name__)


def _next_slot(state: Slot) -> Slot:
    """Slot reported as 'expected' when a token fits nowhere after state."""
    match state:
        case Slot.LANGUAGE | Slot.EXTLANG:
            return Slot.SCRIPT
        case Slot.SCRIPT:
            return Slot.REGION
        case Slot.REGION | Slot.VARIANT:
            return Slot.VARIANT
        case _:
            return Slot.EXTENSION


def _parse_privateuse(tokens: Sequence[Token], start: int) -> tuple[str, ...]:
    """Collect private-use subtags following the 'x' at tokens[start]."""
    values = tokens[start + 1 :]
    if not values:
        singleton = tokens[start]
        raise MissingSingletonValueError(singleton=singleton.value, position=singleton.offset)
    for token in values:
        if not is_privateuse_subtag(token.value):
            raise UnexpectedSubtagError(
                token=token.value, expected_slot=Slot.PRIVATEUSE, position=token.offset
            )
    return tuple(token.value for token in values)


class _TagBuilder:
    """Mutable accumulator for one parse; discarded on error."""

    __slots__ = (
        "extensions",
        "extlang",
        "language",
        "privateuse",
        "region",
        "script",
        "seen_singletons",
        "seen_variants",
        "state",
        "variants",
    )

    def __init__(self, language: str) -> None:
        self.language = language
        self.extlang: list[str] = []
        self.script: str | None = None
        self.region: str | None = None
        self.variants: list[str] = []
        self.extensions: list[tuple[str, tuple[str, ...]]] = []
        self.privateuse: tuple[str, ...] = ()
        self.seen_variants: set[str] = set()
        self.seen_singletons: set[str] = set()
        self.state = Slot.LANGUAGE

    def build(self) -> LanguageTag:
        return LanguageTag(
            language=self.language,
            extlang=tuple(self.extlang),
            script=self.script,
            region=self.region,
            variants=tuple(self.variants),
            extensions=tuple(self.extensions),
            privateuse=self.privateuse,
        )


def parse(tokens: Sequence[Token]) -> LanguageTag:
    """Assign scanned tokens to grammar slots and build a LanguageTag.

    Grandfathered tags are matched first and returned directly; "x-..."
    private-use tags short-circuit to a tag with language "und".

    Args:
        tokens: Output of scan()

    Returns:
        Validated LanguageTag (case preserved, not canonicalized)

    Raises:
        MissingLanguageError: If the first subtag is not a language subtag
        UnexpectedSubtagError: If a subtag fits no remaining grammar slot
        DuplicateVariantError: If a variant repeats (case-insensitive)
        MissingSingletonValueError: If a singleton has no value subtags
        DuplicateSingletonError: If an extension singleton repeats
    """
    if not tokens:
        raise MissingLanguageError

    grandfathered = lookup_grandfathered(SUBTAG_SEPARATOR.join(t.value for t in tokens))
    if grandfathered is not None:
        logger.debug("Matched grandfathered tag %s", grandfathered.tag)
        return LanguageTag(grandfathered=SUBTAG_SEPARATOR.join(t.value for t in tokens))

    first = tokens[0]
    if is_privateuse_singleton(first.value):
        return LanguageTag(privateuse=_parse_privateuse(tokens, 0))
    if not is_language_subtag(first.value):
        raise MissingLanguageError(token=first.value, position=first.offset)

    builder = _TagBuilder(first.value)
    index = 1
    count = len(tokens)
    while index < count:
        token = tokens[index]
        value = token.value
        state = builder.state

        if (
            state in (Slot.LANGUAGE, Slot.EXTLANG)
            and len(builder.language) <= 3
            and len(builder.extlang) < MAX_EXTLANG_COUNT
            and is_extlang_subtag(value)
        ):
            builder.extlang.append(value)
            builder.state = Slot.EXTLANG
        elif state.order < Slot.SCRIPT.order and is_script_subtag(value):
            builder.script = value
            builder.state = Slot.SCRIPT
        elif state.order < Slot.REGION.order and is_region_subtag(value):
            builder.region = value
            builder.state = Slot.REGION
        elif state.order <= Slot.VARIANT.order and is_variant_subtag(value):
            key = value.lower()
            if key in builder.seen_variants:
                raise DuplicateVariantError(token=value, position=token.offset)
            builder.seen_variants.add(key)
            builder.variants.append(value)
            builder.state = Slot.VARIANT
        elif is_singleton(value):
            index = _parse_extension(tokens, index, builder)
            builder.state = Slot.EXTENSION
            continue
        elif is_privateuse_singleton(value):
            builder.privateuse = _parse_privateuse(tokens, index)
            builder.state = Slot.PRIVATEUSE
            break
        else:
            raise UnexpectedSubtagError(
                token=value, expected_slot=_next_slot(state), position=token.offset
            )
        index += 1

    return builder.build()


def _parse_extension(tokens: Sequence[Token], start: int, builder: _TagBuilder) -> int:
    """Consume one extension sequence; return the index of the next token."""
    singleton = tokens[start]
    key = singleton.value.lower()
    if key in builder.seen_singletons:
        raise DuplicateSingletonError(singleton=singleton.value, position=singleton.offset)

    index = start + 1
    values: list[str] = []
    while index < len(tokens) and is_extension_subtag(tokens[index].value):
        values.append(tokens[index].value)
        index += 1
    if not values:
        raise MissingSingletonValueError(singleton=singleton.value, position=singleton.offset)

    builder.seen_singletons.add(key)
    builder.extensions.append((singleton.value, tuple(values)))
    return index


@functools.lru_cache(maxsize=MAX_PARSE_CACHE_SIZE)
def parse_tag(raw: str) -> LanguageTag:
    """Scan and parse a raw BCP-47 tag.

    Results are memoized; repeated calls with the same string return the
    same immutable LanguageTag instance. Failures are not cached.

    Args:
        raw: Tag text, e.g. "en-US"

    Returns:
        Validated LanguageTag (case preserved, not canonicalized)

    Raises:
        TypeError: If raw is not a string
        ScanError: On lexical malformation
        ParseError: On grammar violation

    Example:
        >>> tag = parse_tag("zh-Hant-TW")
        >>> tag.language, tag.script, tag.region
        ('zh', 'Hant', 'TW')
        >>> parse_tag("x-private").language
        'und'
    """
    tag = parse(scan(raw))
    logger.debug("Parsed language tag %r", raw)
    return tag


def is_well_formed(raw: str) -> bool:
    """Check whether raw is a well-formed BCP-47 tag.

    Example:
        >>> is_well_formed("sl-rozaj-biske")
        True
        >>> is_well_formed("en-US-US")
        False
    """
    try:
        parse_tag(raw)
    except (LocaleError, TypeError):
        return False
    return True


def clear_parse_cache() -> None:
    """Clear the parse_tag memoization cache."""
    parse_tag.cache_clear()
