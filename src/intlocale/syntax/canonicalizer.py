"""Language tag canonicalization.

Maps any valid LanguageTag to the unique canonical form of the set of
semantically equivalent tags:

    1. Grandfathered tags are replaced by their preferred value, if any
    2. A single extlang replaces the primary language (zh-yue -> yue)
    3. Case: language lower, script title, region upper, rest lower
    4. Deprecated/aliased subtags are replaced via the static registry
    5. Variants sorted alphabetically; extensions sorted by singleton;
       private use stays last

canonicalize() is pure, total on valid input, and idempotent.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from intlocale.core.registry import (
    lookup_grandfathered,
    resolve_language,
    resolve_region,
    resolve_script,
    resolve_variant,
)

from .parser import parse_tag
from .serializer import serialize
from .tag import ExtensionSequence, LanguageTag

__all__ = ["canonicalize", "canonicalize_tag"]

logger = logging.getLogger(__name__)


def _canonical_grandfathered(tag: LanguageTag, grandfathered: str) -> LanguageTag:
    entry = lookup_grandfathered(grandfathered)
    if entry is None:  # pragma: no cover - LanguageTag rejects unknown legacy tags
        return tag
    if entry.preferred is None:
        return LanguageTag(grandfathered=entry.tag)
    logger.debug("Replacing grandfathered tag %s with %s", entry.tag, entry.preferred)
    return canonicalize(parse_tag(entry.preferred))


def _canonical_variants(variants: tuple[str, ...]) -> tuple[str, ...]:
    resolved: set[str] = set()
    for variant in variants:
        preferred = resolve_variant(variant)
        if preferred != variant.lower():
            logger.debug("Replacing variant %s with %s", variant, preferred)
        resolved.add(preferred)
    return tuple(sorted(resolved))


def _canonical_extensions(extensions: ExtensionSequence) -> ExtensionSequence:
    lowered = (
        (singleton.lower(), tuple(value.lower() for value in values))
        for singleton, values in extensions
    )
    return tuple(sorted(lowered, key=lambda item: item[0]))


def canonicalize(tag: LanguageTag) -> LanguageTag:
    """Return the canonical form of tag.

    Unknown subtags pass through with only their case normalized.

    Args:
        tag: Any valid LanguageTag

    Returns:
        Canonical LanguageTag (may be tag itself if already canonical)

    Example:
        >>> str(canonicalize(parse_tag("IW-latn-il")))
        'he-Latn-IL'
        >>> str(canonicalize(parse_tag("sl-rozaj-Biske-1994")))
        'sl-1994-biske-rozaj'
        >>> str(canonicalize(parse_tag("i-klingon")))
        'tlh'
    """
    if tag.grandfathered is not None:
        return _canonical_grandfathered(tag, tag.grandfathered)

    language = tag.language.lower()
    extlang = tuple(subtag.lower() for subtag in tag.extlang)
    if len(extlang) == 1:
        language, extlang = extlang[0], ()

    preferred_language = resolve_language(language)
    if preferred_language != language:
        logger.debug("Replacing language %s with %s", language, preferred_language)

    canonical = LanguageTag(
        language=preferred_language,
        extlang=extlang,
        script=resolve_script(tag.script) if tag.script is not None else None,
        region=resolve_region(tag.region) if tag.region is not None else None,
        variants=_canonical_variants(tag.variants),
        extensions=_canonical_extensions(tag.extensions),
        privateuse=tuple(subtag.lower() for subtag in tag.privateuse),
    )
    if canonical == tag and canonical.variants == tag.variants:
        return tag
    return canonical


def canonicalize_tag(raw: str) -> str:
    """Parse raw and return its canonical BCP-47 string.

    Example:
        >>> canonicalize_tag("EN-us")
        'en-US'
        >>> canonicalize_tag("en-u-ca-gregory-a-foo")
        'en-a-foo-u-ca-gregory'
    """
    return serialize(canonicalize(parse_tag(raw)))
