"""LanguageTag serializer.

Converts a LanguageTag back to BCP-47 text. Serialization is a pure
function of the structured fields: equal tags always produce identical
strings. Case and order are emitted as stored; run the canonicalizer first
for the canonical form.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intlocale.constants import PRIVATE_USE_SINGLETON, SUBTAG_SEPARATOR

if TYPE_CHECKING:
    from .tag import LanguageTag

__all__ = ["serialize", "subtags"]


def subtags(tag: LanguageTag) -> list[str]:
    """Flatten a tag into its subtags in BCP-47 order.

    Grandfathered tags flatten to the subtags of their registered form.
    A tag holding only private use flattens without the "und" language.
    """
    if tag.grandfathered is not None:
        return tag.grandfathered.split(SUBTAG_SEPARATOR)

    parts: list[str] = []
    if not tag.is_private_use:
        parts.append(tag.language)
        parts.extend(tag.extlang)
        if tag.script is not None:
            parts.append(tag.script)
        if tag.region is not None:
            parts.append(tag.region)
        parts.extend(tag.variants)
        for singleton, values in tag.extensions:
            parts.append(singleton)
            parts.extend(values)
    if tag.privateuse:
        parts.append(PRIVATE_USE_SINGLETON)
        parts.extend(tag.privateuse)
    return parts


def serialize(tag: LanguageTag) -> str:
    """Serialize a tag to BCP-47 text.

    Example:
        >>> serialize(LanguageTag("zh", script="Hant", region="TW"))
        'zh-Hant-TW'
        >>> serialize(LanguageTag(privateuse=("whatever",)))
        'x-whatever'
    """
    return SUBTAG_SEPARATOR.join(subtags(tag))
