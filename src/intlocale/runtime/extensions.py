"""Unicode locale extension (-u-) keyword handling.

Extensions are stored on LanguageTag as opaque subtag sequences. This
module gives the Unicode extension just enough structure for the options
merger to read and write the "ca" (calendar) and "hc" (hour cycle)
keywords:

    u-extension = *attribute *(key *type)
    attribute   = 3*8alphanum    (only before the first key)
    key         = 2 characters
    type        = 3*8alphanum    (zero or more per key)

Multi-subtag values such as "islamic-civil" are kept as one keyword value
joined with '-'.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from intlocale.constants import SUBTAG_SEPARATOR, UNICODE_EXTENSION_SINGLETON
from intlocale.syntax.tag import LanguageTag

__all__ = [
    "UnicodeExtension",
    "get_unicode_keyword",
    "parse_unicode_extension",
    "with_unicode_keywords",
]

_KEY_LENGTH = 2


@dataclass(frozen=True, slots=True)
class UnicodeExtension:
    """Structured view of a -u- extension.

    Attributes:
        attributes: Leading attribute subtags
        keywords: (key, type subtags) pairs in source order
    """

    attributes: tuple[str, ...] = ()
    keywords: tuple[tuple[str, tuple[str, ...]], ...] = ()

    def get(self, key: str) -> str | None:
        """Keyword value joined with '-'; "" for a key without types; None if absent."""
        wanted = key.lower()
        for name, types in self.keywords:
            if name.lower() == wanted:
                return SUBTAG_SEPARATOR.join(types)
        return None

    def to_subtags(self) -> tuple[str, ...]:
        """Flatten back to extension value subtags, keywords sorted by key."""
        subtags: list[str] = list(self.attributes)
        for name, types in sorted(self.keywords, key=lambda item: item[0].lower()):
            subtags.append(name)
            subtags.extend(types)
        return tuple(subtags)


def parse_unicode_extension(values: tuple[str, ...]) -> UnicodeExtension:
    """Split -u- value subtags into attributes and keywords.

    Every 2-character subtag starts a new keyword; longer subtags are
    attributes before the first key and types after it.

    Example:
        >>> parse_unicode_extension(("ca", "islamic", "civil", "hc", "h12")).get("ca")
        'islamic-civil'
    """
    attributes: list[str] = []
    keywords: list[tuple[str, list[str]]] = []
    for subtag in values:
        if len(subtag) == _KEY_LENGTH:
            keywords.append((subtag, []))
        elif keywords:
            keywords[-1][1].append(subtag)
        else:
            attributes.append(subtag)
    return UnicodeExtension(
        attributes=tuple(attributes),
        keywords=tuple((key, tuple(types)) for key, types in keywords),
    )


def get_unicode_keyword(tag: LanguageTag, key: str) -> str | None:
    """Read one Unicode extension keyword from tag, or None if absent."""
    values = tag.extension(UNICODE_EXTENSION_SINGLETON)
    if values is None:
        return None
    return parse_unicode_extension(values).get(key)


def with_unicode_keywords(tag: LanguageTag, keywords: Mapping[str, str]) -> LanguageTag:
    """Return a copy of tag with the given -u- keywords set.

    Existing values for the same keys are replaced; other keywords and
    attributes are kept. Keywords are emitted sorted by key. The -u-
    extension keeps its position, or is appended if the tag had none.

    Args:
        tag: Base tag (not grandfathered)
        keywords: key -> value, where value may contain '-' separated types

    Returns:
        New validated LanguageTag
    """
    if not keywords:
        return tag

    current = tag.extension(UNICODE_EXTENSION_SINGLETON)
    extension = parse_unicode_extension(current or ())
    replaced = {key.lower() for key in keywords}
    merged = [
        (name, types) for name, types in extension.keywords if name.lower() not in replaced
    ]
    merged.extend(
        (key.lower(), tuple(value.lower().split(SUBTAG_SEPARATOR)) if value else ())
        for key, value in keywords.items()
    )
    values = UnicodeExtension(extension.attributes, tuple(merged)).to_subtags()

    if current is None:
        extensions = (*tag.extensions, (UNICODE_EXTENSION_SINGLETON, values))
    else:
        extensions = tuple(
            (singleton, values if singleton.lower() == UNICODE_EXTENSION_SINGLETON else old)
            for singleton, old in tag.extensions
        )
    return tag.replace(extensions=extensions)
