"""Locale fallback chains and RFC 4647 lookup.

fallback_chain() produces the truncation sequence RFC 4647 section 3.4
walks when looking up a single language range:

    zh-Hant-TW-x-private  ->  zh-Hant-TW-x-private
                              zh-Hant-TW
                              zh-Hant
                              zh

Whenever truncation leaves a singleton as the last subtag, the singleton
is removed too, so no chain entry ever ends in "-x" or "-u".

lookup() picks the single best available tag for a priority list of
requested tags. Matching is case-insensitive over canonical forms, so
"IW" in a request finds "he" in the available set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeAlias

from intlocale.constants import SUBTAG_SEPARATOR
from intlocale.diagnostics import LocaleError
from intlocale.runtime.locale import Locale
from intlocale.syntax.tag import LanguageTag

__all__ = ["LocaleLike", "fallback_chain", "lookup"]

logger = logging.getLogger(__name__)

_WILDCARD = "*"

LocaleLike: TypeAlias = str | LanguageTag | Locale
"""Anything Locale() accepts as its first argument."""


def _as_locale(locale: LocaleLike) -> Locale:
    return locale if isinstance(locale, Locale) else Locale(locale)


def fallback_chain(locale: LocaleLike) -> tuple[str, ...]:
    """Canonical tags from most to least specific.

    Args:
        locale: Locale, LanguageTag or BCP-47 string

    Returns:
        Non-empty tuple of canonical BCP-47 strings; the first element is
        the canonical form of locale itself

    Example:
        >>> fallback_chain("en-US-u-ca-gregory")
        ('en-US-u-ca-gregory', 'en-US-u-ca', 'en-US', 'en')
    """
    parts = _as_locale(locale).as_bcp47().split(SUBTAG_SEPARATOR)
    chain: list[str] = []
    while parts:
        chain.append(SUBTAG_SEPARATOR.join(parts))
        parts.pop()
        while parts and len(parts[-1]) == 1:
            parts.pop()
    return tuple(chain)


def _index_available(available: Iterable[LocaleLike]) -> dict[str, str]:
    index: dict[str, str] = {}
    for entry in available:
        canonical = _as_locale(entry).as_bcp47()
        index.setdefault(canonical.lower(), canonical)
    return index


def lookup(
    requested: LocaleLike | Iterable[LocaleLike],
    available: Iterable[LocaleLike],
    default: str | None = None,
) -> str | None:
    """Find the best available tag for a priority list of requests.

    Each requested tag is tried in order; for each one the fallback chain
    is walked from most to least specific and the first available match
    wins. The wildcard "*" and requested tags that fail to parse are
    skipped (requests typically come from untrusted Accept-Language
    headers). Available tags must be valid.

    Args:
        requested: One tag or tags in descending priority
        available: Tags the application supports
        default: Returned when nothing matches

    Returns:
        Canonical form of the matched available tag, or default

    Raises:
        LocaleError: If an available tag is malformed

    Example:
        >>> lookup(["de-CH-1996", "fr"], ["de", "en", "fr"])
        'de'
        >>> lookup("iw-IL", ["he", "en"])
        'he'
        >>> lookup("ja", ["en"], default="en")
        'en'
    """
    index = _index_available(available)
    if isinstance(requested, (str, LanguageTag, Locale)):
        requested = (requested,)

    for candidate in requested:
        if candidate == _WILDCARD:
            continue
        try:
            chain = fallback_chain(candidate)
        except LocaleError as exc:
            logger.debug("Skipping unparseable requested tag %r: %s", candidate, exc)
            continue
        for tag in chain:
            match = index.get(tag.lower())
            if match is not None:
                logger.debug("Matched requested tag %s to %s", candidate, match)
                return match

    logger.debug("No available tag matched; using default %r", default)
    return default
