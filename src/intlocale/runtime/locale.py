"""Locale: immutable ECMA-402 style locale object.

A Locale wraps one canonical LanguageTag together with the resolved
constructor options. Construction runs the whole pipeline

    parse -> merge options -> canonicalize

and either yields a fully valid Locale or raises; there is no way to
obtain a Locale in an invalid or partially built state. Every "mutation"
(with_options, maximize, minimize) returns a new instance.

Thread Safety:
    Locale instances are immutable and may be shared freely.

Python 3.13+. Babel is optional (maximize, minimize, to_babel, display_name).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from intlocale.constants import SUBTAG_SEPARATOR
from intlocale.syntax.parser import parse_tag
from intlocale.syntax.serializer import serialize
from intlocale.syntax.tag import LanguageTag

from .options import Opt, apply_options

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["Locale"]

logger = logging.getLogger(__name__)


class Locale:
    """Immutable locale: a canonical language tag plus resolved options.

    Implements the LanguageIdentifier, Variants and AsBCP47 contracts.

    Args:
        tag: BCP-47 string, LanguageTag, or another Locale
        options: Script/Region/HourCycle/Calendar overrides

    Raises:
        TypeError: If tag is not a str, LanguageTag or Locale
        ScanError: If tag is lexically malformed
        ParseError: If tag violates the BCP-47 grammar
        MergeError: If an option is invalid or unrecognized

    Example:
        >>> from intlocale.runtime.options import Script
        >>> loc = Locale("en-US", [Script("Latn")])
        >>> loc.as_bcp47()
        'en-Latn-US'
        >>> loc.language, loc.script, loc.region
        ('en', 'Latn', 'US')
    """

    __slots__ = ("_bcp47", "_calendar", "_frozen", "_hour_cycle", "_tag")

    _tag: LanguageTag
    _hour_cycle: str | None
    _calendar: str | None
    _bcp47: str
    _frozen: bool

    def __init__(self, tag: str | LanguageTag | Locale, options: Iterable[Opt] = ()) -> None:
        match tag:
            case Locale():
                base = tag.tag
            case LanguageTag():
                base = tag
            case str():
                base = parse_tag(tag)
            case _:
                msg = f"Locale tag must be str, LanguageTag or Locale, got {type(tag).__name__}"
                raise TypeError(msg)

        result = apply_options(base, options)
        object.__setattr__(self, "_tag", result.tag)
        object.__setattr__(self, "_hour_cycle", result.hour_cycle)
        object.__setattr__(self, "_calendar", result.calendar)
        object.__setattr__(self, "_bcp47", serialize(result.tag))
        object.__setattr__(self, "_frozen", True)
        logger.debug("Constructed locale %s", self._bcp47)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations.

        Raises:
            AttributeError: Always
        """
        msg = f"Locale is immutable; cannot set '{name}'"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            AttributeError: Always
        """
        msg = f"Locale is immutable; cannot delete '{name}'"
        raise AttributeError(msg)

    # ------------------------------------------------------------------------
    # LanguageIdentifier contract
    # ------------------------------------------------------------------------

    @property
    def language(self) -> str:
        """Language subtag; "und" when unspecified. Never empty."""
        return self._tag.language

    @property
    def script(self) -> str | None:
        """Script subtag, or None."""
        return self._tag.script

    @property
    def region(self) -> str | None:
        """Region subtag, or None."""
        return self._tag.region

    # ------------------------------------------------------------------------
    # Variants contract
    # ------------------------------------------------------------------------

    def num_variants(self) -> int:
        """Number of variants. O(1)."""
        return self._tag.num_variants()

    def for_each_variant(self, visit: Callable[[str], object]) -> None:
        """Call visit once per variant. Iteration order is unspecified."""
        self._tag.for_each_variant(visit)

    def iter_variants(self) -> Iterator[str]:
        """Iterate variants. Order is unspecified."""
        return self._tag.iter_variants()

    # ------------------------------------------------------------------------
    # AsBCP47 contract
    # ------------------------------------------------------------------------

    def as_bcp47(self) -> str:
        """Canonical BCP-47 string, including merged -u- keywords."""
        return self._bcp47

    # ------------------------------------------------------------------------
    # Locale properties
    # ------------------------------------------------------------------------

    @property
    def tag(self) -> LanguageTag:
        """The canonical LanguageTag."""
        return self._tag

    @property
    def hour_cycle(self) -> str | None:
        """Resolved hour cycle (h11, h12, h23, h24), or None."""
        return self._hour_cycle

    @property
    def calendar(self) -> str | None:
        """Resolved calendar type, or None."""
        return self._calendar

    @property
    def base_name(self) -> str:
        """Tag without extensions or private use (ECMA-402 ``baseName``)."""
        return serialize(self._tag.strip_extensions())

    def with_options(self, *options: Opt) -> Locale:
        """Return a new Locale with options applied on top of this one."""
        return Locale(self, options)

    def fallback_chain(self) -> tuple[str, ...]:
        """Canonical tags from this locale down to its bare language.

        Example:
            >>> Locale("zh-Hant-TW").fallback_chain()
            ('zh-Hant-TW', 'zh-Hant', 'zh')
        """
        from intlocale.localization.fallback import fallback_chain  # noqa: PLC0415 - circular

        return fallback_chain(self)

    # ------------------------------------------------------------------------
    # CLDR bridge (requires Babel)
    # ------------------------------------------------------------------------

    def maximize(self) -> Locale:
        """Add likely script and region (CLDR likely subtags).

        Raises:
            BabelImportError: If Babel is not installed
        """
        from intlocale.locale_utils import maximize  # noqa: PLC0415 - circular

        return self._derive(maximize(self._tag))

    def minimize(self) -> Locale:
        """Remove script and region that maximize() would add back.

        Raises:
            BabelImportError: If Babel is not installed
        """
        from intlocale.locale_utils import minimize  # noqa: PLC0415 - circular

        return self._derive(minimize(self._tag))

    def to_babel(self) -> BabelLocale:
        """Equivalent Babel Locale (cached).

        Raises:
            BabelImportError: If Babel is not installed
            babel.core.UnknownLocaleError: If CLDR has no data for this locale
        """
        from intlocale.locale_utils import get_babel_locale  # noqa: PLC0415 - circular

        return get_babel_locale(self)

    def display_name(self, in_locale: str | Locale | None = None) -> str | None:
        """Localized display name via CLDR, e.g. "English (United States)".

        Args:
            in_locale: Locale to render the name in (defaults to this locale)

        Raises:
            BabelImportError: If Babel is not installed
        """
        from intlocale.locale_utils import display_name  # noqa: PLC0415 - circular

        return display_name(self, in_locale)

    def _derive(self, tag: LanguageTag) -> Locale:
        if tag == self._tag:
            return self
        return Locale(tag)

    # ------------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._bcp47

    def __repr__(self) -> str:
        return f"Locale({self._bcp47!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Locale):
            return NotImplemented
        return self._bcp47 == other._bcp47

    def __hash__(self) -> int:
        return hash(self._bcp47)

    def __reduce__(self) -> tuple[Any, ...]:
        return (Locale, (self._bcp47,))

    @property
    def subtags(self) -> tuple[str, ...]:
        """Canonical subtags in order."""
        return tuple(self._bcp47.split(SUBTAG_SEPARATOR))
