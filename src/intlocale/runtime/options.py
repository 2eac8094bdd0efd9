"""Locale constructor options and the options merger.

Options override parts of a parsed base tag, mirroring the options bag of
ECMA-402 ``new Intl.Locale(tag, options)``:

    Script("Latn")      replaces the script subtag
    Region("US")        replaces the region subtag
    HourCycle("h23")    sets the -u-hc- keyword
    Calendar("gregory") sets the -u-ca- keyword

Script and region values must pass the same shape check as the grammar
slot. Hour cycle and calendar values must belong to fixed enumerations of
recognized keyword values. Hour cycle and calendar keywords already
present in the base tag's -u- extension are validated the same way; an
explicit option wins over the tag.

Merging is applied after parsing and before canonicalization, so the
canonical string reflects the merged state. It fails atomically: the base
tag is never modified.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from intlocale.core.registry import resolve_calendar, resolve_hour_cycle
from intlocale.core.subtags import is_region_subtag, is_script_subtag
from intlocale.diagnostics import (
    DuplicateOptionError,
    InvalidOverrideError,
    UnknownOptionError,
)
from intlocale.enums import OptionField
from intlocale.syntax.canonicalizer import canonicalize
from intlocale.syntax.tag import LanguageTag

from .extensions import get_unicode_keyword, with_unicode_keywords

if TYPE_CHECKING:
    from .locale import Locale

__all__ = [
    "Calendar",
    "HourCycle",
    "MergeResult",
    "Opt",
    "Region",
    "Script",
    "apply_options",
    "merge",
]

logger = logging.getLogger(__name__)

_HOUR_CYCLE_KEY = "hc"
_CALENDAR_KEY = "ca"


# ============================================================================
# OPTION TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Script:
    """Script override, e.g. Script("Latn")."""

    field: ClassVar[OptionField] = OptionField.SCRIPT
    value: str


@dataclass(frozen=True, slots=True)
class Region:
    """Region override, e.g. Region("US") or Region("419")."""

    field: ClassVar[OptionField] = OptionField.REGION
    value: str


@dataclass(frozen=True, slots=True)
class HourCycle:
    """Hour cycle preference: one of h11, h12, h23, h24."""

    field: ClassVar[OptionField] = OptionField.HOUR_CYCLE
    value: str


@dataclass(frozen=True, slots=True)
class Calendar:
    """Calendar preference, e.g. Calendar("gregory") or Calendar("islamic-civil")."""

    field: ClassVar[OptionField] = OptionField.CALENDAR
    value: str


Opt: TypeAlias = Script | Region | HourCycle | Calendar
"""Any constructor option."""

_OPTION_TYPES = (Script, Region, HourCycle, Calendar)


# ============================================================================
# MERGER
# ============================================================================


@dataclass(frozen=True, slots=True)
class MergeResult:
    """Outcome of applying options to a base tag.

    Attributes:
        tag: Merged tag, canonicalized
        hour_cycle: Resolved hour cycle or None
        calendar: Resolved calendar or None
    """

    tag: LanguageTag
    hour_cycle: str | None = None
    calendar: str | None = None


def _collect(options: Iterable[Opt]) -> dict[OptionField, str]:
    resolved: dict[OptionField, str] = {}
    for option in options:
        if not isinstance(option, _OPTION_TYPES):
            msg = f"Expected a locale option (Script, Region, HourCycle, Calendar), got {option!r}"
            raise TypeError(msg)
        if option.field in resolved:
            raise DuplicateOptionError(option=option.field)
        resolved[option.field] = option.value
    return resolved


def _check_override(
    field: OptionField, value: object, predicate: Callable[[object], bool]
) -> str:
    if not predicate(value):
        raise InvalidOverrideError(field=field, value=value)
    return str(value)


def _resolve_keyword(
    field: OptionField, value: object, resolver: Callable[[str], str | None]
) -> str:
    resolved = resolver(value) if isinstance(value, str) else None
    if resolved is None:
        raise UnknownOptionError(option=field, value=value)
    return resolved


def apply_options(base: LanguageTag, options: Iterable[Opt] = ()) -> MergeResult:
    """Validate options, apply them to base, and canonicalize the result.

    Args:
        base: Parsed base tag (any case)
        options: Option values; each kind at most once

    Returns:
        MergeResult with the canonical merged tag and resolved keywords

    Raises:
        TypeError: If an element of options is not an option type
        DuplicateOptionError: If an option kind repeats
        InvalidOverrideError: If a script/region value is malformed, or the
            base is an irregular legacy tag that cannot take overrides
        UnknownOptionError: If an hour cycle/calendar value is unrecognized
    """
    requested = _collect(options)

    script = requested.get(OptionField.SCRIPT)
    if script is not None:
        script = _check_override(OptionField.SCRIPT, script, is_script_subtag)
    region = requested.get(OptionField.REGION)
    if region is not None:
        region = _check_override(OptionField.REGION, region, is_region_subtag)

    tag = canonicalize(base) if base.grandfathered is not None else base
    if tag.grandfathered is not None:
        if requested:
            field, value = next(iter(requested.items()))
            raise InvalidOverrideError(
                field=field, value=value, reason=f"legacy tag '{tag.grandfathered}' has no subtags"
            )
        return MergeResult(tag=tag)

    hour_cycle_value = requested.get(
        OptionField.HOUR_CYCLE, get_unicode_keyword(tag, _HOUR_CYCLE_KEY)
    )
    hour_cycle = (
        _resolve_keyword(OptionField.HOUR_CYCLE, hour_cycle_value, resolve_hour_cycle)
        if hour_cycle_value is not None
        else None
    )
    calendar_value = requested.get(OptionField.CALENDAR, get_unicode_keyword(tag, _CALENDAR_KEY))
    calendar = (
        _resolve_keyword(OptionField.CALENDAR, calendar_value, resolve_calendar)
        if calendar_value is not None
        else None
    )

    changes: dict[str, str] = {}
    if script is not None:
        changes["script"] = script
    if region is not None:
        changes["region"] = region
    if changes:
        tag = tag.replace(**changes)

    keywords: dict[str, str] = {}
    if hour_cycle is not None:
        keywords[_HOUR_CYCLE_KEY] = hour_cycle
    if calendar is not None:
        keywords[_CALENDAR_KEY] = calendar
    tag = with_unicode_keywords(tag, keywords)

    if requested:
        logger.debug("Merged options %s into %s", sorted(requested), base)
    return MergeResult(tag=canonicalize(tag), hour_cycle=hour_cycle, calendar=calendar)


def merge(base: LanguageTag, options: Iterable[Opt] = ()) -> Locale:
    """Apply options to base and build a Locale.

    Example:
        >>> from intlocale import parse_tag
        >>> merge(parse_tag("en-US"), [Script("Latn")]).as_bcp47()
        'en-Latn-US'
    """
    from .locale import Locale  # noqa: PLC0415 - circular

    return Locale(base, options)
