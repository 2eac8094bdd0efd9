"""Tests for locale constructor options and the options merger.

Python 3.13+.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from intlocale.core.subtags import is_region_subtag, is_script_subtag
from intlocale.diagnostics import (
    DuplicateOptionError,
    InvalidOverrideError,
    MergeError,
    UnknownOptionError,
)
from intlocale.enums import OptionField
from intlocale.runtime.locale import Locale
from intlocale.runtime.options import (
    Calendar,
    HourCycle,
    Region,
    Script,
    apply_options,
    merge,
)
from intlocale.syntax.parser import parse_tag
from intlocale.syntax.serializer import serialize
from tests.strategies import region_subtags, script_subtags


class TestScriptRegionOverrides:
    """Script and region options replace tag subtags."""

    def test_script_override(self) -> None:
        """en-US + Script('Latn') -> en-Latn-US."""
        assert merge(parse_tag("en-US"), [Script("Latn")]).as_bcp47() == "en-Latn-US"

    def test_region_override_replaces(self) -> None:
        """An existing region is replaced."""
        result = apply_options(parse_tag("en-US"), [Region("GB")])
        assert serialize(result.tag) == "en-GB"

    def test_override_is_canonicalized(self) -> None:
        """Override values are case-normalized with the rest of the tag."""
        result = apply_options(parse_tag("sr"), [Script("LATN"), Region("rs")])
        assert serialize(result.tag) == "sr-Latn-RS"

    def test_invalid_script(self) -> None:
        """Script('Lat') fails the script shape check."""
        with pytest.raises(InvalidOverrideError) as exc_info:
            apply_options(parse_tag("en-US"), [Script("Lat")])
        assert exc_info.value.field == "script"
        assert exc_info.value.field == OptionField.SCRIPT
        assert exc_info.value.value == "Lat"

    @pytest.mark.parametrize("value", ["USA", "1", "U5", ""])
    def test_invalid_region(self, value: str) -> None:
        """Region values must be 2 letters or 3 digits."""
        with pytest.raises(InvalidOverrideError) as exc_info:
            apply_options(parse_tag("en"), [Region(value)])
        assert exc_info.value.field == "region"

    def test_base_not_modified(self) -> None:
        """A failed merge leaves the base tag untouched."""
        base = parse_tag("en-US")
        with pytest.raises(MergeError):
            apply_options(base, [Region("GB"), Script("Lat")])
        assert serialize(base) == "en-US"

    @given(script=script_subtags, region=region_subtags)
    def test_valid_overrides_always_apply(self, script: str, region: str) -> None:
        """Any well-shaped script/region is accepted and lands in its slot."""
        result = apply_options(parse_tag("de-AT"), [Script(script), Region(region)])
        assert is_script_subtag(result.tag.script)
        assert is_region_subtag(result.tag.region)
        assert result.tag.language == "de"


class TestKeywordOptions:
    """Hour cycle and calendar options."""

    def test_hour_cycle(self) -> None:
        """HourCycle is written as the -u-hc- keyword."""
        result = apply_options(parse_tag("en-US"), [HourCycle("h23")])
        assert result.hour_cycle == "h23"
        assert serialize(result.tag) == "en-US-u-hc-h23"

    def test_calendar_alias(self) -> None:
        """Calendar aliases resolve to the canonical type."""
        result = apply_options(parse_tag("th"), [Calendar("gregorian")])
        assert result.calendar == "gregory"
        assert serialize(result.tag) == "th-u-ca-gregory"

    def test_multi_subtag_calendar(self) -> None:
        """Calendars spanning several subtags are supported."""
        result = apply_options(parse_tag("ar-SA"), [Calendar("islamic-umalqura")])
        assert serialize(result.tag) == "ar-SA-u-ca-islamic-umalqura"

    def test_unknown_hour_cycle(self) -> None:
        """Values outside h11/h12/h23/h24 are rejected."""
        with pytest.raises(UnknownOptionError) as exc_info:
            apply_options(parse_tag("en"), [HourCycle("h25")])
        assert exc_info.value.option == OptionField.HOUR_CYCLE

    def test_unknown_calendar(self) -> None:
        """Unrecognized calendars are rejected."""
        with pytest.raises(UnknownOptionError):
            apply_options(parse_tag("en"), [Calendar("lunar")])

    def test_option_wins_over_tag_keyword(self) -> None:
        """An explicit option overrides the keyword already in the tag."""
        result = apply_options(parse_tag("en-u-hc-h12"), [HourCycle("h23")])
        assert result.hour_cycle == "h23"
        assert serialize(result.tag) == "en-u-hc-h23"

    def test_tag_keywords_are_resolved(self) -> None:
        """Keywords present in the tag are validated and reported."""
        result = apply_options(parse_tag("ja-JP-u-ca-Japanese-hc-H11"))
        assert result.calendar == "japanese"
        assert result.hour_cycle == "h11"
        assert serialize(result.tag) == "ja-JP-u-ca-japanese-hc-h11"

    def test_unknown_tag_keyword_rejected(self) -> None:
        """An unrecognized hc value inside the tag is an error too."""
        with pytest.raises(UnknownOptionError):
            apply_options(parse_tag("en-u-hc-h99"))

    def test_other_keywords_untouched(self) -> None:
        """Keywords other than hc/ca pass through."""
        result = apply_options(parse_tag("de-u-co-phonebk"), [Calendar("gregory")])
        assert serialize(result.tag) == "de-u-ca-gregory-co-phonebk"


class TestOptionCollection:
    """Option list validation."""

    def test_duplicate_option_kind(self) -> None:
        """Each option kind may be given once."""
        with pytest.raises(DuplicateOptionError) as exc_info:
            apply_options(parse_tag("en"), [Region("US"), Region("GB")])
        assert exc_info.value.option == OptionField.REGION

    def test_non_option_rejected(self) -> None:
        """Plain values are not options."""
        with pytest.raises(TypeError):
            apply_options(parse_tag("en"), ["Latn"])  # type: ignore[list-item]

    def test_no_options(self) -> None:
        """Without options the result is the canonical base."""
        result = apply_options(parse_tag("EN-us"))
        assert serialize(result.tag) == "en-US"
        assert result.hour_cycle is None
        assert result.calendar is None

    @given(st.permutations([Script("Latn"), Region("US"), HourCycle("h12"), Calendar("roc")]))
    def test_option_order_irrelevant(self, options: list[object]) -> None:
        """The merged result does not depend on option order."""
        result = apply_options(parse_tag("zh"), options)  # type: ignore[arg-type]
        assert serialize(result.tag) == "zh-Latn-US-u-ca-roc-hc-h12"


class TestGrandfatheredBase:
    """Options applied to legacy tags."""

    def test_preferred_value_takes_options(self) -> None:
        """A legacy tag with a preferred value is canonicalized first."""
        result = apply_options(parse_tag("i-klingon"), [Region("US")])
        assert serialize(result.tag) == "tlh-US"

    def test_irregular_without_preferred_rejects_overrides(self) -> None:
        """Legacy tags with no subtag structure cannot take options."""
        with pytest.raises(InvalidOverrideError) as exc_info:
            apply_options(parse_tag("i-default"), [Region("US")])
        assert exc_info.value.field == "region"

    def test_irregular_without_options(self) -> None:
        """Without options the legacy form is kept."""
        assert serialize(apply_options(parse_tag("i-default")).tag) == "i-default"


class TestMerge:
    """merge() builds a Locale."""

    def test_returns_locale(self) -> None:
        """merge() yields a Locale with the merged state."""
        locale = merge(parse_tag("fr-CA"), [HourCycle("h23")])
        assert isinstance(locale, Locale)
        assert locale.hour_cycle == "h23"
        assert locale.region == "CA"
