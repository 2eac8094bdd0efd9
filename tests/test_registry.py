"""Tests for the static subtag registry tables.

Python 3.13+.
"""

import pytest

from intlocale.core.registry import (
    CALENDARS,
    GRANDFATHERED,
    HOUR_CYCLES,
    LANGUAGE_ALIASES,
    lookup_grandfathered,
    resolve_calendar,
    resolve_hour_cycle,
    resolve_language,
    resolve_region,
    resolve_script,
    resolve_variant,
)
from intlocale.core.subtags import is_language_subtag, is_region_subtag
from intlocale.syntax.parser import is_well_formed


class TestGrandfathered:
    """Grandfathered (legacy whole-tag) registry."""

    def test_all_registered_tags_present(self) -> None:
        """All 26 RFC 5646 grandfathered tags are registered."""
        assert len(GRANDFATHERED) == 26

    @pytest.mark.parametrize("raw", ["i-klingon", "I-KLINGON", "I-Klingon"])
    def test_lookup_is_case_insensitive(self, raw: str) -> None:
        """Whole-tag match ignores case."""
        entry = lookup_grandfathered(raw)
        assert entry is not None
        assert entry.tag == "i-klingon"
        assert entry.preferred == "tlh"

    def test_lookup_miss(self) -> None:
        """Ordinary tags are not grandfathered."""
        assert lookup_grandfathered("en-US") is None

    def test_irregular_flags(self) -> None:
        """Irregular entries do not fit the langtag grammar, regular ones do."""
        assert GRANDFATHERED["i-default"].irregular
        assert GRANDFATHERED["i-default"].preferred is None
        assert not GRANDFATHERED["art-lojban"].irregular

    def test_preferred_values_are_well_formed(self) -> None:
        """Every preferred value parses through the regular grammar."""
        for entry in GRANDFATHERED.values():
            if entry.preferred is not None:
                assert is_well_formed(entry.preferred), entry.tag

    def test_table_is_read_only(self) -> None:
        """Registry tables are frozen at import."""
        with pytest.raises(TypeError):
            GRANDFATHERED["x-new"] = GRANDFATHERED["i-ami"]  # type: ignore[index]


class TestAliases:
    """Deprecated subtag replacement."""

    @pytest.mark.parametrize(
        ("subtag", "expected"),
        [("iw", "he"), ("IN", "id"), ("ji", "yi"), ("mo", "ro"), ("EN", "en"), ("deu", "de")],
    )
    def test_resolve_language(self, subtag: str, expected: str) -> None:
        """Aliases are replaced; others are only lowercased."""
        assert resolve_language(subtag) == expected

    def test_alias_targets_are_languages(self) -> None:
        """Every language alias target is itself a valid language subtag."""
        for target in LANGUAGE_ALIASES.values():
            assert is_language_subtag(target)

    @pytest.mark.parametrize(("subtag", "expected"), [("latn", "Latn"), ("QAAI", "Zinh")])
    def test_resolve_script(self, subtag: str, expected: str) -> None:
        """Scripts are titlecased and aliased."""
        assert resolve_script(subtag) == expected

    @pytest.mark.parametrize(
        ("subtag", "expected"), [("us", "US"), ("UK", "GB"), ("dd", "DE"), ("840", "US"), ("419", "419")]
    )
    def test_resolve_region(self, subtag: str, expected: str) -> None:
        """Regions are uppercased; deprecated and numeric codes replaced."""
        assert resolve_region(subtag) == expected
        assert is_region_subtag(resolve_region(subtag))

    @pytest.mark.parametrize(("subtag", "expected"), [("HEPLOC", "alalc97"), ("Rozaj", "rozaj")])
    def test_resolve_variant(self, subtag: str, expected: str) -> None:
        """Variants are lowercased and aliased."""
        assert resolve_variant(subtag) == expected


class TestKeywordValues:
    """Hour cycle and calendar enumerations."""

    def test_hour_cycles(self) -> None:
        """Exactly h11, h12, h23 and h24."""
        assert HOUR_CYCLES == {"h11", "h12", "h23", "h24"}

    @pytest.mark.parametrize(("value", "expected"), [("h23", "h23"), ("H11", "h11"), ("h25", None)])
    def test_resolve_hour_cycle(self, value: str, expected: str | None) -> None:
        """Recognized values are lowercased; others return None."""
        assert resolve_hour_cycle(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("gregory", "gregory"),
            ("Gregorian", "gregory"),
            ("islamic-civil", "islamic-civil"),
            ("islamicc", "islamic-civil"),
            ("lunar", None),
        ],
    )
    def test_resolve_calendar(self, value: str, expected: str | None) -> None:
        """Aliases resolve; unknown calendars return None."""
        assert resolve_calendar(value) == expected

    def test_calendars_include_common_types(self) -> None:
        """Common CLDR calendar types are recognized."""
        assert {"gregory", "buddhist", "japanese", "hebrew", "iso8601"} <= CALENDARS
