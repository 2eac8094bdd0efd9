"""Tests for per-slot subtag shape predicates.

Python 3.13+.
"""

import pytest
from hypothesis import given

from intlocale.core.subtags import (
    SLOT_VALIDATORS,
    is_extension_subtag,
    is_extlang_subtag,
    is_language_subtag,
    is_privateuse_singleton,
    is_privateuse_subtag,
    is_region_subtag,
    is_script_subtag,
    is_singleton,
    is_subtag_token,
    is_unicode_key,
    is_unicode_type,
    is_variant_subtag,
    titlecase,
)
from intlocale.enums import Slot
from tests.strategies import (
    language_subtags,
    region_subtags,
    script_subtags,
    variant_subtags,
)


class TestSubtagToken:
    """Lexical check used by the scanner."""

    @pytest.mark.parametrize("value", ["a", "en", "Latn", "419", "abcdefgh", "0"])
    def test_accepts_ascii_alphanumerics(self, value: str) -> None:
        """1-8 ASCII letters or digits are tokens."""
        assert is_subtag_token(value)

    @pytest.mark.parametrize("value", ["", "abcdefghi", "é", "a_b", "a b", "en!", "١٢٣"])
    def test_rejects_other_text(self, value: str) -> None:
        """Empty, overlong, and non-ASCII-alphanumeric text are not tokens."""
        assert not is_subtag_token(value)

    def test_non_string_is_rejected(self) -> None:
        """Predicates are total: non-strings are simply False."""
        assert not is_subtag_token(None)
        assert not is_language_subtag(42)


class TestSlotShapes:
    """Shape rules per grammar slot."""

    @pytest.mark.parametrize(
        ("predicate", "valid", "invalid"),
        [
            (is_language_subtag, ["en", "EN", "haw", "abcdefgh"], ["e", "en1", "abcdefghi"]),
            (is_extlang_subtag, ["yue", "CMN"], ["yu", "yuee", "y1e"]),
            (is_script_subtag, ["Latn", "HANT", "cyrl"], ["Lat", "Latin", "L4tn"]),
            (is_region_subtag, ["US", "us", "419", "001"], ["USA", "4190", "41", "U1"]),
            (is_variant_subtag, ["rozaj", "1996", "1Abc", "valencia"], ["1ab", "abcd", "abc"]),
            (is_singleton, ["a", "U", "t", "0"], ["x", "X", "ab"]),
            (is_extension_subtag, ["ca", "gregory", "h12"], ["c", "abcdefghi"]),
            (is_privateuse_subtag, ["a", "twain", "12345678"], ["", "abcdefghi"]),
        ],
    )
    def test_shape_rules(self, predicate, valid: list[str], invalid: list[str]) -> None:
        """Each predicate accepts exactly its slot's shapes."""
        for value in valid:
            assert predicate(value), value
        for value in invalid:
            assert not predicate(value), value

    def test_four_character_variant_needs_leading_digit(self) -> None:
        """A 4-character variant must start with a digit."""
        assert is_variant_subtag("1994")
        assert not is_variant_subtag("a994")

    def test_privateuse_singleton(self) -> None:
        """Only 'x' (any case) introduces private use."""
        assert is_privateuse_singleton("x")
        assert is_privateuse_singleton("X")
        assert not is_privateuse_singleton("u")

    def test_unicode_keyword_shapes(self) -> None:
        """Unicode keys are 2 chars (alnum + alpha); types 3-8 alnum."""
        assert is_unicode_key("ca")
        assert is_unicode_key("h0") is False
        assert is_unicode_type("gregory")
        assert not is_unicode_type("gr")

    @given(value=language_subtags)
    def test_generated_languages_are_valid(self, value: str) -> None:
        """Language strategy only produces valid language subtags."""
        assert is_language_subtag(value)

    @given(value=script_subtags)
    def test_script_is_never_a_region_or_variant(self, value: str) -> None:
        """Script shape does not overlap region or variant shapes."""
        assert is_script_subtag(value)
        assert not is_region_subtag(value)
        assert not is_variant_subtag(value)

    @given(value=region_subtags)
    def test_region_is_never_a_variant(self, value: str) -> None:
        """Region shape does not overlap variant shape."""
        assert not is_variant_subtag(value)

    @given(value=variant_subtags)
    def test_generated_variants_are_valid(self, value: str) -> None:
        """Variant strategy only produces valid variants."""
        assert is_variant_subtag(value)


class TestSlotValidators:
    """SLOT_VALIDATORS table."""

    def test_every_subtag_slot_has_a_validator(self) -> None:
        """Each grammar slot maps to its predicate."""
        assert SLOT_VALIDATORS[Slot.LANGUAGE] is is_language_subtag
        assert SLOT_VALIDATORS[Slot.SCRIPT] is is_script_subtag
        assert SLOT_VALIDATORS[Slot.REGION] is is_region_subtag
        assert SLOT_VALIDATORS[Slot.VARIANT] is is_variant_subtag

    def test_table_is_read_only(self) -> None:
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            SLOT_VALIDATORS[Slot.LANGUAGE] = is_region_subtag  # type: ignore[index]


class TestTitlecase:
    """titlecase helper for script subtags."""

    @pytest.mark.parametrize(("value", "expected"), [("latn", "Latn"), ("HANT", "Hant")])
    def test_titlecase(self, value: str, expected: str) -> None:
        """First letter upper, rest lower."""
        assert titlecase(value) == expected
