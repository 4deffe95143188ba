"""
Tests for the units component: value parsing, validation and range formatting.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from fluidkit.components.units import (
    EMPTY_VALUE,
    format_size_range,
    is_both_zero,
    is_same_value,
    magnitude_of,
    parse_value,
    range_separator,
    validate_min_max,
)
from fluidkit.domain.entities import ParsedValue


def pv(magnitude: str, unit: str = "px") -> ParsedValue:
    return ParsedValue(magnitude=magnitude, unit=unit)


class TestParseValue:
    """Parsing of authored values."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("20px", pv("20")),
            ("1.5rem", pv("1.5", "rem")),
            (".5em", pv(".5", "em")),
            ("-4", pv("-4")),
            ("12 vw", pv("12", "vw")),
            ("50%", pv("50", "%")),
            ("100vh", pv("100", "vh")),
        ],
    )
    def test_valid_values(self, text: str, expected: ParsedValue) -> None:
        assert parse_value(text) == expected

    def test_unit_defaults_to_px(self) -> None:
        assert parse_value("16") == pv("16", "px")

    def test_unit_is_case_insensitive(self) -> None:
        """Units are accepted in any case and normalised to lower case."""
        assert parse_value("2REM") == pv("2", "rem")
        assert parse_value("10Px") == pv("10", "px")

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_input_is_zero_px(self, text: str | None) -> None:
        assert parse_value(text) == EMPTY_VALUE
        assert parse_value(text) == pv("0", "px")

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_value("  24px ") == pv("24")

    @pytest.mark.parametrize(
        "text",
        ["abc", "12pt", "12  px", "--1px", "1.px", "1e3px", "px", "12px;", "1,5rem"],
    )
    def test_invalid_values(self, text: str) -> None:
        assert parse_value(text) is None

    def test_magnitude_is_kept_verbatim(self) -> None:
        value = parse_value("1.50rem")
        assert value is not None
        assert value.magnitude == "1.50"
        assert value.css() == "1.50rem"


class TestComparisons:
    def test_magnitude_of(self) -> None:
        assert magnitude_of(pv("1.5", "rem")) == Decimal("1.5")

    def test_is_same_value_is_textual(self) -> None:
        assert is_same_value(pv("20"), pv("20"))
        assert not is_same_value(pv("20"), pv("20.0"))
        assert not is_same_value(pv("20"), pv("20", "rem"))

    def test_is_both_zero(self) -> None:
        assert is_both_zero(pv("0"), pv("0.0", "rem"))
        assert not is_both_zero(pv("0"), pv("1"))


class TestValidateMinMax:
    def test_valid_pair(self) -> None:
        result = validate_min_max("16px", "24px")
        assert result.valid
        assert result.error is None
        assert result.min == pv("16")
        assert result.max == pv("24")

    def test_invalid_format(self) -> None:
        result = validate_min_max("16px", "big")
        assert not result.valid
        assert result.error == "Invalid value format"

    def test_zero_pair_rejected(self) -> None:
        """A 0~0 pair describes no value at all."""
        result = validate_min_max("0", "")
        assert not result.valid
        assert result.error == "Cannot create 0~0 preset"


class TestFormatting:
    def test_format_equal_values(self) -> None:
        assert format_size_range(pv("20"), pv("20")) == "20px"

    def test_format_range(self) -> None:
        assert format_size_range(pv("20"), pv("40")) == "20px ~ 40px"

    def test_separator_equal_values(self) -> None:
        assert range_separator(pv("20"), pv("20.0")) == "="

    def test_separator_different_units(self) -> None:
        assert range_separator(pv("20"), pv("20", "rem")) == "~"

    def test_separator_zero_values(self) -> None:
        assert range_separator(pv("0"), pv("0")) == "~"

    def test_separator_missing_value(self) -> None:
        assert range_separator(None, pv("20")) == "~"
