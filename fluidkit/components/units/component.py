"""
Units component - parsing and formatting of token values.

Turns author input such as "20px", "1.5rem" or "-4" into ParsedValue.
No I/O operations - all functions are pure and deterministic.

Key behaviors:
- Empty input is an explicit 0px default, not a failure
- Unknown units or malformed numbers yield None
- Unit matching is case-insensitive, output units are lower case
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from fluidkit.domain.entities import CSS_UNITS, ParsedValue

from .models import MinMaxValidation

NUMBER_PATTERN = r"-?(?:\d+(?:\.\d+)?|\.\d+)"
"""Decimal magnitude with optional leading minus."""

VALUE_WITH_UNIT_PATTERN = re.compile(
    rf"^({NUMBER_PATTERN})\s?({'|'.join(re.escape(u) for u in CSS_UNITS)})?$",
    re.IGNORECASE,
)

EMPTY_VALUE = ParsedValue(magnitude="0", unit="px")


def parse_value(text: str | None) -> ParsedValue | None:
    """
    Parse a value with optional unit like "20px" or "1.5rem".

    Args:
        text: Raw input text

    Returns:
        ParsedValue, the 0px default for empty input, or None when invalid
    """
    if text is None or not text.strip():
        return EMPTY_VALUE

    match = VALUE_WITH_UNIT_PATTERN.match(text.strip())
    if not match:
        return None

    unit = (match.group(2) or "px").lower()
    return ParsedValue(magnitude=match.group(1), unit=unit)


def magnitude_of(value: ParsedValue) -> Decimal:
    """Numeric magnitude of a parsed value."""
    try:
        return Decimal(value.magnitude)
    except InvalidOperation as e:
        raise ValueError(f"Invalid magnitude: {value.magnitude!r}") from e


def is_same_value(a: ParsedValue, b: ParsedValue) -> bool:
    """Textual identity: same magnitude text and same unit."""
    return a.magnitude == b.magnitude and a.unit == b.unit


def is_both_zero(min_value: ParsedValue, max_value: ParsedValue) -> bool:
    return magnitude_of(min_value) == 0 and magnitude_of(max_value) == 0


def validate_min_max(min_text: str | None, max_text: str | None) -> MinMaxValidation:
    """
    Validate a min/max input pair.

    A 0~0 pair is rejected since it describes no fluid value at all.
    """
    min_value = parse_value(min_text)
    max_value = parse_value(max_text)

    if min_value is None or max_value is None:
        return MinMaxValidation(valid=False, error="Invalid value format")

    if is_both_zero(min_value, max_value):
        return MinMaxValidation(valid=False, error="Cannot create 0~0 preset")

    return MinMaxValidation(valid=True, min=min_value, max=max_value)


def format_size_range(min_value: ParsedValue, max_value: ParsedValue) -> str:
    """Format a min/max pair for display, collapsing equal values."""
    if is_same_value(min_value, max_value):
        return min_value.css()
    return f"{min_value.css()} ~ {max_value.css()}"


def range_separator(min_value: ParsedValue | None, max_value: ParsedValue | None) -> str:
    """
    Separator shown between min and max inputs.

    "=" only for non-zero equal values with the same unit, "~" otherwise.
    """
    if min_value is None or max_value is None:
        return "~"

    lo = magnitude_of(min_value)
    hi = magnitude_of(max_value)
    same_unit = min_value.unit == max_value.unit
    non_zero = lo != 0 or hi != 0

    return "=" if lo == hi and same_unit and non_zero else "~"
