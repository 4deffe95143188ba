"""
Units component - value parsing, validation and range formatting.
"""

from .component import (
    EMPTY_VALUE,
    VALUE_WITH_UNIT_PATTERN,
    format_size_range,
    is_both_zero,
    is_same_value,
    magnitude_of,
    parse_value,
    range_separator,
    validate_min_max,
)
from .models import MinMaxValidation

__all__ = [
    # Functions
    "parse_value",
    "magnitude_of",
    "is_same_value",
    "is_both_zero",
    "validate_min_max",
    "format_size_range",
    "range_separator",
    # Models
    "MinMaxValidation",
    # Constants
    "EMPTY_VALUE",
    "VALUE_WITH_UNIT_PATTERN",
]
