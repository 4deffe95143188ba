"""
Formula component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluidkit.domain.entities import ParsedValue, ScreenRange


@dataclass(frozen=True)
class DecompiledFormula:
    """
    Endpoints recovered from a compiled formula.

    screen_range is None for a bare (min == max) value.
    """

    min: ParsedValue
    max: ParsedValue
    screen_range: ScreenRange | None = None


class DegenerateRangeError(ValueError):
    """Raised when a screen range has max <= min."""

    def __init__(self, screen_range: ScreenRange) -> None:
        super().__init__(
            f"Degenerate screen range: max {screen_range.max_screen_px}px "
            f"must exceed min {screen_range.min_screen_px}px"
        )
        self.screen_range = screen_range
