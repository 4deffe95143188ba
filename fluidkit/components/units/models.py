"""
Units component models.
"""

from __future__ import annotations

from dataclasses import dataclass

from fluidkit.domain.entities import ParsedValue


@dataclass(frozen=True)
class MinMaxValidation:
    """Outcome of validating a min/max text pair."""

    valid: bool
    error: str | None = None
    min: ParsedValue | None = None
    max: ParsedValue | None = None
