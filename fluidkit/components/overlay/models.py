"""
Overlay component models.
"""

from __future__ import annotations

from dataclasses import dataclass

UNSET_VALUE = "unset !important"


@dataclass(frozen=True)
class OverlayRule:
    """One :root declaration held by the overlay container."""

    variable_name: str
    value: str

    @property
    def is_unset(self) -> bool:
        return self.value == UNSET_VALUE

    def render(self) -> str:
        return f":root {{ {self.variable_name}: {self.value}; }}"


class StyleHostUnavailable(Exception):
    """Raised by a style host whose surface is not loaded."""
