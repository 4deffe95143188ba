"""
Session component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ClockPort(Protocol):
    """Monotonic time source."""

    def now_ms(self) -> float:
        """Current monotonic time in milliseconds."""
        ...


class OverlayPort(Protocol):
    """The overlay operations the tracker drives."""

    def unset_variable(self, item_id: str) -> bool: ...

    def restore_variable(self, item_id: str) -> bool: ...


class ControlRegistryPort(Protocol):
    def is_preset_repeater(self, control_id: str) -> bool: ...
