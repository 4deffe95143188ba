"""
Inheritance component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class ValueGetterPort(Protocol):
    """Reads the authored value of a control, or None if it has none."""

    def __call__(self, control_name: str) -> Any | None: ...


class EmptinessPort(Protocol):
    """Control-shape-specific emptiness check."""

    def __call__(self, value: Any) -> bool: ...
