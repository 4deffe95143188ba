"""
Inheritance component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParsedControlName:
    """Control name split into base name and device suffix."""

    base_name: str
    device_suffix: str | None = None


@dataclass(frozen=True)
class InheritedResult:
    """
    Value a device inherits from an ancestor.

    inherit_chain_path lists every consulted ancestor in hierarchy order,
    ending with the direct parent. parent_is_empty marks the fallback case
    where no ancestor had a non-empty value and the parent's own (empty)
    value is returned.
    """

    source_device: str
    direct_parent_device: str
    resolved_value: Any
    inherit_chain_path: tuple[str, ...]
    parent_is_empty: bool = False

    @property
    def source_unit(self) -> str | None:
        if isinstance(self.resolved_value, dict):
            unit = self.resolved_value.get("unit")
            return unit if isinstance(unit, str) else None
        return None
