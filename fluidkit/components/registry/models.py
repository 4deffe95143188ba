"""
Registry component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

GroupKind = Literal["builtin", "custom", "filter_provided"]


@dataclass(frozen=True)
class PresetRepeaterControl:
    """A control holding a list of presets, classified once at registration."""

    control_id: str
    kind: GroupKind
    group_id: str
