"""
Registry component - classification of preset repeater controls.
"""

from .component import (
    BUILTIN_CONTROLS,
    ControlRegistry,
    custom_group_control_id,
    generate_control_id,
    parse_control_id,
)
from .models import GroupKind, PresetRepeaterControl

__all__ = [
    "ControlRegistry",
    "parse_control_id",
    "generate_control_id",
    "custom_group_control_id",
    "PresetRepeaterControl",
    "GroupKind",
    "BUILTIN_CONTROLS",
]
