"""
Registry component - preset repeater controls.

Control ids map to preset groups:
- fluid_spacing_presets / fluid_typography_presets: built-in groups
- fluid_custom_<group>_presets: custom groups
- fluid_<group>_presets: legacy custom groups
Third parties may register any other control id as filter-provided.
"""

from __future__ import annotations

import logging
import re

from .models import GroupKind, PresetRepeaterControl

logger = logging.getLogger(__name__)

BUILTIN_CONTROLS: dict[str, str] = {
    "fluid_spacing_presets": "spacing",
    "fluid_typography_presets": "typography",
}

_CUSTOM_PATTERN = re.compile(r"^fluid_custom_(.+)_presets$")
_LEGACY_PATTERN = re.compile(r"^fluid_(.+)_presets$")


def custom_group_control_id(group_id: str) -> str:
    return f"fluid_custom_{group_id}_presets"


def parse_control_id(control_id: str) -> PresetRepeaterControl | None:
    """Classify a control id, or None if it is not a preset repeater."""
    if control_id in BUILTIN_CONTROLS:
        return PresetRepeaterControl(
            control_id=control_id,
            kind="builtin",
            group_id=BUILTIN_CONTROLS[control_id],
        )

    match = _CUSTOM_PATTERN.match(control_id)
    if match:
        return PresetRepeaterControl(control_id=control_id, kind="custom", group_id=match.group(1))

    match = _LEGACY_PATTERN.match(control_id)
    if match and match.group(1) not in BUILTIN_CONTROLS.values():
        return PresetRepeaterControl(control_id=control_id, kind="custom", group_id=match.group(1))

    return None


def generate_control_id(group_id: str, kind: GroupKind | None = None) -> str:
    """
    Control id for a group.

    Kind is auto-detected when omitted. Existing prefixes are stripped so
    ids are never double-prefixed.
    """
    builtin_ids = {group: control for control, group in BUILTIN_CONTROLS.items()}

    if kind is None:
        kind = "builtin" if group_id in builtin_ids else "custom"

    if kind == "builtin" and group_id in builtin_ids:
        return builtin_ids[group_id]

    clean_id = re.sub(r"^fluid_custom_", "", group_id)
    clean_id = re.sub(r"_presets$", "", clean_id)
    return custom_group_control_id(clean_id)


class ControlRegistry:
    """
    Registered preset repeater controls for one editing surface.

    Classification happens once in register(); lookups never re-parse.
    """

    def __init__(self) -> None:
        self._controls: dict[str, PresetRepeaterControl] = {}

    @classmethod
    def with_builtins(cls) -> ControlRegistry:
        registry = cls()
        for control_id in BUILTIN_CONTROLS:
            registry.register(control_id)
        return registry

    def register(self, control_id: str) -> PresetRepeaterControl | None:
        control = parse_control_id(control_id)
        if control is None:
            logger.debug("Control %s is not a preset repeater", control_id)
            return None
        self._controls[control_id] = control
        return control

    def register_filter_provided(self, control_id: str, group_id: str) -> PresetRepeaterControl:
        control = PresetRepeaterControl(control_id=control_id, kind="filter_provided", group_id=group_id)
        self._controls[control_id] = control
        return control

    def unregister(self, control_id: str) -> None:
        self._controls.pop(control_id, None)

    def lookup(self, control_id: str) -> PresetRepeaterControl | None:
        return self._controls.get(control_id)

    def is_preset_repeater(self, control_id: str) -> bool:
        return control_id in self._controls

    def controls(self) -> list[PresetRepeaterControl]:
        return list(self._controls.values())
