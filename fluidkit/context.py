from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from fluidkit.adapters.clock import MonotonicClock
from fluidkit.components.formula import DegenerateRangeError, compile_formula, compile_preset
from fluidkit.components.inheritance import (
    InheritedResult,
    ValueGetterPort,
    emptiness_for,
    resolve_inherited_value,
)
from fluidkit.components.overlay import LiveStyleOverlay, StyleHostPort
from fluidkit.components.presets import PresetDataManager, PresetSourcePort
from fluidkit.components.registry import ControlRegistry
from fluidkit.components.session import ClockPort, EditSessionTracker
from fluidkit.components.units import validate_min_max
from fluidkit.domain.entities import Preset, ScreenRange
from fluidkit.rules.models import FluidRules

logger = logging.getLogger(__name__)


@dataclass
class EditorContext:
    """Everything one editing surface needs, wired from the rules."""

    rules: FluidRules
    device_order: tuple[str, ...]
    registry: ControlRegistry
    overlay: LiveStyleOverlay
    tracker: EditSessionTracker
    presets: PresetDataManager

    @classmethod
    def create(
        cls,
        rules: FluidRules,
        device_order: Sequence[str],
        host: StyleHostPort,
        source: PresetSourcePort,
        clock: ClockPort | None = None,
    ) -> EditorContext:
        registry = ControlRegistry.with_builtins()
        overlay = LiveStyleOverlay(
            host,
            container_id=rules.css.style_container_id,
            prefix=rules.css.preset_prefix,
        )
        tracker = EditSessionTracker(
            overlay,
            clock or MonotonicClock(),
            registry,
            reorder_window_ms=rules.session.reorder_window_ms,
        )

        return cls(
            rules=rules,
            device_order=tuple(device_order),
            registry=registry,
            overlay=overlay,
            tracker=tracker,
            presets=PresetDataManager(source),
        )

    @property
    def global_range(self) -> ScreenRange:
        return self.rules.breakpoints.as_range()

    def preview_preset(self, preset: Preset) -> bool:
        """Push a preset's compiled formula to the overlay."""
        try:
            formula = compile_preset(preset, self.global_range)
        except DegenerateRangeError as e:
            logger.warning("Preset %s not previewed: %s", preset.id, e)
            return False
        return self.overlay.set_variable(preset.id, formula)

    def preview_edit(
        self,
        item_id: str,
        min_text: str | None,
        max_text: str | None,
        breakpoint_override: ScreenRange | None = None,
    ) -> bool:
        """
        Preview an unsaved min/max edit of a preset row.

        Invalid input leaves the overlay untouched and returns False.
        """
        sizes = validate_min_max(min_text, max_text)
        if not sizes.valid or sizes.min is None or sizes.max is None:
            logger.debug("Edit of %s not previewed: %s", item_id, sizes.error)
            return False

        try:
            formula = compile_formula(sizes.min, sizes.max, breakpoint_override or self.global_range)
        except DegenerateRangeError as e:
            logger.debug("Edit of %s not previewed: %s", item_id, e)
            return False
        return self.overlay.set_variable(item_id, formula)

    def resolve_inherited(
        self,
        control_name: str,
        get_value: ValueGetterPort,
        control_type: str = "slider",
    ) -> InheritedResult | None:
        return resolve_inherited_value(
            control_name,
            self.device_order,
            get_value,
            emptiness_for(control_type),
            base_device=self.rules.devices.base_device,
            widescreen_device=self.rules.devices.widescreen_device,
        )

    def sweep_removals(self) -> int:
        """Discard expired removal records. Hosts call this from an idle timer."""
        return self.tracker.sweep()

    def surface_reloaded(self) -> None:
        """The preview document was replaced; its style container is gone."""
        self.overlay.reset()

    async def preview_all(self) -> int:
        """Fetch presets and preview each one. Returns how many were applied."""
        result = await self.presets.get_presets()
        if result is None or result.stale:
            return 0

        applied = 0
        for group in result.groups:
            for preset in group.presets:
                if self.preview_preset(preset):
                    applied += 1
        return applied

    def describe(self) -> dict[str, Any]:
        return {
            "devices": list(self.device_order),
            "breakpoints": [self.global_range.min_screen_px, self.global_range.max_screen_px],
            "preset_repeaters": [c.control_id for c in self.registry.controls()],
        }
