import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Enums / Literals ---
CssUnit = Literal["px", "rem", "em", "%", "vw", "vh"]

CSS_UNITS: tuple[str, ...] = ("px", "rem", "em", "%", "vw", "vh")

# Ids become part of a CSS custom property name.
PRESET_ID_REGEX = r"^[\w-]+$"


def is_valid_preset_id(preset_id: object) -> bool:
    return isinstance(preset_id, str) and re.fullmatch(PRESET_ID_REGEX, preset_id) is not None


# --- Values ---


class ParsedValue(BaseModel):
    """A magnitude/unit pair. Magnitude is kept as authored text."""

    model_config = ConfigDict(frozen=True)

    magnitude: str
    unit: CssUnit = "px"

    def css(self) -> str:
        return f"{self.magnitude}{self.unit}"

    def __str__(self) -> str:
        return self.css()


class ScreenRange(BaseModel):
    """Viewport interval the fluid value interpolates across, in px."""

    model_config = ConfigDict(frozen=True)

    min_screen_px: int = Field(ge=0)
    max_screen_px: int = Field(ge=0)

    @property
    def width(self) -> int:
        return self.max_screen_px - self.min_screen_px

    @property
    def is_degenerate(self) -> bool:
        return self.max_screen_px <= self.min_screen_px


# --- Presets ---


class Preset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, pattern=PRESET_ID_REGEX)
    title: str
    min: ParsedValue
    max: ParsedValue
    breakpoint_override: ScreenRange | None = None


class PresetGroup(BaseModel):
    name: str
    control_id: str | None = None
    presets: list[Preset] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "PresetGroup":
        seen: set[str] = set()
        for preset in self.presets:
            if preset.id in seen:
                raise ValueError(f"duplicate preset id in group '{self.name}': {preset.id}")
            seen.add(preset.id)
        return self
