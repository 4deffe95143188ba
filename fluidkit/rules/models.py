from pydantic import BaseModel, Field, model_validator

from fluidkit.domain.entities import ScreenRange


class BreakpointRules(BaseModel):
    min_screen_width: int = Field(default=360, ge=0)
    max_screen_width: int = Field(default=1920, ge=0)

    @model_validator(mode="after")
    def _ordered(self) -> "BreakpointRules":
        if self.max_screen_width <= self.min_screen_width:
            raise ValueError("max_screen_width must be greater than min_screen_width")
        return self

    def as_range(self) -> ScreenRange:
        return ScreenRange(
            min_screen_px=self.min_screen_width,
            max_screen_px=self.max_screen_width,
        )


class CssRules(BaseModel):
    var_prefix: str = "fluid"
    style_container_id: str = "fluid-live-style"

    @property
    def preset_prefix(self) -> str:
        return f"--{self.var_prefix}-preset--"

    @property
    def min_screen_var(self) -> str:
        return f"--{self.var_prefix}-min-screen"

    @property
    def min_screen_value_var(self) -> str:
        return f"--{self.var_prefix}-min-screen-value"

    @property
    def max_screen_var(self) -> str:
        return f"--{self.var_prefix}-max-screen"

    @property
    def max_screen_value_var(self) -> str:
        return f"--{self.var_prefix}-max-screen-value"

    @property
    def screen_diff_var(self) -> str:
        return f"--{self.var_prefix}-screen-diff"


class DeviceRules(BaseModel):
    base_device: str = "desktop"
    widescreen_device: str = "widescreen"


class SessionRules(BaseModel):
    reorder_window_ms: int = Field(default=200, ge=0)


class FluidRules(BaseModel):
    breakpoints: BreakpointRules = Field(default_factory=BreakpointRules)
    css: CssRules = Field(default_factory=CssRules)
    devices: DeviceRules = Field(default_factory=DeviceRules)
    session: SessionRules = Field(default_factory=SessionRules)
