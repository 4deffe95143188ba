from pydantic import BaseModel, Field


# --- Compile ---
class ScreenRangeModel(BaseModel):
    min_screen_px: int = Field(ge=0)
    max_screen_px: int = Field(ge=0)


class CompileRequest(BaseModel):
    min: str | None = None
    max: str | None = None
    screen_range: ScreenRangeModel | None = None  # global breakpoints when omitted
    preset_id: str | None = None


class CompileResponse(BaseModel):
    formula: str
    min: str
    max: str
    screen_range: ScreenRangeModel
    variable_name: str | None = None


# --- Decompile ---
class DecompileRequest(BaseModel):
    formula: str


class DecompileResponse(BaseModel):
    min: str
    max: str
    screen_range: ScreenRangeModel | None = None
