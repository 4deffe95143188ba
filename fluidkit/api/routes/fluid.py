"""
Fluid API.

Serves the persisted :root stylesheet and exposes the formula compiler.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from fluidkit.api.deps import get_preset_store, get_rules
from fluidkit.api.schemas import (
    CompileRequest,
    CompileResponse,
    DecompileRequest,
    DecompileResponse,
    ScreenRangeModel,
)
from fluidkit.components.formula import (
    DegenerateRangeError,
    compile_formula,
    css_variable_name,
    decompile_formula,
    render_root_block,
)
from fluidkit.components.presets import PresetStorePort
from fluidkit.components.units import validate_min_max
from fluidkit.domain.entities import ScreenRange
from fluidkit.rules.models import FluidRules

logger = logging.getLogger(__name__)

router = APIRouter()
css_router = APIRouter()


@css_router.get("/variables.css")
def variables_css(
    rules: FluidRules = Depends(get_rules),
    store: PresetStorePort = Depends(get_preset_store),
) -> Response:
    try:
        groups = store.list_groups()
    except (OSError, ValueError) as e:
        logger.error("Preset store unreadable: %s", e)
        raise HTTPException(status_code=503, detail="Presets unavailable") from e

    return Response(content=render_root_block(groups, rules), media_type="text/css")


@router.post("/compile", response_model=CompileResponse)
def compile_values(
    req: CompileRequest,
    rules: FluidRules = Depends(get_rules),
) -> CompileResponse:
    sizes = validate_min_max(req.min, req.max)
    if not sizes.valid or sizes.min is None or sizes.max is None:
        raise HTTPException(status_code=400, detail=sizes.error)

    if req.screen_range is not None:
        screen_range = ScreenRange(**req.screen_range.model_dump())
    else:
        screen_range = rules.breakpoints.as_range()

    try:
        formula = compile_formula(sizes.min, sizes.max, screen_range)
    except DegenerateRangeError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    variable_name = None
    if req.preset_id:
        try:
            variable_name = css_variable_name(req.preset_id, rules.css.preset_prefix)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

    return CompileResponse(
        formula=formula,
        min=sizes.min.css(),
        max=sizes.max.css(),
        screen_range=ScreenRangeModel(**screen_range.model_dump()),
        variable_name=variable_name,
    )


@router.post("/decompile", response_model=DecompileResponse)
def decompile(req: DecompileRequest) -> DecompileResponse:
    result = decompile_formula(req.formula)
    if result is None:
        raise HTTPException(status_code=400, detail="Not a fluid formula")

    screen_range = None
    if result.screen_range is not None:
        screen_range = ScreenRangeModel(**result.screen_range.model_dump())

    return DecompileResponse(min=result.min.css(), max=result.max.css(), screen_range=screen_range)
