"""
Formula component - clamp() compilation, inversion and stylesheet rendering.
"""

from .component import (
    DEFAULT_PRESET_PREFIX,
    compile_formula,
    compile_preset,
    css_variable_name,
    css_variable_reference,
    decompile_formula,
    evaluate_formula,
    is_clamp_formula,
    render_root_block,
    resolve_screen_range,
)
from .models import DecompiledFormula, DegenerateRangeError

__all__ = [
    # Compilation
    "compile_formula",
    "compile_preset",
    "resolve_screen_range",
    # Inversion
    "decompile_formula",
    "evaluate_formula",
    "is_clamp_formula",
    # Naming
    "css_variable_name",
    "css_variable_reference",
    "DEFAULT_PRESET_PREFIX",
    # Rendering
    "render_root_block",
    # Models
    "DecompiledFormula",
    "DegenerateRangeError",
]
