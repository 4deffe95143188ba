"""
Formula component - CSS clamp() compilation for fluid presets.

Builds a clamp() expression that interpolates linearly between a min and a
max value across a viewport range, and inverts formulas it produced itself.

Key behaviors:
- min == max compiles to the bare value (no degenerate clamp())
- Bounds use min()/max() so inverted presets (min > max) clamp correctly
- Magnitudes and units are emitted verbatim, no unit conversion
- Screen widths are always px, whatever the value unit
- decompile_formula only recognises this module's own output shape
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from fluidkit.components.units import is_same_value, parse_value
from fluidkit.domain.entities import (
    CSS_UNITS,
    ParsedValue,
    Preset,
    PresetGroup,
    ScreenRange,
    is_valid_preset_id,
)
from fluidkit.rules.models import CssRules, FluidRules

from .models import DecompiledFormula, DegenerateRangeError

logger = logging.getLogger(__name__)

DEFAULT_PRESET_PREFIX = CssRules().preset_prefix

# --- Patterns for self-produced formulas ---

_NUMBER = r"-?(?:\d+(?:\.\d+)?|\.\d+)"
_UNIT = "|".join(re.escape(u) for u in CSS_UNITS)
_VALUE = rf"{_NUMBER}(?:{_UNIT})"

_BARE_PATTERN = re.compile(rf"^{_VALUE}$")

_CLAMP_PATTERN = re.compile(
    rf"^clamp\(min\((?P<min>{_VALUE}), (?P<max>{_VALUE})\), "
    rf"calc\(\((?P<base>{_VALUE})\) \+ "
    rf"\(\((?P<max_size>{_NUMBER}) - (?P<min_size>{_NUMBER})\) \* "
    rf"\(\(100vw - (?P<min_screen>\d+)px\) / \((?P<max_screen>\d+) - (?P=min_screen)\)\)\)\), "
    rf"max\((?P=min), (?P=max)\)\)$"
)


# --- Naming ---


def css_variable_name(preset_id: str, prefix: str = DEFAULT_PRESET_PREFIX) -> str:
    """
    CSS custom property name for a preset id.

    Raises:
        ValueError: if the id is empty or holds anything but word characters and hyphens
    """
    if not is_valid_preset_id(preset_id):
        raise ValueError(f"Invalid preset id: {preset_id!r}")
    return f"{prefix}{preset_id}"


def css_variable_reference(preset_id: str, prefix: str = DEFAULT_PRESET_PREFIX) -> str:
    """var() reference to a preset, as stored in control values."""
    return f"var({css_variable_name(preset_id, prefix)})"


# --- Compilation ---


def resolve_screen_range(preset: Preset, global_range: ScreenRange) -> ScreenRange:
    """Per-preset breakpoint override wins over the global pair."""
    return preset.breakpoint_override or global_range


def compile_formula(
    min_value: ParsedValue,
    max_value: ParsedValue,
    screen_range: ScreenRange,
) -> str:
    """
    Compile a min/max pair into a CSS value.

    Args:
        min_value: Value at the narrow end of the range
        max_value: Value at the wide end of the range
        screen_range: Viewport interval in px

    Returns:
        Bare value when min == max, a clamp() expression otherwise

    Raises:
        DegenerateRangeError: if screen_range has max <= min
    """
    if is_same_value(min_value, max_value):
        return min_value.css()

    if screen_range.is_degenerate:
        raise DegenerateRangeError(screen_range)

    lo = min_value.css()
    hi = max_value.css()
    start = screen_range.min_screen_px
    end = screen_range.max_screen_px

    value_diff = f"({max_value.magnitude} - {min_value.magnitude})"
    viewport_calc = f"(100vw - {start}px)"
    screen_diff = f"({end} - {start})"
    scaling_factor = f"({value_diff} * ({viewport_calc} / {screen_diff}))"
    preferred_value = f"calc(({lo}) + {scaling_factor})"

    return f"clamp(min({lo}, {hi}), {preferred_value}, max({lo}, {hi}))"


def compile_preset(preset: Preset, global_range: ScreenRange) -> str:
    return compile_formula(preset.min, preset.max, resolve_screen_range(preset, global_range))


# --- Decompilation ---


def is_clamp_formula(value: str) -> bool:
    """Inline clamp formula, as opposed to a preset var() reference."""
    return isinstance(value, str) and value.startswith("clamp(")


def decompile_formula(formula: str) -> DecompiledFormula | None:
    """
    Recover min/max from a formula produced by compile_formula.

    Returns:
        DecompiledFormula, or None when the text is not a self-produced shape
    """
    if not isinstance(formula, str):
        return None

    text = formula.strip()

    if _BARE_PATTERN.match(text):
        value = parse_value(text)
        if value is None:
            return None
        return DecompiledFormula(min=value, max=value)

    match = _CLAMP_PATTERN.match(text)
    if not match:
        return None

    min_value = parse_value(match.group("min"))
    max_value = parse_value(match.group("max"))
    if min_value is None or max_value is None:
        return None

    # The calc() base and the magnitude difference must agree with min()/max().
    if match.group("base") != match.group("min"):
        return None
    if match.group("min_size") != min_value.magnitude or match.group("max_size") != max_value.magnitude:
        return None

    screen_range = ScreenRange(
        min_screen_px=int(match.group("min_screen")),
        max_screen_px=int(match.group("max_screen")),
    )
    return DecompiledFormula(min=min_value, max=max_value, screen_range=screen_range)


def evaluate_formula(formula: str, viewport_px: float) -> float | None:
    """
    Numeric px value of a self-produced formula at a viewport width.

    Only px endpoints are evaluated; the scaling term is px-based, so
    other units have no meaningful single number.
    """
    decompiled = decompile_formula(formula)
    if decompiled is None:
        return None

    if decompiled.min.unit != "px" or decompiled.max.unit != "px":
        return None

    lo = Decimal(decompiled.min.magnitude)
    hi = Decimal(decompiled.max.magnitude)

    if decompiled.screen_range is None:
        return float(lo)

    start = Decimal(decompiled.screen_range.min_screen_px)
    width = Decimal(decompiled.screen_range.width)
    preferred = lo + (hi - lo) * ((Decimal(str(viewport_px)) - start) / width)

    # clamp(MIN, VAL, MAX) == max(MIN, min(VAL, MAX))
    return float(max(min(lo, hi), min(preferred, max(lo, hi))))


# --- Stylesheet rendering ---


def render_root_block(groups: Iterable[PresetGroup], rules: FluidRules) -> str:
    """
    Render the persisted :root block for all presets.

    Global screen variables come first, followed by one declaration per
    preset. A preset whose override range is degenerate is skipped.
    """
    css = rules.css
    global_range = rules.breakpoints.as_range()
    start = global_range.min_screen_px
    end = global_range.max_screen_px

    declarations = [
        f"{css.min_screen_var}: {start}px",
        f"{css.min_screen_value_var}: {start}",
        f"{css.max_screen_var}: {end}px",
        f"{css.max_screen_value_var}: {end}",
        f"{css.screen_diff_var}: calc(var({css.max_screen_value_var}) - var({css.min_screen_value_var}))",
    ]

    for group in groups:
        for preset in group.presets:
            try:
                formula = compile_preset(preset, global_range)
            except DegenerateRangeError as e:
                logger.warning("Skipping preset %s in group %s: %s", preset.id, group.name, e)
                continue
            declarations.append(f"{css_variable_name(preset.id, css.preset_prefix)}: {formula}")

    body = "".join(f"  {d};\n" for d in declarations)
    return f":root {{\n{body}}}\n"
