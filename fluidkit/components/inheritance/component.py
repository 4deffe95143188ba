"""
Inheritance component - responsive value inheritance across devices.

Control names carry a device suffix ("padding_tablet"); the base device has
none ("padding"). A device without an authored value inherits the nearest
non-empty value from the larger devices above it.

Key behaviors:
- The base device never inherits
- The widescreen device always inherits from the base device, whatever
  its position in the device order
- Other devices query the direct parent first, then walk upward
- An explicit authored value is never overridden, inheritance only fills gaps
- Emptiness is injected per control shape
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .models import InheritedResult, ParsedControlName
from .ports import EmptinessPort, ValueGetterPort

DEFAULT_BASE_DEVICE = "desktop"
DEFAULT_WIDESCREEN_DEVICE = "widescreen"


# --- Control names ---


def parse_control_name(
    control_name: str,
    device_order: Sequence[str],
    base_device: str = DEFAULT_BASE_DEVICE,
) -> ParsedControlName:
    """
    Split a control name into base name and device suffix.

    The longest matching "_<device>" suffix wins, so "gap_tablet_extra"
    resolves to tablet_extra rather than a shorter device.
    """
    best: str | None = None
    for device in device_order:
        if device == base_device:
            continue
        suffix = f"_{device}"
        if len(control_name) > len(suffix) and control_name.endswith(suffix):
            if best is None or len(device) > len(best):
                best = device

    if best is None:
        return ParsedControlName(base_name=control_name)

    return ParsedControlName(
        base_name=control_name[: -(len(best) + 1)],
        device_suffix=best,
    )


def device_control_name(
    base_name: str,
    device: str,
    base_device: str = DEFAULT_BASE_DEVICE,
) -> str:
    return base_name if device == base_device else f"{base_name}_{device}"


def ancestor_devices(device: str, device_order: Sequence[str]) -> list[str]:
    """Every device above `device` in the order, widest first."""
    if device not in device_order:
        return []
    return list(device_order[: list(device_order).index(device)])


# --- Resolution ---


def find_inherited_value(
    base_name: str,
    ancestors: Sequence[str],
    get_value: ValueGetterPort,
    is_empty: EmptinessPort,
    base_device: str = DEFAULT_BASE_DEVICE,
) -> InheritedResult | None:
    """
    Walk ancestors from the direct parent upward.

    Args:
        base_name: Control name without device suffix
        ancestors: Ancestor devices in hierarchy order (direct parent last)
        get_value: Reads a control value by name
        is_empty: Emptiness predicate for the control shape
        base_device: Device whose controls carry no suffix

    Returns:
        InheritedResult, or None when no ancestor holds any value
    """
    if not ancestors:
        return None

    parent = ancestors[-1]
    path = [parent]
    parent_value = get_value(device_control_name(base_name, parent, base_device))

    if parent_value is not None and not is_empty(parent_value):
        return InheritedResult(
            source_device=parent,
            direct_parent_device=parent,
            resolved_value=parent_value,
            inherit_chain_path=tuple(path),
        )

    for device in reversed(ancestors[:-1]):
        value = get_value(device_control_name(base_name, device, base_device))
        path.insert(0, device)

        if value is not None and not is_empty(value):
            return InheritedResult(
                source_device=device,
                direct_parent_device=parent,
                resolved_value=value,
                inherit_chain_path=tuple(path),
            )

    # Keep the chain visible: "inherits from tablet, but tablet is unset".
    if parent_value is not None:
        return InheritedResult(
            source_device=parent,
            direct_parent_device=parent,
            resolved_value=parent_value,
            inherit_chain_path=tuple(path),
            parent_is_empty=True,
        )

    return None


def resolve_inherited_value(
    control_name: str,
    device_order: Sequence[str],
    get_value: ValueGetterPort,
    is_empty: EmptinessPort,
    *,
    base_device: str = DEFAULT_BASE_DEVICE,
    widescreen_device: str = DEFAULT_WIDESCREEN_DEVICE,
) -> InheritedResult | None:
    """Resolve the value a device-suffixed control inherits."""
    parsed = parse_control_name(control_name, device_order, base_device)

    if parsed.device_suffix is None:
        return None

    if parsed.device_suffix == widescreen_device:
        value = get_value(parsed.base_name)
        if value is None:
            return None
        return InheritedResult(
            source_device=base_device,
            direct_parent_device=base_device,
            resolved_value=value,
            inherit_chain_path=(base_device,),
            parent_is_empty=is_empty(value),
        )

    ancestors = ancestor_devices(parsed.device_suffix, device_order)
    return find_inherited_value(parsed.base_name, ancestors, get_value, is_empty, base_device)


# --- Emptiness predicates ---


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def is_empty_control_value(value: Any) -> bool:
    """Generic check: no value or an empty mapping."""
    return value is None or (isinstance(value, Mapping) and len(value) == 0)


def is_empty_slider(value: Any) -> bool:
    """A slider is empty without a size; a size of 0 is an authored value."""
    if is_empty_control_value(value):
        return True
    if isinstance(value, Mapping):
        return _blank(value.get("size"))
    return _blank(value)


def is_empty_dimensions(value: Any) -> bool:
    """Four-sided control: empty only when every side is blank."""
    if is_empty_control_value(value):
        return True
    if not isinstance(value, Mapping):
        return _blank(value)
    return all(_blank(value.get(side)) for side in ("top", "right", "bottom", "left"))


def is_empty_gaps(value: Any) -> bool:
    if is_empty_control_value(value):
        return True
    if not isinstance(value, Mapping):
        return _blank(value)
    return _blank(value.get("row")) and _blank(value.get("column"))


EMPTINESS_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "slider": is_empty_slider,
    "dimensions": is_empty_dimensions,
    "gaps": is_empty_gaps,
}


def emptiness_for(control_type: str) -> Callable[[Any], bool]:
    """Emptiness predicate for a control type; generic for unknown types."""
    return EMPTINESS_PREDICATES.get(control_type, is_empty_control_value)
