"""
Inheritance component - responsive value inheritance across a device hierarchy.
"""

from .component import (
    DEFAULT_BASE_DEVICE,
    DEFAULT_WIDESCREEN_DEVICE,
    EMPTINESS_PREDICATES,
    ancestor_devices,
    device_control_name,
    emptiness_for,
    find_inherited_value,
    is_empty_control_value,
    is_empty_dimensions,
    is_empty_gaps,
    is_empty_slider,
    parse_control_name,
    resolve_inherited_value,
)
from .models import InheritedResult, ParsedControlName
from .ports import EmptinessPort, ValueGetterPort

__all__ = [
    # Entry points
    "resolve_inherited_value",
    "find_inherited_value",
    "parse_control_name",
    "device_control_name",
    "ancestor_devices",
    # Emptiness
    "emptiness_for",
    "is_empty_control_value",
    "is_empty_slider",
    "is_empty_dimensions",
    "is_empty_gaps",
    "EMPTINESS_PREDICATES",
    # Models
    "InheritedResult",
    "ParsedControlName",
    # Ports
    "ValueGetterPort",
    "EmptinessPort",
    # Constants
    "DEFAULT_BASE_DEVICE",
    "DEFAULT_WIDESCREEN_DEVICE",
]
