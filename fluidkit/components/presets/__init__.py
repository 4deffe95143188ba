"""
Presets component - preset records, validation, lookup and shared fetch.
"""

from .component import (
    PresetDataManager,
    find_preset_by_id,
    find_preset_by_variable,
    group_from_record,
    preset_from_record,
    preset_to_record,
    validate_preset_input,
)
from .models import FetchResult, PresetFetchError, PresetInputValidation
from .ports import PresetSourcePort, PresetStorePort

__all__ = [
    # Fetch
    "PresetDataManager",
    # Records
    "preset_from_record",
    "preset_to_record",
    "group_from_record",
    # Validation
    "validate_preset_input",
    # Lookup
    "find_preset_by_id",
    "find_preset_by_variable",
    # Models
    "FetchResult",
    "PresetFetchError",
    "PresetInputValidation",
    # Ports
    "PresetSourcePort",
    "PresetStorePort",
]
