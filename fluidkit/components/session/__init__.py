"""
Session component - edit-session tracking of preset row mutations.
"""

from .component import DEFAULT_REORDER_WINDOW_MS, EditSessionTracker, is_removal_expired
from .models import (
    RemovalRecord,
    RowInserted,
    RowMoved,
    RowRemoved,
    StructuralEvent,
    TrackerOutcome,
)
from .ports import ClockPort, ControlRegistryPort, OverlayPort

__all__ = [
    # Tracker
    "EditSessionTracker",
    "is_removal_expired",
    "DEFAULT_REORDER_WINDOW_MS",
    # Events
    "RowRemoved",
    "RowInserted",
    "RowMoved",
    "StructuralEvent",
    # Models
    "RemovalRecord",
    "TrackerOutcome",
    # Ports
    "ClockPort",
    "OverlayPort",
    "ControlRegistryPort",
]
