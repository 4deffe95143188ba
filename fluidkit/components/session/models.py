"""
Session component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RowRemoved:
    """A preset row is about to be removed from a repeater."""

    document_id: str
    control_id: str
    item_id: str | None


@dataclass(frozen=True)
class RowInserted:
    """
    A preset row was inserted into a repeater.

    is_restored is set by the host when the insertion replays an undo.
    """

    document_id: str
    control_id: str
    item_id: str | None
    is_restored: bool = False


@dataclass(frozen=True)
class RowMoved:
    """A preset row was moved within its repeater."""

    document_id: str
    control_id: str
    item_id: str | None


StructuralEvent = RowRemoved | RowInserted | RowMoved


@dataclass(frozen=True)
class RemovalRecord:
    item_id: str
    removed_at_ms: float


class TrackerOutcome(str, Enum):
    IGNORED = "ignored"
    UNSET = "unset"
    RESTORED_UNDO = "restored_undo"
    RESTORED_REORDER = "restored_reorder"
    RESTORED_MOVE = "restored_move"
    INSERTED = "inserted"
