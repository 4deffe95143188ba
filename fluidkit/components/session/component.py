"""
Session component - correlates repeater edits with the live overlay.

Hosts implement "move row" as remove + insert. Without correlation every
drag-reorder would unset a preset's preview variable and never restore it.

State per preset id:
    Present -> Removed -> Restored (undo)
                       -> reordered away (window open) -> reordered back

Key behaviors:
- Removal records (id, now), unsets the overlay variable, marks id removed
- Insertion replaying an undo of a removed id restores the variable
- Insertion within the reorder window of a removal is a reorder: restore
- Older removal records are discarded on the next removal or sweep();
  records held at any time are bounded by the removals since the last sweep,
  so hosts with long idle stretches call sweep() periodically
- Re-entrant events are refused
"""

from __future__ import annotations

import logging

from .models import (
    RemovalRecord,
    RowInserted,
    RowMoved,
    RowRemoved,
    StructuralEvent,
    TrackerOutcome,
)
from .ports import ClockPort, ControlRegistryPort, OverlayPort

logger = logging.getLogger(__name__)

DEFAULT_REORDER_WINDOW_MS = 200


def is_removal_expired(removed_at_ms: float, now_ms: float, window_ms: float) -> bool:
    """True once a removal is older than the reorder detection window."""
    return now_ms - removed_at_ms > window_ms


class EditSessionTracker:
    """
    Edit-session state for one editing surface.

    Single writer: all events arrive on the UI thread, one at a time.
    """

    def __init__(
        self,
        overlay: OverlayPort,
        clock: ClockPort,
        registry: ControlRegistryPort,
        *,
        reorder_window_ms: float = DEFAULT_REORDER_WINDOW_MS,
    ) -> None:
        self._overlay = overlay
        self._clock = clock
        self._registry = registry
        self._window_ms = reorder_window_ms
        self._recent_removals: dict[str, RemovalRecord] = {}
        self._removed_items: set[str] = set()
        self._changed_documents: set[str] = set()
        self._dispatching = False

    @property
    def reorder_window_ms(self) -> float:
        return self._window_ms

    # --- Queries ---

    def removal_record(self, item_id: str) -> RemovalRecord | None:
        return self._recent_removals.get(item_id)

    def has_recent_removal(self, item_id: str, now_ms: float | None = None) -> bool:
        """A removal record exists and is still inside the reorder window."""
        record = self._recent_removals.get(item_id)
        if record is None:
            return False
        now = self._clock.now_ms() if now_ms is None else now_ms
        return not is_removal_expired(record.removed_at_ms, now, self._window_ms)

    def is_removed(self, item_id: str) -> bool:
        return item_id in self._removed_items

    def has_document_changes(self, document_id: str) -> bool:
        return document_id in self._changed_documents

    def clear_document_changes(self, document_id: str) -> None:
        self._changed_documents.discard(document_id)

    # --- Maintenance ---

    def sweep(self, now_ms: float | None = None) -> int:
        """Discard expired removal records. Returns count discarded."""
        now = self._clock.now_ms() if now_ms is None else now_ms
        expired = [
            item_id
            for item_id, record in self._recent_removals.items()
            if is_removal_expired(record.removed_at_ms, now, self._window_ms)
        ]
        for item_id in expired:
            del self._recent_removals[item_id]
        return len(expired)

    # --- Events ---

    def handle(self, event: StructuralEvent) -> TrackerOutcome:
        """
        Apply one structural event.

        Events for unregistered controls or without an item id are ignored.
        """
        if self._dispatching:
            logger.warning("Re-entrant %s for %s refused", type(event).__name__, event.item_id)
            return TrackerOutcome.IGNORED

        if not event.item_id or not self._registry.is_preset_repeater(event.control_id):
            return TrackerOutcome.IGNORED

        self._dispatching = True
        try:
            self._changed_documents.add(event.document_id)
            if isinstance(event, RowRemoved):
                return self._on_removed(event.item_id)
            elif isinstance(event, RowInserted):
                return self._on_inserted(event.item_id, event.is_restored)
            elif isinstance(event, RowMoved):
                return self._on_moved(event.item_id)
            else:
                raise ValueError(f"Unknown event type: {type(event)}")
        finally:
            self._dispatching = False

    def _on_removed(self, item_id: str) -> TrackerOutcome:
        now = self._clock.now_ms()
        self.sweep(now)

        self._recent_removals[item_id] = RemovalRecord(item_id=item_id, removed_at_ms=now)
        self._removed_items.add(item_id)
        self._overlay.unset_variable(item_id)

        logger.debug("Preset %s removed at %.1fms", item_id, now)
        return TrackerOutcome.UNSET

    def _on_inserted(self, item_id: str, is_restored: bool) -> TrackerOutcome:
        if is_restored and item_id in self._removed_items:
            self._overlay.restore_variable(item_id)
            self._removed_items.discard(item_id)
            self._recent_removals.pop(item_id, None)
            logger.debug("Preset %s restored by undo", item_id)
            return TrackerOutcome.RESTORED_UNDO

        if self.has_recent_removal(item_id):
            self._overlay.restore_variable(item_id)
            self._recent_removals.pop(item_id, None)
            self._removed_items.discard(item_id)
            logger.debug("Preset %s re-inserted inside reorder window", item_id)
            return TrackerOutcome.RESTORED_REORDER

        return TrackerOutcome.INSERTED

    def _on_moved(self, item_id: str) -> TrackerOutcome:
        self._overlay.restore_variable(item_id)
        return TrackerOutcome.RESTORED_MOVE
