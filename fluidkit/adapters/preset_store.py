"""
Preset store adapters.

Implements PresetStorePort in memory and over a JSON file, plus an async
PresetSourcePort wrapper so a store can feed PresetDataManager.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from fluidkit.components.presets import (
    PresetFetchError,
    PresetStorePort,
    group_from_record,
    preset_to_record,
)
from fluidkit.domain.entities import PresetGroup

logger = logging.getLogger(__name__)


class InMemoryPresetStore:
    def __init__(self, groups: list[PresetGroup] | None = None) -> None:
        self._groups = list(groups or [])

    def list_groups(self) -> list[PresetGroup]:
        return list(self._groups)

    def replace(self, groups: list[PresetGroup]) -> None:
        self._groups = list(groups)


class JsonFilePresetStore:
    """
    Preset groups persisted as a JSON array of group records.

    Each record is {"name", "control_id", "value": [preset records]}.
    A missing file holds no groups.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def list_groups(self) -> list[PresetGroup]:
        if not self.path.exists():
            return []

        try:
            data: Any = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid preset file {self.path}: {e}") from e

        if not isinstance(data, list):
            raise ValueError(f"Preset file {self.path} must hold a list of groups")

        groups = []
        for record in data:
            group = group_from_record(record) if isinstance(record, dict) else None
            if group is None:
                logger.debug("Skipping non-preset group record in %s", self.path)
                continue
            groups.append(group)
        return groups

    def save_groups(self, groups: list[PresetGroup]) -> None:
        records = [
            {
                "name": group.name,
                "control_id": group.control_id,
                "value": [preset_to_record(p) for p in group.presets],
            }
            for group in groups
        ]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")


class StorePresetSource:
    """Async PresetSourcePort reading from a synchronous store."""

    def __init__(self, store: PresetStorePort) -> None:
        self._store = store

    async def fetch_groups(self) -> list[PresetGroup]:
        try:
            return await asyncio.to_thread(self._store.list_groups)
        except (OSError, ValueError) as e:
            raise PresetFetchError(str(e)) from e
