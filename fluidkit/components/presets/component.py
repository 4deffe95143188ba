"""
Presets component - preset records and the shared preset fetch.

Key behaviors:
- Raw records are validated into Preset; invalid records are dropped
- Sizes may arrive as numbers or strings, ids as "id" or "_id"
- Breakpoint overrides apply only when enabled and well ordered
- One in-flight fetch is shared by every concurrent caller
- invalidate() bumps the generation; older results come back stale
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from fluidkit.components.formula import DEFAULT_PRESET_PREFIX
from fluidkit.components.units import parse_value, validate_min_max
from fluidkit.domain.entities import ParsedValue, Preset, PresetGroup, ScreenRange, is_valid_preset_id

from .models import FetchResult, PresetFetchError, PresetInputValidation
from .ports import PresetSourcePort

logger = logging.getLogger(__name__)

_VAR_REFERENCE_PATTERN = re.compile(r"^var\(\s*(--[\w-]+)\s*(?:,[^)]*)?\)$")


# --- Records ---


def _size_text(size: Any) -> str | None:
    if isinstance(size, bool) or size is None:
        return None
    if isinstance(size, int):
        return str(size)
    if isinstance(size, float):
        return str(int(size)) if size.is_integer() else repr(size)
    if isinstance(size, str) and size.strip():
        return size.strip()
    return None


def _value_from_record(raw: Any) -> ParsedValue | None:
    if not isinstance(raw, Mapping):
        return None
    size = _size_text(raw.get("size"))
    if size is None:
        return None
    unit = raw.get("unit") or "px"
    if not isinstance(unit, str):
        return None
    return parse_value(f"{size}{unit.strip()}")


def _first(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    return None


def _override_from_record(record: Mapping[str, Any]) -> ScreenRange | None:
    if not _first(record, "overrideEnabled", "override_enabled"):
        return None

    lo = _first(record, "overrideMinScreen", "override_min_screen")
    hi = _first(record, "overrideMaxScreen", "override_max_screen")
    try:
        screen_range = ScreenRange(min_screen_px=lo, max_screen_px=hi)
    except ValidationError:
        logger.debug("Ignoring invalid breakpoint override %r..%r", lo, hi)
        return None

    if screen_range.is_degenerate:
        logger.debug("Ignoring degenerate breakpoint override %s..%s", lo, hi)
        return None
    return screen_range


def preset_from_record(record: Mapping[str, Any]) -> Preset | None:
    """
    Build a Preset from a persisted record.

    Returns:
        Preset, or None when the record is malformed
    """
    preset_id = _first(record, "id", "_id")
    if not is_valid_preset_id(preset_id):
        return None

    min_value = _value_from_record(record.get("min"))
    max_value = _value_from_record(record.get("max"))
    if min_value is None or max_value is None:
        return None

    title = record.get("title")
    return Preset(
        id=preset_id,
        title=title if isinstance(title, str) else "",
        min=min_value,
        max=max_value,
        breakpoint_override=_override_from_record(record),
    )


def preset_to_record(preset: Preset) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": preset.id,
        "title": preset.title,
        "min": {"size": preset.min.magnitude, "unit": preset.min.unit},
        "max": {"size": preset.max.magnitude, "unit": preset.max.unit},
    }
    if preset.breakpoint_override is not None:
        record["overrideEnabled"] = True
        record["overrideMinScreen"] = preset.breakpoint_override.min_screen_px
        record["overrideMaxScreen"] = preset.breakpoint_override.max_screen_px
    return record


def group_from_record(record: Mapping[str, Any]) -> PresetGroup | None:
    """
    Build a PresetGroup from a persisted record.

    Groups whose value is a plain string carry no presets and are skipped.
    Malformed presets and repeated ids are dropped.
    """
    name = record.get("name")
    value = record.get("value")
    if not isinstance(name, str) or not isinstance(value, list):
        return None

    presets: list[Preset] = []
    seen: set[str] = set()
    for raw in value:
        preset = preset_from_record(raw) if isinstance(raw, Mapping) else None
        if preset is None:
            logger.debug("Dropping malformed preset in group %s", name)
            continue
        if preset.id in seen:
            logger.debug("Dropping duplicate preset %s in group %s", preset.id, name)
            continue
        seen.add(preset.id)
        presets.append(preset)

    control_id = record.get("control_id")
    return PresetGroup(
        name=name,
        control_id=control_id if isinstance(control_id, str) else None,
        presets=presets,
    )


# --- Validation ---


def validate_preset_input(
    title: str | None,
    min_text: str | None,
    max_text: str | None,
) -> PresetInputValidation:
    """Validate the fields of a preset before save or update."""
    errors: list[str] = []
    clean_title = (title or "").strip()
    if not clean_title:
        errors.append("Title is required")

    sizes = validate_min_max(min_text, max_text)
    if not sizes.valid and sizes.error:
        errors.append(sizes.error)

    return PresetInputValidation(
        valid=not errors,
        errors=errors,
        title=clean_title,
        min=sizes.min,
        max=sizes.max,
    )


# --- Lookup ---


def find_preset_by_id(groups: Iterable[PresetGroup], preset_id: str) -> Preset | None:
    for group in groups:
        for preset in group.presets:
            if preset.id == preset_id:
                return preset
    return None


def find_preset_by_variable(
    groups: Iterable[PresetGroup],
    value: str,
    prefix: str = DEFAULT_PRESET_PREFIX,
) -> Preset | None:
    """
    Preset referenced by a control value.

    Accepts "var(--fluid-preset--ID)" or the bare variable name.
    """
    text = value.strip()
    match = _VAR_REFERENCE_PATTERN.match(text)
    name = match.group(1) if match else text
    if not name.startswith(prefix):
        return None
    return find_preset_by_id(groups, name[len(prefix) :])


# --- Fetch ---


class PresetDataManager:
    """
    Cached, shared access to a PresetSourcePort.

    Callers arriving while a fetch is in flight await the same task.
    """

    def __init__(self, source: PresetSourcePort) -> None:
        self._source = source
        self._groups: list[PresetGroup] | None = None
        self._task: asyncio.Task[list[PresetGroup] | None] | None = None
        self._task_generation = 0
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_pending(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def cached(self) -> list[PresetGroup] | None:
        return self._groups

    def is_current(self, result: FetchResult) -> bool:
        return result.generation == self._generation

    def invalidate(self) -> None:
        """Drop the cache. An in-flight fetch finishes but its result is stale."""
        self._generation += 1
        self._groups = None
        self._task = None
        logger.debug("Preset cache invalidated (generation %d)", self._generation)

    def cancel(self) -> bool:
        """Cancel the in-flight fetch. Its awaiting callers see CancelledError."""
        task = self._task
        self._task = None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    async def _fetch(self, generation: int) -> list[PresetGroup] | None:
        logger.info("Fetching presets (generation %d)", generation)
        try:
            groups = await self._source.fetch_groups()
        except PresetFetchError as e:
            logger.warning("Preset fetch failed: %s", e)
            return None
        return list(groups)

    async def get_presets(self) -> FetchResult | None:
        """
        Preset groups, from cache or a shared fetch.

        Returns:
            FetchResult, or None when the fetch failed
        """
        if self._groups is not None:
            return FetchResult(groups=self._groups, generation=self._generation)

        if self._task is None:
            self._task_generation = self._generation
            self._task = asyncio.create_task(self._fetch(self._generation))

        task = self._task
        generation = self._task_generation
        try:
            groups = await asyncio.shield(task)
        finally:
            # A failed task is never reused; the next call fetches again.
            if self._task is task and task.done():
                self._task = None

        if groups is None:
            return None

        stale = generation != self._generation
        if not stale:
            self._groups = groups
        else:
            logger.debug("Discarding stale preset result (generation %d)", generation)
        return FetchResult(groups=groups, generation=generation, stale=stale)
