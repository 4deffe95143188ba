"""
Tests for the clock, style host and preset store adapters.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from fluidkit.adapters.clock import ManualClock, MonotonicClock
from fluidkit.adapters.preset_store import InMemoryPresetStore, JsonFilePresetStore, StorePresetSource
from fluidkit.adapters.style_host import InMemoryStyleHost
from fluidkit.components.overlay import StyleHostUnavailable
from fluidkit.components.presets import PresetFetchError
from fluidkit.domain.entities import ParsedValue, Preset, PresetGroup, ScreenRange


def spacing_group() -> PresetGroup:
    return PresetGroup(
        name="Spacing",
        control_id="fluid_spacing_presets",
        presets=[
            Preset(
                id="s1",
                title="Small",
                min=ParsedValue(magnitude="8"),
                max=ParsedValue(magnitude="16"),
                breakpoint_override=ScreenRange(min_screen_px=480, max_screen_px=1280),
            )
        ],
    )


class TestClocks:
    def test_monotonic_clock_advances(self) -> None:
        clock = MonotonicClock()
        first = clock.now_ms()
        assert clock.now_ms() >= first

    def test_manual_clock(self) -> None:
        clock = ManualClock(start_ms=10)
        clock.advance(5)
        assert clock.now_ms() == 15


class TestInMemoryStyleHost:
    def test_create_and_find(self) -> None:
        host = InMemoryStyleHost()
        container = host.create("x")
        container.write("a")
        assert host.find("x") is container
        assert host.text("x") == "a"

    def test_unavailable(self) -> None:
        host = InMemoryStyleHost(available=False)
        with pytest.raises(StyleHostUnavailable):
            host.find("x")


class TestJsonFilePresetStore:
    def test_missing_file_has_no_groups(self, tmp_path: Path) -> None:
        assert JsonFilePresetStore(tmp_path / "presets.json").list_groups() == []

    def test_save_and_load(self, tmp_path: Path) -> None:
        store = JsonFilePresetStore(tmp_path / "data" / "presets.json")
        store.save_groups([spacing_group()])
        assert store.list_groups() == [spacing_group()]

    def test_skips_simple_value_groups(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text(json.dumps([{"name": "Base", "value": "16px"}]))
        assert JsonFilePresetStore(path).list_groups() == []

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            JsonFilePresetStore(path).list_groups()

    def test_not_a_list(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text("{}")
        with pytest.raises(ValueError):
            JsonFilePresetStore(path).list_groups()


class TestStorePresetSource:
    def test_fetch(self) -> None:
        source = StorePresetSource(InMemoryPresetStore([spacing_group()]))
        assert asyncio.run(source.fetch_groups()) == [spacing_group()]

    def test_store_errors_become_fetch_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "presets.json"
        path.write_text("[")
        source = StorePresetSource(JsonFilePresetStore(path))
        with pytest.raises(PresetFetchError):
            asyncio.run(source.fetch_groups())
