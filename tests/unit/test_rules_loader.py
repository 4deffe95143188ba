"""
Tests for rules loading and validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fluidkit.rules.loader import default_rules, load_rules
from fluidkit.rules.models import FluidRules


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content)
    return path


class TestLoadRules:
    def test_project_rules_file(self, rules: FluidRules) -> None:
        assert rules == default_rules()

    def test_plain_yaml(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            "breakpoints:\n  min_screen_width: 400\n  max_screen_width: 1600\n"
            "css:\n  var_prefix: fk\n",
        )
        rules = load_rules(path)
        assert rules.breakpoints.as_range().min_screen_px == 400
        assert rules.breakpoints.as_range().max_screen_px == 1600
        assert rules.css.preset_prefix == "--fk-preset--"
        assert rules.session.reorder_window_ms == 200

    def test_fenced_yaml(self, tmp_path: Path) -> None:
        path = write(
            tmp_path,
            "# Rules\n\nSome prose.\n\n```yaml\nsession:\n  reorder_window_ms: 350\n```\n",
        )
        assert load_rules(path).session.reorder_window_ms == 350

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules(write(tmp_path, "")) == default_rules()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write(tmp_path, "breakpoints: [unclosed\n"))

    def test_unordered_breakpoints_rejected(self, tmp_path: Path) -> None:
        path = write(tmp_path, "breakpoints:\n  min_screen_width: 1200\n  max_screen_width: 800\n")
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(path)

    def test_negative_window_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            load_rules(write(tmp_path, "session:\n  reorder_window_ms: -1\n"))


class TestDefaults:
    def test_css_variable_names(self) -> None:
        css = default_rules().css
        assert css.preset_prefix == "--fluid-preset--"
        assert css.min_screen_var == "--fluid-min-screen"
        assert css.max_screen_value_var == "--fluid-max-screen-value"
        assert css.screen_diff_var == "--fluid-screen-diff"
        assert css.style_container_id == "fluid-live-style"

    def test_devices(self) -> None:
        devices = default_rules().devices
        assert devices.base_device == "desktop"
        assert devices.widescreen_device == "widescreen"
