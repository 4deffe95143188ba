import logging
from pathlib import Path

import pytest

from fluidkit.rules.loader import load_rules
from fluidkit.rules.models import FluidRules


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture fluidkit debug logs so failures show tracker and overlay decisions."""
    caplog.set_level(logging.DEBUG, logger="fluidkit")


@pytest.fixture
def rules() -> FluidRules:
    """
    Rules loaded from the REAL rules.yaml at the project root.
    """
    rules_path = Path(__file__).resolve().parent.parent / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)
