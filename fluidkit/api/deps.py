import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from fluidkit.adapters.preset_store import JsonFilePresetStore
from fluidkit.components.presets import PresetStorePort
from fluidkit.rules.loader import default_rules, load_rules
from fluidkit.rules.models import FluidRules

logger = logging.getLogger(__name__)


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())

        rules_env = os.environ.get("FLUID_RULES_PATH")
        default_rules_path = self.base_dir / "rules.yaml"
        if rules_env:
            self.rules_path: Path | None = Path(rules_env)
        elif default_rules_path.exists():
            self.rules_path = default_rules_path
        else:
            self.rules_path = None

        self.presets_path = Path(
            os.environ.get("FLUID_PRESETS_PATH", str(self.base_dir / "data" / "presets.json"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
def load_configured_rules(settings: Settings) -> FluidRules:
    """Rules from the configured file, or the built-in defaults when none is configured."""
    if settings.rules_path is None:
        logger.info("No rules file configured, using defaults")
        return default_rules()
    return load_rules(settings.rules_path)


@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> FluidRules:
    return load_configured_rules(settings)


# --- Stores ---
def get_preset_store(settings: Settings = Depends(get_settings)) -> PresetStorePort:
    return JsonFilePresetStore(settings.presets_path)
