"""
Presets component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fluidkit.domain.entities import ParsedValue, PresetGroup


class PresetFetchError(Exception):
    """The preset source could not deliver preset groups."""


@dataclass(frozen=True)
class FetchResult:
    """
    Preset groups delivered to one caller.

    stale is set when the cache was invalidated while the fetch was in
    flight; stale results are never cached.
    """

    groups: list[PresetGroup]
    generation: int
    stale: bool = False


@dataclass(frozen=True)
class PresetInputValidation:
    valid: bool
    errors: list[str] = field(default_factory=list)
    title: str = ""
    min: ParsedValue | None = None
    max: ParsedValue | None = None
