"""
Presets component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from fluidkit.domain.entities import PresetGroup


class PresetStorePort(Protocol):
    """Synchronous access to persisted preset groups."""

    def list_groups(self) -> list[PresetGroup]:
        """All preset groups in display order."""
        ...


class PresetSourcePort(Protocol):
    """Asynchronous preset fetch, typically a remote request."""

    async def fetch_groups(self) -> list[PresetGroup]:
        """
        Fetch all preset groups.

        Raises:
            PresetFetchError: The request failed
        """
        ...
