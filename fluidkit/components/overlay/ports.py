"""
Overlay component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class StyleContainerPort(Protocol):
    """A rewritable stylesheet fragment (e.g. a <style> element)."""

    def read(self) -> str:
        """Current stylesheet text."""
        ...

    def write(self, text: str) -> None:
        """Replace the stylesheet text."""
        ...


class StyleHostPort(Protocol):
    """
    The preview surface hosting style containers.

    Both methods return None (or raise StyleHostUnavailable) while the
    surface is not loaded.
    """

    def find(self, container_id: str) -> StyleContainerPort | None:
        """Existing container with this id."""
        ...

    def create(self, container_id: str) -> StyleContainerPort | None:
        """Create and attach a new container with this id."""
        ...
