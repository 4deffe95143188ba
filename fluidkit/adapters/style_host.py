"""
In-memory style host adapter.

Stands in for a preview document: containers are plain text buffers keyed
by id. Marking the host unavailable simulates a surface that is reloading.
"""

from __future__ import annotations

from fluidkit.components.overlay import StyleHostUnavailable


class InMemoryStyleContainer:
    def __init__(self, container_id: str, text: str = "") -> None:
        self.container_id = container_id
        self.text = text

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text


class InMemoryStyleHost:
    """
    StyleHostPort backed by a dict of containers.

    reload() discards every container, as a reloaded document would.
    """

    def __init__(self, *, available: bool = True) -> None:
        self.available = available
        self.containers: dict[str, InMemoryStyleContainer] = {}

    def find(self, container_id: str) -> InMemoryStyleContainer | None:
        if not self.available:
            raise StyleHostUnavailable("preview surface not loaded")
        return self.containers.get(container_id)

    def create(self, container_id: str) -> InMemoryStyleContainer | None:
        if not self.available:
            raise StyleHostUnavailable("preview surface not loaded")
        container = InMemoryStyleContainer(container_id)
        self.containers[container_id] = container
        return container

    def reload(self) -> None:
        self.containers.clear()

    def text(self, container_id: str) -> str:
        container = self.containers.get(container_id)
        return container.read() if container else ""
