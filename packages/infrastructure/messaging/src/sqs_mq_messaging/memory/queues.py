"""InMemoryQueueManager — IQueueManager for tests and local development."""

from __future__ import annotations

from dataclasses import dataclass

from sqs_mq_core.ports.queues import IQueueManager


@dataclass(frozen=True)
class InMemoryQueue:
    """Queue reference addressed as ``memory://{name}``."""

    name: str
    url: str


class InMemoryQueueManager(IQueueManager):
    """Resolves every name to an InMemoryQueue, created once per name.

    ``resolved`` records each ``get_or_create`` call in order, so tests can
    assert on resolution without touching a real broker.
    """

    def __init__(self) -> None:
        self._queues: dict[str, InMemoryQueue] = {}
        self.resolved: list[str] = []
        self.closed = False

    async def get_or_create(self, queue_name: str) -> InMemoryQueue:
        self.resolved.append(queue_name)
        queue = self._queues.get(queue_name)
        if queue is None:
            queue = InMemoryQueue(name=queue_name, url=f"memory://{queue_name}")
            self._queues[queue_name] = queue
        return queue

    @property
    def queues(self) -> dict[str, InMemoryQueue]:
        return dict(self._queues)

    async def close(self) -> None:
        """Mark the manager closed (only its owner should call this)."""
        self.closed = True
