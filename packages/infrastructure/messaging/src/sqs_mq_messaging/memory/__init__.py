"""In-memory collaborators for tests and local development."""

from __future__ import annotations

from .buffer import InMemoryBufferFactory, InMemorySendBuffer
from .queues import InMemoryQueue, InMemoryQueueManager

__all__ = [
    "InMemoryBufferFactory",
    "InMemoryQueue",
    "InMemoryQueueManager",
    "InMemorySendBuffer",
]
