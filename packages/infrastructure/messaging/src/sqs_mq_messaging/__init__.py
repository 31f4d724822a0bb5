"""Message transport adapters for sqs-mq — SQS and in-memory."""

from __future__ import annotations

from .exceptions import (
    MessagingConnectionError,
    MessagingError,
    MessagingSerializationError,
)
from .memory import (
    InMemoryBufferFactory,
    InMemoryQueue,
    InMemoryQueueManager,
    InMemorySendBuffer,
)
from .serialization import MessageSerializer

__all__ = [
    "InMemoryBufferFactory",
    "InMemoryQueue",
    "InMemoryQueueManager",
    "InMemorySendBuffer",
    "MessageSerializer",
    "MessagingConnectionError",
    "MessagingError",
    "MessagingSerializationError",
]
