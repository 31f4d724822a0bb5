"""sqs-mq-core — transport-agnostic primitives for one-way messaging.

Message envelope, queue naming rule and collaborator ports. Depends only
on pydantic.
"""

from __future__ import annotations

from .messaging import (
    DEFAULT_QUEUE_NAMES,
    Message,
    QueueNames,
    TypedQueueNames,
    create_message,
)
from .ports import (
    IBufferFactory,
    IMessageProducer,
    IOneWayClient,
    IQueueManager,
    ISendBuffer,
    QueueReference,
)
from .primitives import InfrastructureError, SqsMqError

__all__ = [
    "DEFAULT_QUEUE_NAMES",
    "IBufferFactory",
    "IMessageProducer",
    "IOneWayClient",
    "IQueueManager",
    "ISendBuffer",
    "InfrastructureError",
    "Message",
    "QueueNames",
    "QueueReference",
    "SqsMqError",
    "TypedQueueNames",
    "create_message",
]
