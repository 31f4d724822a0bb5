from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class QueueReference(Protocol):
    """
    Resolved destination returned by a queue manager.

    Opaque to producers: they hold one per call and hand it to the
    buffer factory.
    """

    @property
    def name(self) -> str:
        """Provider-side queue name."""
        ...

    @property
    def url(self) -> str:
        """Provider-specific address used as the send destination."""
        ...


@runtime_checkable
class IQueueManager(Protocol):
    """
    Port resolving logical destination names to queues.

    Implementations must be idempotent and safe under concurrent calls:
    the first caller for a name creates the queue, concurrent callers for
    the same name receive the same reference.
    """

    async def get_or_create(self, queue_name: str) -> QueueReference:
        """Resolve *queue_name*, creating the queue if it does not exist."""
        ...


@runtime_checkable
class ISendBuffer(Protocol):
    """
    Port owning network dispatch for a single queue.

    Batching, retries and backoff all live behind ``send``.
    """

    async def send(self, request: Any) -> None:
        """Accept a fully-formed transport send request for delivery."""
        ...


@runtime_checkable
class IBufferFactory(Protocol):
    """Port returning the send buffer bound to a queue, cached per queue."""

    def get_or_create(self, queue: QueueReference) -> ISendBuffer:
        """Return the buffer for *queue*, creating it on first use."""
        ...
