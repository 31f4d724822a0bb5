"""InMemorySendBuffer / InMemoryBufferFactory — recording send buffers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqs_mq_core.ports.queues import IBufferFactory, ISendBuffer

from ..serialization import MessageSerializer

if TYPE_CHECKING:
    from sqs_mq_core.messaging.message import Message
    from sqs_mq_core.ports.queues import QueueReference


class InMemorySendBuffer(ISendBuffer):
    """Buffer that keeps every request it is given, in arrival order."""

    def __init__(self, queue: QueueReference) -> None:
        self.queue = queue
        self.sent: list[Any] = []

    async def send(self, request: Any) -> None:
        self.sent.append(request)


class InMemoryBufferFactory(IBufferFactory):
    """Buffer factory with assertion helpers for tests.

    One InMemorySendBuffer per queue URL. ``created_for`` records each
    ``get_or_create`` call.
    """

    def __init__(self, serializer: MessageSerializer | None = None) -> None:
        self._buffers: dict[str, InMemorySendBuffer] = {}
        self._serializer = serializer or MessageSerializer()
        self.created_for: list[str] = []
        self.closed = False

    def get_or_create(self, queue: QueueReference) -> InMemorySendBuffer:
        self.created_for.append(queue.url)
        buffer = self._buffers.get(queue.url)
        if buffer is None:
            buffer = InMemorySendBuffer(queue)
            self._buffers[queue.url] = buffer
        return buffer

    def get_sent(self, queue_url: str | None = None) -> list[Any]:
        """Return requests sent so far, optionally for a single queue URL."""
        if queue_url is not None:
            buffer = self._buffers.get(queue_url)
            return list(buffer.sent) if buffer else []
        return [request for b in self._buffers.values() for request in b.sent]

    def get_messages(self, queue_url: str | None = None) -> list[Message[Any]]:
        """Decode the bodies of sent requests back into messages."""
        return [
            self._serializer.deserialize(request.message_body)
            for request in self.get_sent(queue_url)
        ]

    def assert_sent(self, queue_url: str, count: int = 1) -> None:
        """Assert that exactly `count` requests were sent to `queue_url`."""
        sent = self.get_sent(queue_url)
        assert len(sent) == count, (
            f"Expected {count} request(s) for {queue_url!r}, got {len(sent)}. "
            f"Queues: {sorted(self._buffers)}"
        )

    async def close(self) -> None:
        """Mark the factory closed (only its owner should call this)."""
        self.closed = True
