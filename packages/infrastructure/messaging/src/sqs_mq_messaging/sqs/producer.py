"""SQSMessageProducer — one-way publishing through per-queue send buffers."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from sqs_mq_core.messaging.message import Message, create_message
from sqs_mq_core.messaging.queue_names import DEFAULT_QUEUE_NAMES, QueueNames
from sqs_mq_core.ports.messaging import IMessageProducer, IOneWayClient

from ..serialization import MessageSerializer
from .request import SendMessageRequest, is_fifo_queue

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import TracebackType

    from sqs_mq_core.ports.queues import IBufferFactory, IQueueManager, QueueReference

logger = logging.getLogger("sqs_mq.sqs.producer")

DEFAULT_MESSAGE_GROUP = "default"


def create_send_message_request(
    message: Message[Any],
    queue: QueueReference,
    serializer: MessageSerializer | None = None,
) -> SendMessageRequest:
    """Serialize *message* into a send request addressed to *queue*.

    FIFO queues get the message id as deduplication id and the message tag
    (or ``"default"``) as group id.
    """
    body = (serializer or MessageSerializer()).serialize(message)
    if not is_fifo_queue(queue.url):
        return SendMessageRequest(queue_url=queue.url, message_body=body)
    return SendMessageRequest(
        queue_url=queue.url,
        message_body=body,
        message_group_id=message.tag or DEFAULT_MESSAGE_GROUP,
        message_deduplication_id=str(message.id),
    )


class SQSMessageProducer(IMessageProducer, IOneWayClient):
    """SQS adapter implementing IMessageProducer and IOneWayClient.

    Resolves a queue through the queue manager, fetches its send buffer from
    the buffer factory and hands over the serialized message. Success means
    the request was accepted by the buffer, not that it reached SQS.

    The queue manager and buffer factory are borrowed: ``close()`` leaves
    them open so other producers can keep using them. Collaborator errors
    propagate unchanged.
    """

    def __init__(
        self,
        buffer_factory: IBufferFactory,
        queue_manager: IQueueManager,
        *,
        serializer: MessageSerializer | None = None,
        queue_names: QueueNames | None = None,
        on_published: Callable[[], Any] | None = None,
    ) -> None:
        """Configure producer.

        Args:
            buffer_factory: Shared factory of per-queue send buffers.
            queue_manager: Shared resolver of destination names.
            serializer: Used to serialize messages; default MessageSerializer().
            queue_names: Naming rule for raw payloads and envelope routing.
            on_published: Called with no arguments after each hand-off.
        """
        self._buffer_factory = buffer_factory
        self._queue_manager = queue_manager
        self._serializer = serializer or MessageSerializer()
        self.queue_names = queue_names or DEFAULT_QUEUE_NAMES
        self._on_published = on_published

    @property
    def on_published(self) -> Callable[[], Any] | None:
        """Post-publish hook; may return an awaitable, which is awaited."""
        return self._on_published

    @on_published.setter
    def on_published(self, callback: Callable[[], Any] | None) -> None:
        self._on_published = callback

    # ── Publisher API ────────────────────────────────────────────────

    async def publish(self, payload: Any) -> None:
        """Publish an envelope by its own routing hint, or wrap a raw payload."""
        match payload:
            case Message():
                await self.publish_to(
                    payload.to_in_queue_name(self.queue_names), payload
                )
            case _:
                await self.publish_to(
                    self.queue_names.in_queue(type(payload)),
                    create_message(payload),
                )

    async def publish_message(self, message: Message[Any]) -> None:
        """Publish *message* to the destination its routing hint names."""
        if not isinstance(message, Message):
            raise TypeError(
                f"publish_message expects a Message, got {type(message).__name__}"
            )
        await self.publish_to(message.to_in_queue_name(self.queue_names), message)

    async def publish_to(self, queue_name: str, message: Message[Any]) -> None:
        """Serialize *message* and hand it to the buffer of *queue_name*."""
        queue = await self._queue_manager.get_or_create(queue_name)
        buffer = self._buffer_factory.get_or_create(queue)
        await buffer.send(
            create_send_message_request(message, queue, self._serializer)
        )
        logger.debug("Published message %s to %s", message.id, queue_name)
        await self._notify_published()

    async def publish_request(
        self, queue_name: str, request: SendMessageRequest
    ) -> None:
        """Hand a pre-built *request* to the buffer of *queue_name*."""
        queue = await self._queue_manager.get_or_create(queue_name)
        buffer = self._buffer_factory.get_or_create(queue)
        await buffer.send(request)
        logger.debug("Published pre-built request to %s", queue_name)
        await self._notify_published()

    async def _notify_published(self) -> None:
        callback = self._on_published
        if callback is None:
            return
        result = callback()
        if inspect.isawaitable(result):
            await result

    # ── One-way client API ───────────────────────────────────────────

    async def send_one_way(self, request: Any, queue_name: str | None = None) -> None:
        """Wrap *request* in a default envelope and publish it."""
        message = create_message(request)
        if queue_name is None:
            await self.publish(message)
        else:
            await self.publish_to(queue_name, message)

    async def send_all_one_way(self, requests: Iterable[Any] | None) -> None:
        """Send each request in order; the first failure stops the rest."""
        if requests is None:
            return
        for request in requests:
            await self.send_one_way(request)

    # ── Request building ─────────────────────────────────────────────

    async def build_send_request(
        self, message: Message[Any], queue: str | QueueReference
    ) -> SendMessageRequest:
        """Build the send request for *message* without dispatching it.

        *queue* is either a destination name, resolved through the queue
        manager, or an already-resolved queue reference.
        """
        if isinstance(queue, str):
            queue = await self._queue_manager.get_or_create(queue)
        return create_send_message_request(message, queue, self._serializer)

    # ── Lifecycle ────────────────────────────────────────────────────

    async def close(self) -> None:
        """No-op: the queue manager and buffer factory belong to the caller."""

    async def __aenter__(self) -> SQSMessageProducer:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
