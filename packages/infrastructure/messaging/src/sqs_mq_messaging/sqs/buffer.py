"""SQSSendBuffer / SQSBufferFactory — per-queue dispatch without batching."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqs_mq_core.ports.queues import IBufferFactory, ISendBuffer

if TYPE_CHECKING:
    from sqs_mq_core.ports.queues import QueueReference

    from .connection import SQSConnectionManager
    from .request import SendMessageRequest

logger = logging.getLogger("sqs_mq.sqs.buffer")


class SQSSendBuffer(ISendBuffer):
    """Sends each request straight through ``send_message``.

    No batching and no retry; client errors propagate to the caller.
    """

    def __init__(self, connection: SQSConnectionManager, queue: QueueReference) -> None:
        self._connection = connection
        self.queue = queue

    async def send(self, request: SendMessageRequest) -> None:
        client = await self._connection.get_client()
        out = await client.send_message(**request.to_send_kwargs())
        logger.debug(
            "Sent message %s to %s",
            (out or {}).get("MessageId"),
            request.queue_url,
        )


class SQSBufferFactory(IBufferFactory):
    """Creates and caches one SQSSendBuffer per queue URL."""

    def __init__(self, connection: SQSConnectionManager) -> None:
        self._connection = connection
        self._buffers: dict[str, SQSSendBuffer] = {}

    def get_or_create(self, queue: QueueReference) -> SQSSendBuffer:
        buffer = self._buffers.get(queue.url)
        if buffer is None:
            buffer = SQSSendBuffer(self._connection, queue)
            self._buffers[queue.url] = buffer
            logger.debug("Created send buffer for %s", queue.url)
        return buffer
