"""SQSQueueManager — resolves logical queue names to cached SQS queues."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sqs_mq_core.ports.queues import IQueueManager

from .queue_names import sqs_queue_name
from .request import SQSQueueDefinition, is_fifo_queue

if TYPE_CHECKING:
    from .connection import SQSConnectionManager

logger = logging.getLogger("sqs_mq.sqs.queue_manager")


class SQSQueueManager(IQueueManager):
    """SQS adapter implementing IQueueManager.

    Logical names (``mq:OrderCreated.inq``) are mapped to SQS-safe names
    (``mq-OrderCreated-inq``). Each queue is created at most once per
    manager; concurrent callers for the same name wait on a per-name lock
    and share the cached definition.
    """

    def __init__(
        self,
        connection: SQSConnectionManager,
        *,
        visibility_timeout: int = 30,
        receive_wait_time: int = 20,
    ) -> None:
        """Configure queue manager.

        Args:
            connection: Shared connection manager.
            visibility_timeout: ``VisibilityTimeout`` for queues created here.
            receive_wait_time: ``ReceiveMessageWaitTimeSeconds`` for queues
                created here.
        """
        self._connection = connection
        self.visibility_timeout = visibility_timeout
        self.receive_wait_time = receive_wait_time
        self._definitions: dict[str, SQSQueueDefinition] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    @property
    def definitions(self) -> dict[str, SQSQueueDefinition]:
        """Snapshot of cached definitions keyed by SQS queue name."""
        return dict(self._definitions)

    def get(self, queue_name: str) -> SQSQueueDefinition | None:
        """Return the cached definition for *queue_name*, if resolved."""
        return self._definitions.get(sqs_queue_name(queue_name))

    def clear_cache(self) -> None:
        """Forget every resolved queue; the queues themselves are untouched.

        Per-name locks are kept, so a resolution still in flight keeps
        serializing later callers for the same name.
        """
        self._definitions.clear()

    def _queue_attributes(self, name: str) -> dict[str, str]:
        attributes = {
            "VisibilityTimeout": str(self.visibility_timeout),
            "ReceiveMessageWaitTimeSeconds": str(self.receive_wait_time),
        }
        if is_fifo_queue(name):
            attributes["FifoQueue"] = "true"
        return attributes

    async def get_or_create(self, queue_name: str) -> SQSQueueDefinition:
        """Resolve *queue_name*, creating the SQS queue on first use."""
        name = sqs_queue_name(queue_name)
        cached = self._definitions.get(name)
        if cached is not None:
            return cached

        lock = self._locks.setdefault(name, asyncio.Lock())
        async with lock:
            cached = self._definitions.get(name)
            if cached is not None:
                return cached
            url = await self._connection.get_queue_url(
                name, attributes=self._queue_attributes(name)
            )
            arn = await self._connection.get_queue_arn(url)
            definition = SQSQueueDefinition(
                name=name,
                url=url,
                arn=arn,
                visibility_timeout=self.visibility_timeout,
                receive_wait_time=self.receive_wait_time,
            )
            self._definitions[name] = definition
            logger.debug("Resolved queue %s -> %s", queue_name, url)
            return definition
