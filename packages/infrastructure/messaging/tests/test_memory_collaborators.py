"""Tests for the in-memory queue manager and buffer factory."""

from __future__ import annotations

import pytest

from sqs_mq_core.messaging.message import Message
from sqs_mq_core.ports.queues import IBufferFactory, IQueueManager
from sqs_mq_messaging.memory import (
    InMemoryBufferFactory,
    InMemoryQueue,
    InMemoryQueueManager,
)
from sqs_mq_messaging.serialization import MessageSerializer
from sqs_mq_messaging.sqs.request import SendMessageRequest


@pytest.mark.asyncio
async def test_queue_manager_resolves_once_per_name() -> None:
    manager = InMemoryQueueManager()
    assert isinstance(manager, IQueueManager)
    a1 = await manager.get_or_create("a")
    a2 = await manager.get_or_create("a")
    assert a1 is a2
    assert a1 == InMemoryQueue(name="a", url="memory://a")
    assert manager.resolved == ["a", "a"]
    assert list(manager.queues) == ["a"]


@pytest.mark.asyncio
async def test_buffer_factory_records_and_decodes() -> None:
    factory = InMemoryBufferFactory()
    assert isinstance(factory, IBufferFactory)
    queue = InMemoryQueue(name="a", url="memory://a")
    message = Message(body={"x": 1})
    buffer = factory.get_or_create(queue)
    await buffer.send(
        SendMessageRequest(
            queue_url=queue.url, message_body=MessageSerializer().serialize(message)
        )
    )
    assert factory.get_or_create(queue) is buffer
    assert factory.created_for == ["memory://a", "memory://a"]
    factory.assert_sent("memory://a")
    [decoded] = factory.get_messages("memory://a")
    assert decoded.id == message.id
    assert decoded.body == {"x": 1}


def test_assert_sent_reports_mismatch() -> None:
    factory = InMemoryBufferFactory()
    with pytest.raises(AssertionError, match="Expected 1 request"):
        factory.assert_sent("memory://missing")
    assert factory.get_sent("memory://missing") == []


@pytest.mark.asyncio
async def test_close_marks_only_owner_state() -> None:
    manager = InMemoryQueueManager()
    factory = InMemoryBufferFactory()
    await manager.close()
    await factory.close()
    assert manager.closed is True
    assert factory.closed is True
