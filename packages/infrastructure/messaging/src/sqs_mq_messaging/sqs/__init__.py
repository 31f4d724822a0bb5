"""SQS transport adapter: connection, queue manager, send buffer, producer."""

from __future__ import annotations

from .buffer import SQSBufferFactory, SQSSendBuffer
from .connection import SQSConnectionManager
from .producer import SQSMessageProducer, create_send_message_request
from .queue_manager import SQSQueueManager
from .queue_names import sqs_queue_name
from .request import SendMessageRequest, SQSQueueDefinition

__all__ = [
    "SQSBufferFactory",
    "SQSConnectionManager",
    "SQSMessageProducer",
    "SQSQueueDefinition",
    "SQSQueueManager",
    "SQSSendBuffer",
    "SendMessageRequest",
    "create_send_message_request",
    "sqs_queue_name",
]
