from .message import Message, create_message
from .queue_names import DEFAULT_QUEUE_NAMES, QueueNames, TypedQueueNames

__all__ = [
    "DEFAULT_QUEUE_NAMES",
    "Message",
    "QueueNames",
    "TypedQueueNames",
    "create_message",
]
