from .messaging import IMessageProducer, IOneWayClient
from .queues import IBufferFactory, IQueueManager, ISendBuffer, QueueReference

__all__ = [
    "IBufferFactory",
    "IMessageProducer",
    "IOneWayClient",
    "IQueueManager",
    "ISendBuffer",
    "QueueReference",
]
