"""QueueNames — conventional queue naming per message type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple

DEFAULT_PREFIX = "mq:"


class TypedQueueNames(NamedTuple):
    """All conventional queue names of one message type."""

    in_queue: str
    priority_queue: str
    out_queue: str
    dlq: str


@dataclass(frozen=True)
class QueueNames:
    """
    Deterministic naming rule mapping a message type to its queue names.

    ``OrderCreated`` with the default prefix resolves to::

        mq:OrderCreated.inq
        mq:OrderCreated.priorityq
        mq:OrderCreated.outq
        mq:OrderCreated.dlq

    The same instance must be used for wrapping raw payloads and for
    envelope routing, otherwise the two paths would disagree.
    """

    prefix: str = DEFAULT_PREFIX

    @staticmethod
    def type_name(message_type: type[Any] | str) -> str:
        if isinstance(message_type, str):
            return message_type
        return message_type.__name__

    def _resolve(self, message_type: type[Any] | str, suffix: str) -> str:
        return f"{self.prefix}{self.type_name(message_type)}.{suffix}"

    def in_queue(self, message_type: type[Any] | str) -> str:
        return self._resolve(message_type, "inq")

    def priority_queue(self, message_type: type[Any] | str) -> str:
        return self._resolve(message_type, "priorityq")

    def out_queue(self, message_type: type[Any] | str) -> str:
        return self._resolve(message_type, "outq")

    def dlq(self, message_type: type[Any] | str) -> str:
        return self._resolve(message_type, "dlq")

    def for_type(self, message_type: type[Any] | str) -> TypedQueueNames:
        """Return every conventional queue name of *message_type*."""
        return TypedQueueNames(
            in_queue=self.in_queue(message_type),
            priority_queue=self.priority_queue(message_type),
            out_queue=self.out_queue(message_type),
            dlq=self.dlq(message_type),
        )


DEFAULT_QUEUE_NAMES = QueueNames()
