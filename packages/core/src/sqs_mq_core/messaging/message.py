"""Message — immutable in-memory envelope around an application payload."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .queue_names import DEFAULT_QUEUE_NAMES, QueueNames

T = TypeVar("T")


class Message(BaseModel, Generic[T]):
    """Envelope carrying a body plus delivery metadata.

    The envelope is separate from its wire form; serializers turn it into
    the transport body. Routing is derived from the body type and
    ``priority`` only, so it is a pure function of the envelope.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: UUID = Field(default_factory=uuid.uuid4)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    priority: int = Field(default=0, ge=0)
    retry_attempts: int = Field(default=0, ge=0)
    reply_id: UUID | None = None
    reply_to: str | None = None
    tag: str | None = None
    meta: dict[str, str] = Field(default_factory=dict)
    body: T

    @property
    def body_type(self) -> type[Any]:
        """Runtime class of the body; drives conventional routing."""
        return type(self.body)

    def to_in_queue_name(self, queue_names: QueueNames | None = None) -> str:
        """Return the destination queue name for this envelope.

        Messages with a positive priority go to the type's priority queue.
        """
        names = queue_names or DEFAULT_QUEUE_NAMES
        if self.priority > 0:
            return names.priority_queue(self.body_type)
        return names.in_queue(self.body_type)


def create_message(body: Any, **fields: Any) -> Message[Any]:
    """Wrap *body* in a fresh Message; *body* itself is left untouched."""
    return Message(body=body, **fields)
