"""SendMessageRequest and SQSQueueDefinition — SQS wire-level models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

FIFO_SUFFIX = ".fifo"


def is_fifo_queue(name_or_url: str) -> bool:
    """Return True if *name_or_url* addresses an SQS FIFO queue."""
    return name_or_url.endswith(FIFO_SUFFIX)


class SQSQueueDefinition(BaseModel):
    """Resolved SQS queue, as cached by the queue manager."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    arn: str | None = None
    visibility_timeout: int = Field(default=30, ge=0, le=43200)
    receive_wait_time: int = Field(default=20, ge=0, le=20)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_fifo(self) -> bool:
        return is_fifo_queue(self.url)


class SendMessageRequest(BaseModel):
    """One SQS ``send_message`` call: destination address plus serialized body."""

    model_config = ConfigDict(frozen=True)

    queue_url: str
    message_body: str
    message_group_id: str | None = None
    message_deduplication_id: str | None = None
    delay_seconds: int | None = Field(default=None, ge=0, le=900)

    def to_send_kwargs(self) -> dict[str, Any]:
        """Render botocore ``send_message`` kwargs, omitting unset options."""
        kwargs: dict[str, Any] = {
            "QueueUrl": self.queue_url,
            "MessageBody": self.message_body,
        }
        if self.message_group_id is not None:
            kwargs["MessageGroupId"] = self.message_group_id
        if self.message_deduplication_id is not None:
            kwargs["MessageDeduplicationId"] = self.message_deduplication_id
        if self.delay_seconds is not None:
            kwargs["DelaySeconds"] = self.delay_seconds
        return kwargs
