"""Mapping of logical queue names onto names SQS accepts."""

from __future__ import annotations

import re

from .request import FIFO_SUFFIX

MAX_QUEUE_NAME_LENGTH = 80

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def sqs_queue_name(queue_name: str) -> str:
    """Return the SQS-safe form of *queue_name*.

    ``mq:OrderCreated.inq`` becomes ``mq-OrderCreated-inq``. A trailing
    ``.fifo`` is preserved.
    """
    stem, suffix = queue_name, ""
    if queue_name.endswith(FIFO_SUFFIX):
        stem, suffix = queue_name[: -len(FIFO_SUFFIX)], FIFO_SUFFIX
    name = _INVALID_CHARS.sub("-", stem) + suffix
    if not stem:
        raise ValueError(f"Queue name {queue_name!r} is empty")
    if len(name) > MAX_QUEUE_NAME_LENGTH:
        raise ValueError(
            f"Queue name {name!r} exceeds {MAX_QUEUE_NAME_LENGTH} characters"
        )
    return name
