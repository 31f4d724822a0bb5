"""MessageSerializer — deterministic JSON wire form of a Message."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python
from sqs_mq_core.messaging.message import Message

from .exceptions import MessagingSerializationError


def _canonical(value: Any) -> Any:
    """Turn sets into lists ordered by their members' JSON text."""
    if isinstance(value, dict):
        return {k: _canonical(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_canonical(v) for v in value), key=_member_key)
    return value


def _member_key(value: Any) -> str:
    return json.dumps(to_jsonable_python(value), sort_keys=True)


class MessageSerializer:
    """Serialize/deserialize Message envelopes to/from JSON text.

    Keys and set members are sorted and separators are compact, so equal
    envelopes always produce identical text.
    """

    def serialize(self, message: Message[Any]) -> str:
        """Encode *message* to its transport body."""
        try:
            data = to_jsonable_python(_canonical(message.model_dump()))
            return json.dumps(data, sort_keys=True, separators=(",", ":"))
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise MessagingSerializationError(str(e)) from e

    def deserialize(self, raw: str | bytes) -> Message[Any]:
        """Decode a transport body back into a Message with a plain body."""
        try:
            text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
            return Message.model_validate(json.loads(text))
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise MessagingSerializationError(str(e)) from e
