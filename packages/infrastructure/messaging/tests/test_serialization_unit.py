"""Tests for MessageSerializer."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from sqs_mq_core.messaging.message import Message
from sqs_mq_messaging.exceptions import MessagingSerializationError
from sqs_mq_messaging.serialization import MessageSerializer


class OrderCreated(BaseModel):
    """Test payload."""

    order_id: str
    amount: float = 100.0


@dataclass
class Refund:
    order_id: str


def test_serialize_deserialize_roundtrip() -> None:
    ser = MessageSerializer()
    m = Message(
        body=OrderCreated(order_id="123", amount=99.5),
        priority=1,
        reply_to="mq:Replies.inq",
        meta={"source": "web"},
    )
    raw = ser.serialize(m)
    assert isinstance(raw, str)
    m2 = ser.deserialize(raw)
    assert m2.id == m.id
    assert m2.created_at == m.created_at
    assert m2.priority == 1
    assert m2.reply_to == "mq:Replies.inq"
    assert m2.meta == {"source": "web"}
    assert m2.body == {"order_id": "123", "amount": 99.5}


def test_deserialize_accepts_bytes() -> None:
    ser = MessageSerializer()
    m = Message(body="hello")
    assert ser.deserialize(ser.serialize(m).encode("utf-8")).body == "hello"


def test_serialize_is_deterministic_for_equal_content() -> None:
    ser = MessageSerializer()
    m1 = Message(body={"b": 1, "a": 2})
    m2 = m1.model_copy(update={"body": {"a": 2, "b": 1}})
    assert ser.serialize(m1) == ser.serialize(m2)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ({1, 9}, {9, 1}, [1, 9]),
        ({"b", "a", "c"}, {"c", "a", "b"}, ["a", "b", "c"]),
        (frozenset({3, 2}), frozenset({2, 3}), [2, 3]),
        ({"k": {"y", "x"}}, {"k": {"x", "y"}}, {"k": ["x", "y"]}),
        ([{(2, 1), (1, 2)}], [{(1, 2), (2, 1)}], [[[1, 2], [2, 1]]]),
    ],
)
def test_serialize_sorts_set_members(
    first: object, second: object, expected: object
) -> None:
    ser = MessageSerializer()
    m1 = Message(body=first)
    m2 = m1.model_copy(update={"body": second})
    raw = ser.serialize(m1)
    assert raw == ser.serialize(m2)
    assert json.loads(raw)["body"] == expected


def test_serialize_is_compact_sorted_json() -> None:
    raw = MessageSerializer().serialize(Message(body={"x": 1}))
    assert " " not in raw
    keys = list(json.loads(raw))
    assert keys == sorted(keys)


def test_serialize_dataclass_body() -> None:
    raw = MessageSerializer().serialize(Message(body=Refund(order_id="r1")))
    assert json.loads(raw)["body"] == {"order_id": "r1"}


def test_serialize_unknown_body_type_raises() -> None:
    class Opaque:
        pass

    with pytest.raises(MessagingSerializationError) as exc_info:
        MessageSerializer().serialize(Message(body=Opaque()))
    assert exc_info.value.__cause__ is not None


def test_deserialize_invalid_json_raises() -> None:
    with pytest.raises(MessagingSerializationError):
        MessageSerializer().deserialize("not json")


def test_deserialize_invalid_structure_raises() -> None:
    with pytest.raises(MessagingSerializationError):
        MessageSerializer().deserialize('{"priority": -3, "body": 1}')


def test_deserialize_missing_body_raises() -> None:
    with pytest.raises(MessagingSerializationError):
        MessageSerializer().deserialize('{"priority": 0}')
