"""Tests for the QueueNames naming rule."""

from __future__ import annotations

import pytest

from sqs_mq_core.messaging.queue_names import (
    DEFAULT_QUEUE_NAMES,
    QueueNames,
    TypedQueueNames,
)


class ShipOrder:
    pass


@pytest.mark.parametrize(
    ("method", "expected"),
    [
        ("in_queue", "mq:ShipOrder.inq"),
        ("priority_queue", "mq:ShipOrder.priorityq"),
        ("out_queue", "mq:ShipOrder.outq"),
        ("dlq", "mq:ShipOrder.dlq"),
    ],
)
def test_default_names(method: str, expected: str) -> None:
    assert getattr(DEFAULT_QUEUE_NAMES, method)(ShipOrder) == expected


def test_type_name_accepts_string() -> None:
    assert QueueNames.type_name("ShipOrder") == "ShipOrder"
    assert QueueNames().in_queue("ShipOrder") == QueueNames().in_queue(ShipOrder)


def test_for_type_bundle() -> None:
    names = QueueNames(prefix="x:").for_type(ShipOrder)
    assert names == TypedQueueNames(
        in_queue="x:ShipOrder.inq",
        priority_queue="x:ShipOrder.priorityq",
        out_queue="x:ShipOrder.outq",
        dlq="x:ShipOrder.dlq",
    )


def test_queue_names_is_frozen() -> None:
    names = QueueNames()
    with pytest.raises(AttributeError):
        names.prefix = "other:"  # type: ignore[misc]
