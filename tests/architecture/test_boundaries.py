from pytest_archon import archrule


def test_core_independence() -> None:
    """
    Core must not import from the messaging adapters.
    It is the foundation and must remain transport-agnostic.
    """
    (
        archrule("core_is_independent")
        .match("sqs_mq_core*")
        .should_not_import("sqs_mq_messaging*")
        .should_not_import("aiobotocore*")
        .check("sqs_mq_core")
    )


def test_message_isolation() -> None:
    """
    Message envelope and naming rule must not depend on ports.
    """
    (
        archrule("message_isolation")
        .match("sqs_mq_core.messaging*")
        .should_not_import("sqs_mq_core.ports*")
        .check("sqs_mq_core")
    )


def test_primitives_isolation() -> None:
    """
    Primitives are the bottom layer of core.
    """
    (
        archrule("primitives_isolation")
        .match("sqs_mq_core.primitives*")
        .should_not_import("sqs_mq_core.messaging*")
        .should_not_import("sqs_mq_core.ports*")
        .check("sqs_mq_core")
    )


def test_memory_adapters_no_sqs() -> None:
    """In-memory collaborators must work without the SQS adapter."""
    (
        archrule("memory_no_sqs")
        .match("sqs_mq_messaging.memory*")
        .should_not_import("sqs_mq_messaging.sqs*")
        .should_not_import("aiobotocore*")
        .check("sqs_mq_messaging")
    )
