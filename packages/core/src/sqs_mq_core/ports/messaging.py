from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..messaging.message import Message


@runtime_checkable
class IMessageProducer(Protocol):
    """
    Port for one-way publishing of messages to a transport.

    Infrastructure packages provide concrete adapters.
    """

    async def publish(self, payload: Any) -> None:
        """
        Publish *payload* to its conventional destination.

        Args:
            payload: A ``Message`` envelope (routed by its own hint) or any
                raw object (wrapped in a fresh envelope).
        """
        ...

    async def publish_to(self, queue_name: str, message: Message[Any]) -> None:
        """Publish *message* to the queue named *queue_name*."""
        ...

    async def close(self) -> None:
        """Release producer resources; never closes injected collaborators."""
        ...


@runtime_checkable
class IOneWayClient(Protocol):
    """Port for fire-and-forget request sending."""

    async def send_one_way(self, request: Any, queue_name: str | None = None) -> None:
        """Wrap *request* in an envelope and publish it."""
        ...

    async def send_all_one_way(self, requests: Iterable[Any] | None) -> None:
        """Send every request in order; ``None`` or empty is a no-op."""
        ...
