"""SQS client management and queue URL resolution."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from aiobotocore.session import AioSession

from ..exceptions import MessagingConnectionError

logger = logging.getLogger("sqs_mq.sqs.connection")

NON_EXISTENT_QUEUE = "AWS.SimpleQueueService.NonExistentQueue"


def _error_code(exc: Exception) -> str | None:
    err = getattr(exc, "response", {}) or {}
    return err.get("Error", {}).get("Code")


class SQSConnectionManager:
    """Manages the aiobotocore SQS client and queue URL resolution."""

    def __init__(
        self,
        region_name: str = "us-east-1",
        *,
        session: AioSession | None = None,
        **client_kwargs: Any,
    ) -> None:
        """Configure region and optional session/client kwargs."""
        self._region = region_name
        self._session = session or AioSession()
        self._client_kwargs = client_kwargs
        self._client: Any = None
        self._client_cm: Any = None
        self._client_lock = asyncio.Lock()

    async def get_client(self) -> Any:
        """Return shared SQS client; create if needed."""
        if self._client is not None:
            return self._client
        async with self._client_lock:
            if self._client is None:
                self._client_cm = self._session.create_client(
                    "sqs",
                    region_name=self._region,
                    **self._client_kwargs,
                )
                self._client = await self._client_cm.__aenter__()
                logger.debug("Opened SQS client for region %s", self._region)
        return self._client

    async def get_queue_url(
        self,
        queue_name: str,
        attributes: dict[str, str] | None = None,
    ) -> str:
        """Resolve queue name to queue URL, creating the queue if missing."""
        client = await self.get_client()
        try:
            out = await client.get_queue_url(QueueName=queue_name)
            return str(out["QueueUrl"])
        except Exception as e:
            if _error_code(e) != NON_EXISTENT_QUEUE:
                raise MessagingConnectionError(str(e)) from e
        try:
            create_kwargs: dict[str, Any] = {"QueueName": queue_name}
            if attributes:
                create_kwargs["Attributes"] = attributes
            out = await client.create_queue(**create_kwargs)
        except Exception as e:
            raise MessagingConnectionError(str(e)) from e
        logger.info("Created SQS queue %s", queue_name)
        return str(out["QueueUrl"])

    async def get_queue_arn(self, queue_url: str) -> str | None:
        """Return the ARN of the queue at *queue_url*."""
        client = await self.get_client()
        try:
            out = await client.get_queue_attributes(
                QueueUrl=queue_url,
                AttributeNames=["QueueArn"],
            )
        except Exception as e:
            raise MessagingConnectionError(str(e)) from e
        return out.get("Attributes", {}).get("QueueArn")

    async def close(self) -> None:
        """Close the client if open."""
        if self._client_cm is not None:
            await self._client_cm.__aexit__(None, None, None)
            self._client_cm = None
            self._client = None

    async def health_check(self) -> bool:
        """Return True if we can list queues (lightweight check)."""
        try:
            client = await self.get_client()
            await client.list_queues(MaxResults=1)
            return True
        except Exception:  # noqa: BLE001
            return False
