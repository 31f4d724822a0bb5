"""Exception roots for the sqs-mq toolkit."""

from __future__ import annotations


class SqsMqError(Exception):
    """Root exception for the entire sqs-mq toolkit."""


class InfrastructureError(SqsMqError):
    """Base class for all infrastructure-related errors."""
