from .exceptions import InfrastructureError, SqsMqError

__all__ = [
    "InfrastructureError",
    "SqsMqError",
]
