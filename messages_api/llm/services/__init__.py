"""Service layer exports."""

from .http_message_client import HttpMessageClient
from .message_client import MessageClient

__all__ = [
    "HttpMessageClient",
    "MessageClient",
]
