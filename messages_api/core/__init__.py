"""Core infrastructure utilities."""

from .config import MessagesSettings, get_settings
from .exceptions import (
    ApiError,
    DecodeError,
    MessageError,
    MessagesApiError,
    RequestFailed,
)
from .logging_config import configure_logging, get_logger

__all__ = [
    "ApiError",
    "DecodeError",
    "MessageError",
    "MessagesApiError",
    "MessagesSettings",
    "RequestFailed",
    "configure_logging",
    "get_logger",
    "get_settings",
]
