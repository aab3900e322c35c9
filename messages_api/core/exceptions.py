"""Custom exception hierarchy for the Messages API client."""

from __future__ import annotations


class MessagesApiError(Exception):
    """Base exception for everything raised by this package."""


class MessageError(MessagesApiError):
    """Raised by a message client when a call cannot produce a response."""

    prefix = "Message error"

    def __init__(self, description: str) -> None:
        self.description = description
        super().__init__(f"{self.prefix}: {description}")

    @classmethod
    def coerce(cls, error: MessageError | str) -> MessageError:
        """Return ``error`` as a MessageError; bare strings become ApiError."""

        if isinstance(error, MessageError):
            return error
        return ApiError(error)


class RequestFailed(MessageError):
    """Raised when the request never reached or never returned from the service."""

    prefix = "API request failed"


class ApiError(MessageError):
    """Raised when the service answered with an error."""

    prefix = "API error"

    def __init__(
        self,
        description: str,
        *,
        status_code: int | None = None,
        error_type: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        super().__init__(description)


class DecodeError(MessagesApiError):
    """Raised when a wire value does not match the expected shape."""

    def __init__(self, message: str, *, field: str | None = None, tag: str | None = None) -> None:
        self.field = field
        self.tag = tag
        super().__init__(message)
