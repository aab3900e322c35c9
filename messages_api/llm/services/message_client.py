"""Abstract client contract for the Messages API."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..schemas.requests import CountMessageTokensParams, CreateMessageParams
from ..schemas.responses import CountMessageTokensResponse, CreateMessageResponse


class MessageClient(ABC):
    """Operations every Messages API transport must provide.

    Implementations return the decoded response or raise a ``MessageError``
    subclass (``RequestFailed`` or ``ApiError``); a reply that cannot be
    decoded surfaces as ``DecodeError``. What a call without parameters does
    is up to the implementation.
    """

    @abstractmethod
    async def create_message(
        self, params: CreateMessageParams | None = None
    ) -> CreateMessageResponse:
        """Create a message from the given request."""
        ...

    @abstractmethod
    async def count_tokens(
        self, params: CountMessageTokensParams | None = None
    ) -> CountMessageTokensResponse:
        """Count the input tokens of the given messages."""
        ...
