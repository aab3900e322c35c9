"""Messages API client backed by httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from ...core.config import get_settings
from ...core.exceptions import ApiError, DecodeError, RequestFailed
from ...core.http_client import async_http_client
from ...core.logging_config import configure_logging, get_logger
from ..codec import (
    decode_count_tokens_response,
    decode_create_message_response,
    encode_count_tokens_params,
    encode_create_message_params,
)
from ..schemas.requests import CountMessageTokensParams, CreateMessageParams
from ..schemas.responses import CountMessageTokensResponse, CreateMessageResponse
from .message_client import MessageClient

logger = get_logger(__name__)


def _error_details(response: httpx.Response) -> tuple[str, str | None]:
    """Extract message and error type from an error reply, falling back to raw text."""

    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase, None

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict) and error.get("message"):
        error_type = error.get("type")
        return str(error["message"]), str(error_type) if error_type else None
    return response.text or response.reason_phrase, None


class HttpMessageClient(MessageClient):
    """Send requests as JSON over HTTP.

    Headers are passed through untouched; credentials, retries and rate
    limiting are the caller's business.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        configure_logging()
        settings = get_settings()
        self._base_url = base_url or str(settings.api_base)
        self._headers = dict(headers or {})
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport
        self._messages_path = settings.messages_path
        self._count_tokens_path = settings.count_tokens_path

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        logger.info(
            "messages_request_sent",
            path=path,
            model=payload.get("model"),
            message_count=len(payload.get("messages") or []),
        )
        try:
            async with async_http_client(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers,
                transport=self._transport,
            ) as client:
                response = await client.post(path, json=payload)
        except httpx.HTTPError as exc:
            logger.error(
                "messages_request_failed",
                path=path,
                error_type=type(exc).__name__,
                message=str(exc),
            )
            raise RequestFailed(str(exc) or type(exc).__name__) from exc

        if response.is_error:
            message, error_type = _error_details(response)
            logger.error(
                "messages_api_error",
                path=path,
                status_code=response.status_code,
                error_type=error_type,
            )
            raise ApiError(message, status_code=response.status_code, error_type=error_type)

        logger.info("messages_response_received", path=path, status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"response body from {path} is not valid JSON") from exc

    async def create_message(
        self, params: CreateMessageParams | None = None
    ) -> CreateMessageResponse:
        if params is None:
            raise RequestFailed("no request parameters supplied")
        body = await self._post(self._messages_path, encode_create_message_params(params))
        return decode_create_message_response(body)

    async def count_tokens(
        self, params: CountMessageTokensParams | None = None
    ) -> CountMessageTokensResponse:
        if params is None:
            raise RequestFailed("no request parameters supplied")
        body = await self._post(self._count_tokens_path, encode_count_tokens_params(params))
        return decode_count_tokens_response(body)
