"""Reusable HTTP client utilities."""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

import httpx


@asynccontextmanager
async def async_http_client(
    base_url: str = "",
    timeout: float = 10.0,
    *,
    headers: Mapping[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield a configured AsyncClient and close it afterwards."""

    async with httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout,
        headers=dict(headers or {}),
        transport=transport,
    ) as client:
        yield client
