"""Simple HTTP client utilities using httpx."""

from __future__ import annotations

import httpx
from typing import Any, Dict, Mapping


async def post(
    url: str,
    content: bytes,
    headers: Mapping[str, str],
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> httpx.Response:
    """Perform an asynchronous HTTP POST request.

    When ``client`` is given it is used as-is and left open; otherwise a
    client is created for this single request and closed afterwards.
    ``timeout`` overrides httpx's default only when set.
    """
    options: Dict[str, Any] = {}
    if timeout is not None:
        options["timeout"] = timeout
    if client is not None:
        return await client.post(url, content=content, headers=headers, **options)
    async with httpx.AsyncClient(**options) as owned:
        return await owned.post(url, content=content, headers=headers)
