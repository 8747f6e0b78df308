"""
Site content build — Plain HTTP downloads.

Used for release asset URLs and the website locale file. No GitHub
credentials are attached, since these hosts are not the API.
"""

from __future__ import annotations

from typing import Any

import httpx

from sitecontent.errors import FetchError
from sitecontent.utils.logging import logger


async def _get(
    url: str,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None,
) -> httpx.Response:
    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp
    except httpx.HTTPError as exc:
        logger.error("  Unable to fetch %s", url)
        raise FetchError(url, str(exc)) from exc


async def fetch_json(
    url: str,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """GET a URL and return the decoded JSON body."""
    resp = await _get(url, timeout, transport)
    try:
        return resp.json()
    except ValueError as exc:
        logger.error("  Response from %s is not valid JSON", url)
        raise FetchError(url, f"invalid JSON: {exc}") from exc


async def fetch_text(
    url: str,
    timeout: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """GET a URL and return the body as text."""
    resp = await _get(url, timeout, transport)
    return resp.text
