"""Async HTTP helpers using ``httpx``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from weather_agent.llm._exceptions import APIError

logger = logging.getLogger(__name__)


def _raise_for_status_httpx(r: httpx.Response) -> None:
    if r.is_success:
        return
    try:
        body: dict[str, Any] | str = r.json()
    except Exception:
        body = r.text
    raise APIError(r.status_code, body)


async def async_post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = None,
) -> dict[str, Any]:
    """POST JSON asynchronously and return the parsed response."""
    logger.debug("POST %s", url)
    async with httpx.AsyncClient() as client:
        r = await client.post(url, headers=headers, json=payload, timeout=timeout)
        _raise_for_status_httpx(r)
        return r.json()
