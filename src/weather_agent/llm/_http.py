"""Thin HTTP helpers around ``requests``."""

from __future__ import annotations

import logging
from typing import Any

import requests

from weather_agent.llm._exceptions import APIError

logger = logging.getLogger(__name__)


def _raise_for_status(r: requests.Response) -> None:
    if not r.ok:
        try:
            body: dict[str, Any] | str = r.json()
        except Exception:
            body = r.text
        raise APIError(r.status_code, body)


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = None,
) -> dict[str, Any]:
    """POST JSON and return the parsed response, raising on HTTP errors."""
    logger.debug("POST %s", url)
    r = requests.post(url, headers=headers, json=payload, timeout=timeout)
    _raise_for_status(r)
    return r.json()


def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float | None = None,
) -> Any:
    """GET a URL and return the decoded JSON body, raising on HTTP errors."""
    logger.debug("GET %s params=%s", url, params)
    r = requests.get(url, params=params, timeout=timeout)
    _raise_for_status(r)
    return r.json()
