"""Exceptions for HTTP errors from the model API and data providers."""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Raised when a remote service returns an HTTP error."""

    def __init__(self, status_code: int, body: dict[str, Any] | str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")
