"""Shared test fixtures."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from weather_agent.llm._types import Tool


@pytest.fixture
def weather_tool() -> Tool:
    return Tool(
        name="getCurrentWeather",
        description="Get the current weather in a given location",
        parameters={
            "type": "object",
            "properties": {
                "latitude": {"type": "string"},
                "longitude": {"type": "string"},
            },
            "required": ["longitude", "latitude"],
        },
    )


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json / get_json."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        text: str = "",
    ) -> None:
        self.status_code = status_code
        self._json_data = json_data
        self.text = text or ""
        self.ok = 200 <= status_code < 300

    def json(self) -> Any:
        if self._json_data is None:
            raise ValueError("No JSON")
        return self._json_data


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


@pytest.fixture
def mock_get(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.get`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.get", mock)
    return mock
