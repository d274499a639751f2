"""Tests for Client, AsyncClient and provider creation."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from weather_agent.agents._transcript import Transcript
from weather_agent.llm._async_client import AsyncClient
from weather_agent.llm._client import Client
from weather_agent.llm._providers import create_provider
from weather_agent.llm._providers._openai_compat import OpenAICompatProvider
from weather_agent.llm._types import Message, Response, Tool, ToolResult, Usage


def _mock_provider() -> MagicMock:
    provider = MagicMock()
    provider.complete = MagicMock(return_value=Response(text="Hi!", usage=Usage(10, 5, 15)))
    provider.acomplete = AsyncMock(return_value=Response(text="Hello!", usage=Usage(10, 5, 15)))
    return provider


@patch("weather_agent.llm._client.create_provider")
def test_chat_string(mock_create: MagicMock) -> None:
    mock_create.return_value = _mock_provider()
    client = Client("openai", model="gpt-4o-mini", api_key="sk-test")
    resp = client.chat("Hello!")

    assert resp.text == "Hi!"
    messages = mock_create.return_value.complete.call_args[0][0]
    assert messages == [Message(role="user", content="Hello!")]


@patch("weather_agent.llm._client.create_provider")
def test_chat_dict_messages(mock_create: MagicMock) -> None:
    mock_create.return_value = _mock_provider()
    client = Client(model="gpt-4o-mini", api_key="sk-test")
    client.chat([{"role": "system", "content": "Be brief"}, {"role": "user", "content": "Hi"}])

    messages = mock_create.return_value.complete.call_args[0][0]
    assert [m.role for m in messages] == ["system", "user"]
    mock_create.assert_called_once_with("openai", "gpt-4o-mini", "sk-test")


@patch("weather_agent.llm._client.create_provider")
def test_chat_transcript_and_tools(mock_create: MagicMock, weather_tool: Tool) -> None:
    mock_create.return_value = _mock_provider()
    client = Client("openai", model="gpt-4o-mini", api_key="sk-test")
    transcript = Transcript.with_system("sys")
    transcript.append(Message("user", "Hi"))
    transcript.append(ToolResult(tool_call_id="c1", name="getLocation", content="{}"))
    client.chat(transcript, tools=[weather_tool])

    args, kwargs = mock_create.return_value.complete.call_args
    assert args[0] == list(transcript)
    assert kwargs["tools"] == [weather_tool]


@patch("weather_agent.llm._async_client.create_provider")
async def test_async_chat(mock_create: MagicMock) -> None:
    mock_create.return_value = _mock_provider()
    client = AsyncClient("openai", model="gpt-4o-mini", api_key="sk-test")
    resp = await client.chat("Hello!")

    assert resp.text == "Hello!"
    mock_create.return_value.acomplete.assert_called_once()
    messages = mock_create.return_value.acomplete.call_args[0][0]
    assert messages[0].content == "Hello!"


def test_create_provider_explicit_key() -> None:
    provider = create_provider("openai", "gpt-4o-mini", "sk-test")
    assert isinstance(provider, OpenAICompatProvider)


def test_create_provider_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    provider = create_provider("openai", "gpt-4o-mini")
    assert provider._headers["Authorization"] == "Bearer sk-env"


def test_create_provider_missing_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    with pytest.raises(ValueError, match="GROQ_API_KEY"):
        create_provider("groq", "llama-3.3-70b")


def test_create_provider_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown provider"):
        create_provider("nope", "m", "k")
