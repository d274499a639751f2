"""AsyncClient: the awaitable model gateway."""

from __future__ import annotations

from typing import Any

from weather_agent.llm._client import ChatInput, normalize_input
from weather_agent.llm._providers import create_provider
from weather_agent.llm._types import Response, Tool


class AsyncClient:
    """Async chat-completions client that delegates to a provider implementation.

    Usage::

        from weather_agent import AsyncClient

        client = AsyncClient("openai", model="gpt-4o-mini")
        response = await client.chat("Hello!")
        print(response.text)
    """

    def __init__(self, provider: str = "openai", *, model: str, api_key: str | None = None) -> None:
        self._provider = create_provider(provider, model, api_key)

    async def chat(
        self,
        prompt_or_messages: ChatInput,
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Send an async chat request and return the first choice as a Response."""
        messages = normalize_input(prompt_or_messages)
        return await self._provider.acomplete(messages, system=system, tools=tools, **kwargs)
