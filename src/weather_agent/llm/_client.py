"""Client: the synchronous model gateway."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeAlias

from weather_agent.llm._providers import create_provider
from weather_agent.llm._types import ConversationItem, Message, Response, Tool, ToolResult

ChatInput: TypeAlias = str | Iterable[dict[str, str] | Message | ToolResult]


def normalize_input(prompt_or_messages: ChatInput) -> list[ConversationItem]:
    """Turn a prompt string or a sequence of messages into conversation items."""
    if isinstance(prompt_or_messages, str):
        return [Message(role="user", content=prompt_or_messages)]
    items: list[ConversationItem] = []
    for m in prompt_or_messages:
        if isinstance(m, (Message, ToolResult)):
            items.append(m)
        else:
            items.append(Message(role=m["role"], content=m["content"]))
    return items


class Client:
    """Chat-completions client that delegates to a provider implementation.

    Usage::

        from weather_agent import Client

        client = Client("openai", model="gpt-4o-mini")
        response = client.chat("Hello!")
        print(response.text)
    """

    def __init__(self, provider: str = "openai", *, model: str, api_key: str | None = None) -> None:
        self._provider = create_provider(provider, model, api_key)

    def chat(
        self,
        prompt_or_messages: ChatInput,
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        """Send a chat request and return the first choice as a Response."""
        messages = normalize_input(prompt_or_messages)
        return self._provider.complete(messages, system=system, tools=tools, **kwargs)
