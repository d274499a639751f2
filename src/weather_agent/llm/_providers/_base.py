"""Abstract base for model providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from weather_agent.llm._types import ConversationItem, Response, Tool


class BaseProvider(ABC):
    """Interface that every provider must implement."""

    @abstractmethod
    def complete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response: ...

    @abstractmethod
    async def acomplete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response: ...
