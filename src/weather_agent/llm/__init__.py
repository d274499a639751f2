"""Model gateway: chat-completions clients with function calling."""

from weather_agent.llm._async_client import AsyncClient
from weather_agent.llm._client import Client
from weather_agent.llm._exceptions import APIError
from weather_agent.llm._types import (
    FINISH_STOP,
    FINISH_TOOL_CALLS,
    ConversationItem,
    Message,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)

__all__ = [
    "FINISH_STOP",
    "FINISH_TOOL_CALLS",
    "APIError",
    "AsyncClient",
    "Client",
    "ConversationItem",
    "Message",
    "Response",
    "Tool",
    "ToolCall",
    "ToolResult",
    "Usage",
]
