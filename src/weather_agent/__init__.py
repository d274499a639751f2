"""weather-agent: function calling against a chat-completions API."""

from weather_agent.agents import (
    DEFAULT_SYSTEM_PROMPT,
    EXHAUSTED_MESSAGE,
    AgentConfig,
    AgentEvent,
    AgentResult,
    AgentState,
    AgentStep,
    FunctionCallingAgent,
    Transcript,
)
from weather_agent.llm import (
    APIError,
    AsyncClient,
    Client,
    Message,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)
from weather_agent.tools import (
    TOOLS,
    RegistrationError,
    ToolName,
    ToolRegistry,
    UnknownToolError,
    ValidationError,
    build_registry,
)

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "EXHAUSTED_MESSAGE",
    "TOOLS",
    "APIError",
    "AgentConfig",
    "AgentEvent",
    "AgentResult",
    "AgentState",
    "AgentStep",
    "AsyncClient",
    "Client",
    "FunctionCallingAgent",
    "Message",
    "RegistrationError",
    "Response",
    "Tool",
    "ToolCall",
    "ToolName",
    "ToolRegistry",
    "ToolResult",
    "Transcript",
    "UnknownToolError",
    "Usage",
    "ValidationError",
    "build_registry",
]
