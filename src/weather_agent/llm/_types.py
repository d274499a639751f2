"""Unified types for chat-completion requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

FINISH_STOP = "stop"
FINISH_TOOL_CALLS = "tool_calls"

ROLES = frozenset({"system", "user", "assistant", "tool"})


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool call returned by the model."""

    id: str
    name: str
    arguments: dict[str, object]


@dataclass(frozen=True, slots=True)
class Message:
    """A chat message (system, user or assistant turn)."""

    role: str
    content: str = ""
    tool_calls: tuple[ToolCall, ...] = ()

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")


@dataclass(frozen=True, slots=True)
class ToolResult:
    """A tool-role message carrying the serialized result of a tool call."""

    tool_call_id: str
    name: str
    content: str

    @property
    def role(self) -> str:
        return "tool"


@dataclass(frozen=True, slots=True)
class Tool:
    """A tool/function definition passed to the model."""

    name: str
    description: str
    parameters: dict[str, object]

    def parameter_names(self) -> list[str]:
        """Declared parameter names, in schema order."""
        properties = self.parameters.get("properties", {})
        return list(properties) if isinstance(properties, dict) else []

    def required(self) -> list[str]:
        """Required parameter names, in the order the schema lists them."""
        required = self.parameters.get("required", [])
        return list(required) if isinstance(required, list) else []


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Response:
    """A single choice returned by the model."""

    text: str = ""
    tool_calls: tuple[ToolCall, ...] = ()
    usage: Usage = field(default_factory=Usage)
    stop_reason: str = ""
    raw: dict[str, object] = field(default_factory=dict)

    def to_message(self) -> Message:
        """Convert this response to the assistant Message appended to a transcript."""
        return Message(role="assistant", content=self.text, tool_calls=self.tool_calls)


ConversationItem: TypeAlias = Message | ToolResult
