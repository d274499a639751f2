"""Agent configuration, events and result types."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from weather_agent.agents._transcript import Transcript
from weather_agent.llm._types import Response, ToolCall, ToolResult, Usage

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant. Only use the functions you have been provided with."
)

EXHAUSTED_MESSAGE = (
    "The maximum number of iterations has been met without a suitable answer. "
    "Please try again with a more specific input."
)


class AgentState(enum.Enum):
    """States of the function-calling loop."""

    AWAITING_MODEL = "awaiting_model"
    DISPATCHING_TOOL = "dispatching_tool"
    DONE = "done"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class AgentEvent:
    """An observable event fired during agent execution."""

    type: str  # "step_start", "tool_call", "tool_result", "step_end", "done", "exhausted"
    step_number: int = 0
    tool_name: str = ""
    tool_args: dict[str, object] = field(default_factory=dict)
    result: str = ""


@dataclass(frozen=True, slots=True)
class AgentConfig:
    """Configuration for an agent run."""

    max_iterations: int = 5
    system: str = DEFAULT_SYSTEM_PROMPT
    on_event: Callable[[AgentEvent], None] | None = None


@dataclass(frozen=True, slots=True)
class AgentStep:
    """One model call and, if requested, the single tool call it led to."""

    step_number: int
    response: Response
    tool_call: ToolCall | None = None
    tool_result: ToolResult | None = None


@dataclass(frozen=True, slots=True)
class AgentResult:
    """The final result of an agent run."""

    answer: str
    state: AgentState
    transcript: Transcript
    steps: tuple[AgentStep, ...] = ()
    total_usage: Usage = field(default_factory=Usage)


def _accumulate_usage(total: Usage, delta: Usage) -> Usage:
    """Add two Usage objects together."""
    return Usage(
        input_tokens=total.input_tokens + delta.input_tokens,
        output_tokens=total.output_tokens + delta.output_tokens,
        total_tokens=total.total_tokens + delta.total_tokens,
    )


def _fire_event(config: AgentConfig, event_type: str, **kwargs: Any) -> None:
    """Fire an AgentEvent if an event handler is configured."""
    if config.on_event is not None:
        config.on_event(AgentEvent(type=event_type, **kwargs))
