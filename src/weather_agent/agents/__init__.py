"""Function-calling agent loop."""

from weather_agent.agents._base import (
    DEFAULT_SYSTEM_PROMPT,
    EXHAUSTED_MESSAGE,
    AgentConfig,
    AgentEvent,
    AgentResult,
    AgentState,
    AgentStep,
)
from weather_agent.agents._function_calling import FunctionCallingAgent
from weather_agent.agents._transcript import Transcript

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "EXHAUSTED_MESSAGE",
    "AgentConfig",
    "AgentEvent",
    "AgentResult",
    "AgentState",
    "AgentStep",
    "FunctionCallingAgent",
    "Transcript",
]
