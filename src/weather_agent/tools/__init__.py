"""Tool registry and the location/weather tools."""

from weather_agent.tools._registry import (
    RegistrationError,
    ToolRegistry,
    UnknownToolError,
    ValidationError,
)
from weather_agent.tools.weather import (
    TOOLS,
    ToolName,
    build_registry,
    get_current_weather,
    get_location,
)

__all__ = [
    "TOOLS",
    "RegistrationError",
    "ToolName",
    "ToolRegistry",
    "UnknownToolError",
    "ValidationError",
    "build_registry",
    "get_current_weather",
    "get_location",
]
