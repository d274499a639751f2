"""Location and weather tools backed by public JSON APIs."""

from __future__ import annotations

import enum
import logging
from typing import Any

from weather_agent.llm._http import get_json
from weather_agent.llm._types import Tool
from weather_agent.tools._registry import ToolRegistry

logger = logging.getLogger(__name__)

LOCATION_URL = "https://ipapi.co/json/"
WEATHER_URL = "https://api.open-meteo.com/v1/forecast"


class ToolName(enum.StrEnum):
    """Identifiers of the tools offered to the model."""

    GET_CURRENT_WEATHER = "getCurrentWeather"
    GET_LOCATION = "getLocation"


def get_location(timeout: float | None = None) -> Any:
    """Look up the caller's location from their public IP address."""
    data = get_json(LOCATION_URL, timeout=timeout)
    logger.info("Resolved location via %s", LOCATION_URL)
    return data


def get_current_weather(latitude: str, longitude: str, timeout: float | None = None) -> Any:
    """Fetch the hourly apparent-temperature forecast for a coordinate.

    Args:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "hourly": "apparent_temperature",
    }
    data = get_json(WEATHER_URL, params=params, timeout=timeout)
    logger.info("Fetched weather for latitude=%s longitude=%s", latitude, longitude)
    return data


# ``required`` lists longitude first while the implementation takes latitude
# first; dispatch binds by property order, not by this list.
GET_CURRENT_WEATHER_TOOL = Tool(
    name=ToolName.GET_CURRENT_WEATHER,
    description="Get the current weather in a given location",
    parameters={
        "type": "object",
        "properties": {
            "latitude": {"type": "string"},
            "longitude": {"type": "string"},
        },
        "required": ["longitude", "latitude"],
    },
)

GET_LOCATION_TOOL = Tool(
    name=ToolName.GET_LOCATION,
    description="Get the user's location based on their IP address",
    parameters={"type": "object", "properties": {}},
)

TOOLS: tuple[Tool, ...] = (GET_CURRENT_WEATHER_TOOL, GET_LOCATION_TOOL)


def build_registry() -> ToolRegistry:
    """Return a registry holding the location and weather tools."""
    registry = ToolRegistry()
    registry.register(ToolName.GET_CURRENT_WEATHER, get_current_weather, GET_CURRENT_WEATHER_TOOL)
    registry.register(ToolName.GET_LOCATION, get_location, GET_LOCATION_TOOL)
    return registry
