"""Tool registry for describing tools to the model and dispatching its calls."""

from __future__ import annotations

import asyncio
import inspect
import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

from weather_agent.llm._types import Tool, ToolCall, ToolResult

logger = logging.getLogger(__name__)


class UnknownToolError(KeyError):
    """Raised when the model asks for a tool that is not registered."""


class ValidationError(Exception):
    """Raised when a required tool argument is missing."""


class RegistrationError(Exception):
    """Raised when a tool cannot be registered."""


def _bind_args(
    tool_def: Tool, arguments: Mapping[str, object]
) -> tuple[list[object], dict[str, object]]:
    """Split named arguments into positional values following the schema's parameter order.

    The model names its arguments but implementations are called positionally,
    so values are taken in the order the schema declares its properties. The
    ``required`` list is only checked for presence; its order is not used.
    Once an optional parameter is absent, the remaining ones are passed by
    keyword. Names the schema does not declare are dropped.
    """
    for key in tool_def.required():
        if key not in arguments:
            msg = f"Missing required argument '{key}' for tool '{tool_def.name}'"
            raise ValidationError(msg)

    args: list[object] = []
    kwargs: dict[str, object] = {}
    positional = True
    for key in tool_def.parameter_names():
        if key not in arguments:
            positional = False
            continue
        if positional:
            args.append(arguments[key])
        else:
            kwargs[key] = arguments[key]
    return args, kwargs


def _serialize(result: Any) -> str:
    return result if isinstance(result, str) else json.dumps(result)


class ToolRegistry:
    """Registry that maps tool names to callables and their model-facing schemas."""

    def __init__(self) -> None:
        self._callables: dict[str, Callable[..., Any]] = {}
        self._definitions: dict[str, Tool] = {}

    def register(self, name: str, fn: Callable[..., Any], tool_def: Tool) -> None:
        """Register a callable with its tool definition.

        Raises:
            RegistrationError: If the name is taken, does not match the
                definition, or ``fn`` cannot take every declared parameter
                positionally.
        """
        if name != tool_def.name:
            raise RegistrationError(
                f"Tool name {name!r} does not match definition name {tool_def.name!r}"
            )
        if name in self._callables:
            raise RegistrationError(f"Tool {name!r} is already registered")
        params = tool_def.parameter_names()
        try:
            inspect.signature(fn).bind(*params)
        except TypeError as exc:
            raise RegistrationError(
                f"Tool {name!r} cannot accept parameters {params} positionally: {exc}"
            ) from exc
        except ValueError:
            # Builtins without an introspectable signature are taken on trust.
            pass
        self._callables[name] = fn
        self._definitions[name] = tool_def

    def describe(self) -> list[Tool]:
        """Return tool definitions in registration order (for passing to the model)."""
        return list(self._definitions.values())

    def _lookup(self, name: str) -> tuple[Callable[..., Any], Tool]:
        fn = self._callables.get(name)
        if fn is None:
            raise UnknownToolError(f"Unknown tool: {name!r}")
        return fn, self._definitions[name]

    def invoke(self, name: str, arguments: Mapping[str, object]) -> Any:
        """Call a registered tool, binding its arguments positionally.

        Errors raised by the tool itself propagate unchanged.
        """
        fn, tool_def = self._lookup(name)
        args, kwargs = _bind_args(tool_def, arguments)
        logger.debug("Invoking tool %s args=%s kwargs=%s", name, args, kwargs)
        return fn(*args, **kwargs)

    async def async_invoke(self, name: str, arguments: Mapping[str, object]) -> Any:
        """Call a registered tool asynchronously; plain functions run in a worker thread."""
        fn, tool_def = self._lookup(name)
        args, kwargs = _bind_args(tool_def, arguments)
        logger.debug("Invoking tool %s args=%s kwargs=%s", name, args, kwargs)
        if inspect.iscoroutinefunction(fn):
            return await fn(*args, **kwargs)
        return await asyncio.to_thread(fn, *args, **kwargs)

    def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute a model tool call and wrap the JSON-serialized result."""
        result = self.invoke(tool_call.name, tool_call.arguments)
        return ToolResult(
            tool_call_id=tool_call.id, name=tool_call.name, content=_serialize(result)
        )

    async def async_execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute a model tool call asynchronously and wrap the serialized result."""
        result = await self.async_invoke(tool_call.name, tool_call.arguments)
        return ToolResult(
            tool_call_id=tool_call.id, name=tool_call.name, content=_serialize(result)
        )

    def __contains__(self, name: str) -> bool:
        return name in self._callables

    def __len__(self) -> int:
        return len(self._callables)
