"""Provider for OpenAI-compatible Chat Completions APIs (OpenAI, xAI, Mistral, Groq)."""

from __future__ import annotations

import json
import logging
from typing import Any

from weather_agent.llm._async_http import async_post_json
from weather_agent.llm._http import post_json
from weather_agent.llm._providers._base import BaseProvider
from weather_agent.llm._types import (
    ConversationItem,
    Response,
    Tool,
    ToolCall,
    ToolResult,
    Usage,
)

logger = logging.getLogger(__name__)

OPENAI_COMPAT_PROVIDERS: dict[str, dict[str, str]] = {
    "openai": {
        "base_url": "https://api.openai.com",
        "path": "/v1/chat/completions",
        "env_key": "OPENAI_API_KEY",
    },
    "xai": {
        "base_url": "https://api.x.ai",
        "path": "/v1/chat/completions",
        "env_key": "XAI_API_KEY",
    },
    "mistral": {
        "base_url": "https://api.mistral.ai",
        "path": "/v1/chat/completions",
        "env_key": "MISTRAL_API_KEY",
    },
    "groq": {
        "base_url": "https://api.groq.com",
        "path": "/openai/v1/chat/completions",
        "env_key": "GROQ_API_KEY",
    },
}


def _tool_to_openai(tool: Tool) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": tool.description,
            "parameters": tool.parameters,
        },
    }


def _parse_tool_args(raw_args: str | dict[str, Any]) -> dict[str, Any]:
    if isinstance(raw_args, dict):
        return raw_args
    try:
        return json.loads(raw_args)
    except (json.JSONDecodeError, TypeError):
        return {"_raw": raw_args}


def _parse_response(raw: dict[str, Any]) -> Response:
    choices = raw.get("choices", [])
    if not choices:
        return Response(raw=raw)

    choice = choices[0]
    message = choice.get("message", {})
    text = message.get("content") or ""

    tool_calls: list[ToolCall] = []
    for tc in message.get("tool_calls") or []:
        fn = tc.get("function", {})
        tool_calls.append(
            ToolCall(
                id=tc.get("id", ""),
                name=fn.get("name", ""),
                arguments=_parse_tool_args(fn.get("arguments", "{}")),
            )
        )

    raw_usage = raw.get("usage") or {}
    usage = Usage(
        input_tokens=raw_usage.get("prompt_tokens", 0),
        output_tokens=raw_usage.get("completion_tokens", 0),
        total_tokens=raw_usage.get("total_tokens", 0),
    )

    return Response(
        text=text,
        tool_calls=tuple(tool_calls),
        usage=usage,
        stop_reason=choice.get("finish_reason") or "",
        raw=raw,
    )


def _message_to_wire(item: ConversationItem) -> dict[str, Any]:
    """Convert a ConversationItem to the OpenAI wire format dict."""
    if isinstance(item, ToolResult):
        return {
            "role": "tool",
            "tool_call_id": item.tool_call_id,
            "name": item.name,
            "content": item.content,
        }
    # Assistant turn that requested tools
    if item.tool_calls:
        return {
            "role": item.role,
            "content": item.content or None,
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {
                        "name": tc.name,
                        "arguments": json.dumps(tc.arguments),
                    },
                }
                for tc in item.tool_calls
            ],
        }
    return {"role": item.role, "content": item.content}


class OpenAICompatProvider(BaseProvider):
    """Handles OpenAI, xAI, Mistral, and Groq via the shared Chat Completions format."""

    def __init__(self, provider_name: str, model: str, api_key: str) -> None:
        cfg = OPENAI_COMPAT_PROVIDERS[provider_name]
        self._url = cfg["base_url"] + cfg["path"]
        self._model = model
        self._provider_name = provider_name
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _build_payload(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        msgs: list[dict[str, Any]] = []
        if system:
            msgs.append({"role": "system", "content": system})
        msgs.extend(_message_to_wire(m) for m in messages)

        payload: dict[str, Any] = {"model": self._model, "messages": msgs, **kwargs}
        if tools:
            payload["tools"] = [_tool_to_openai(t) for t in tools]
        logger.debug(
            "%s request: model=%s messages=%d tools=%d",
            self._provider_name,
            self._model,
            len(msgs),
            len(tools or ()),
        )
        return payload

    def complete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        timeout = kwargs.pop("timeout", None)
        payload = self._build_payload(messages, system=system, tools=tools, **kwargs)
        raw = post_json(self._url, self._headers, payload, timeout=timeout)
        return _parse_response(raw)

    async def acomplete(
        self,
        messages: list[ConversationItem],
        *,
        system: str | None = None,
        tools: list[Tool] | None = None,
        **kwargs: Any,
    ) -> Response:
        timeout = kwargs.pop("timeout", None)
        payload = self._build_payload(messages, system=system, tools=tools, **kwargs)
        raw = await async_post_json(self._url, self._headers, payload, timeout=timeout)
        return _parse_response(raw)
