"""Provider registry: maps provider names to provider instances."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from weather_agent.llm._providers._openai_compat import (
    OPENAI_COMPAT_PROVIDERS,
    OpenAICompatProvider,
)

if TYPE_CHECKING:
    from weather_agent.llm._providers._base import BaseProvider


def _resolve_key(env_var: str, api_key: str | None) -> str:
    key = api_key or os.environ.get(env_var, "")
    if not key:
        raise ValueError(
            f"No API key provided. Pass api_key= or set the {env_var} environment variable."
        )
    return key


def create_provider(name: str, model: str, api_key: str | None = None) -> BaseProvider:
    """Create a provider instance by name."""
    if name in OPENAI_COMPAT_PROVIDERS:
        env_var = OPENAI_COMPAT_PROVIDERS[name]["env_key"]
        return OpenAICompatProvider(name, model, _resolve_key(env_var, api_key))

    raise ValueError(f"Unknown provider {name!r}. Supported: {sorted(OPENAI_COMPAT_PROVIDERS)}")
