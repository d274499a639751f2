"""Ask the weather agent a question: ``python -m weather_agent [question...]``."""

from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from weather_agent.agents import FunctionCallingAgent
from weather_agent.llm import Client
from weather_agent.tools import build_registry

logger = logging.getLogger("weather_agent")

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_QUESTION = "Where am I located right now?"


def main(argv: list[str] | None = None) -> int:
    """Run one question through the agent and print the answer."""
    args = sys.argv[1:] if argv is None else argv
    question = " ".join(args) or DEFAULT_QUESTION

    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    try:
        client = Client("openai", model=DEFAULT_MODEL)
        agent = FunctionCallingAgent(client, build_registry())
        result = agent.run(question)
    except Exception:
        logger.exception("Agent run failed")
        return 1

    print(result.answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
