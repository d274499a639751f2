"""02: Async Weather Agent (OpenAI).

The same loop over AsyncClient. Each model call and tool call is awaited
in turn; nothing runs concurrently.
"""

import asyncio

from weather_agent import AsyncClient, FunctionCallingAgent, build_registry


async def main():
    client = AsyncClient("openai", model="gpt-4o-mini")
    agent = FunctionCallingAgent(client, build_registry())

    result = await agent.async_run("Where am I located right now?")
    print(f"Answer: {result.answer}")
    print(f"Steps taken: {len(result.steps)}")


if __name__ == "__main__":
    asyncio.run(main())
