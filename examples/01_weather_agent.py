"""01: Weather Agent (OpenAI).

Let the model call the location and weather tools, printing each tool call
as it happens, then show the whole transcript.
"""

from weather_agent import AgentConfig, Client, FunctionCallingAgent, build_registry


def on_event(event):
    """Print tool activity for observability."""
    if event.type == "step_start":
        print(f"\n--- Step {event.step_number} ---")
    elif event.type == "tool_call":
        print(f"  Call: {event.tool_name}({event.tool_args})")
    elif event.type == "tool_result":
        print(f"  Result: {event.result[:100]}")


client = Client("openai", model="gpt-4o-mini")
agent = FunctionCallingAgent(client, build_registry(), config=AgentConfig(on_event=on_event))

result = agent.run("What's the current weather in my location?")

print(f"\nFinal answer: {result.answer}")
print(f"State: {result.state.name}")
print(f"Total tokens: {result.total_usage.total_tokens}")

print("\nTranscript:")
for item in result.transcript:
    print(f"  [{item.role}] {item.content[:80]}")

# Continue the same conversation
follow_up = agent.run("And what city is that?", result.transcript)
print(f"\nFollow-up: {follow_up.answer}")
