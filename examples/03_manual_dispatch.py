"""03: Manual Dispatch (OpenAI).

Drive a single round by hand: ask the model, dispatch the first tool call
through the registry and send the result back.
"""

from weather_agent import Client, Message, build_registry

client = Client("openai", model="gpt-4o-mini")
registry = build_registry()

print("Registered tools:")
for t in registry.describe():
    print(f"  {t.name}: {t.description}")
print()

messages = [
    Message(role="system", content="You are a helpful assistant."),
    Message(role="user", content="Where am I located right now?"),
]
response = client.chat(messages, tools=registry.describe())

if response.tool_calls:
    tc = response.tool_calls[0]
    result = registry.execute(tc)
    print(f"[Tool: {tc.name}({tc.arguments}) → {result.content[:80]}]")

    messages.append(response.to_message())
    messages.append(result)
    response = client.chat(messages, tools=registry.describe())

print("\nAssistant:", response.text)
