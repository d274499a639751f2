"""Append-only conversation transcript."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from weather_agent.llm._types import ConversationItem, Message


class Transcript:
    """Ordered log of the messages exchanged with the model.

    Items can only be appended; existing entries are never removed or
    reordered. The caller owns the transcript and passes it to each run.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[ConversationItem] = ()) -> None:
        self._items: list[ConversationItem] = list(items)

    @classmethod
    def with_system(cls, prompt: str) -> Transcript:
        """Start a transcript whose first entry is a system message."""
        return cls([Message(role="system", content=prompt)])

    def append(self, item: ConversationItem) -> None:
        self._items.append(item)

    @property
    def items(self) -> tuple[ConversationItem, ...]:
        return tuple(self._items)

    def __iter__(self) -> Iterator[ConversationItem]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> ConversationItem:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Transcript({len(self._items)} items)"
