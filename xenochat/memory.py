"""Short-term conversational memory."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .message import Message


class MemoryStore:
    """Keeps the most recent messages, dropping the oldest beyond a limit."""

    def __init__(self, max_short_term: int = 128) -> None:
        if max_short_term < 0:
            raise ValueError("max_short_term must not be negative")
        self._short_term: deque[Message] = deque(maxlen=max_short_term)

    def push(self, message: Message) -> None:
        """Remember a message, evicting the oldest if over the limit."""
        self._short_term.append(message)

    def recent(self) -> Iterator[Message]:
        """Iterate over remembered messages, oldest first."""
        return iter(self._short_term)

    def __len__(self) -> int:
        return len(self._short_term)