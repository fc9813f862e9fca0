"""A bounded record of the command lines a shell has run."""

from __future__ import annotations

from collections import deque
from typing import Iterator

HISTORY_LENGTH = 10


class History:
    """The most recent command lines, oldest first, numbered from 1."""

    def __init__(self, capacity: int = HISTORY_LENGTH) -> None:
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self._entries: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def add(self, command: str) -> None:
        """Record ``command``, dropping the oldest entry when full."""
        self._entries.append(command)

    def get(self, number: int) -> str:
        """Return entry ``number`` (1 is the oldest); raise IndexError if absent."""
        if not 1 <= number <= len(self._entries):
            raise IndexError(f"history entry {number} out of range")
        return self._entries[number - 1]

    def last(self) -> str:
        """Return the newest entry; raise IndexError if the history is empty."""
        return self.get(len(self._entries))

    def format(self) -> str:
        """Return the numbered listing, one entry per line."""
        return "".join(
            f"{number} {command}\n"
            for number, command in enumerate(self._entries, start=1)
        )