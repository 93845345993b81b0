"""Bounded first-in, first-out queue of ticket numbers."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from bankqueue.linkedlist import LinkedList

MAX_QUEUE = 50
FULL_TEXT = "Queue penuh! Tidak ada yang bisa ditambah."
EMPTY_TEXT = "Queue kosong."


class QueueFullError(Exception):
    """Raised when a value is added to a queue that is already full."""


class QueueEmptyError(Exception):
    """Raised when a value is taken from an empty queue."""


class TicketQueue:
    """A queue kept on a linked list, holding at most ``capacity`` values."""

    def __init__(self, capacity: int = MAX_QUEUE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"TicketQueue({list(self._items)!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._items.is_empty()

    def is_full(self) -> bool:
        """Return True when no further value fits."""
        return len(self) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError(FULL_TEXT)
        self._items.push_back(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError(EMPTY_TEXT)
        return self._items.pop_front()

    def format(self) -> str:
        """Render the queue contents as text."""
        if self.is_empty():
            return EMPTY_TEXT
        return self._items.format()