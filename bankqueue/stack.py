"""Stack kept on a linked list, plus decimal to binary conversion."""

from __future__ import annotations

from typing import Any

from bankqueue.linkedlist import LinkedList


class Stack:
    """Last-in, first-out stack whose top is the first node of a list."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds nothing."""
        return self._items.is_empty()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.push_front(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop_front()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty stack")
        return self._items.first.value


def to_binary(decimal: int) -> str:
    """Return the binary digits of ``decimal``; empty for values below 1."""
    stack = Stack()
    while decimal > 0:
        stack.push(decimal % 2)
        decimal //= 2
    digits = []
    while not stack.is_empty():
        digits.append(str(stack.pop()))
    return "".join(digits)