"""Singly linked list of values, reachable only through its first node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

EMPTY_TEXT = "List ini kosong"
SEPARATOR = "================== "


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A linear singly linked list that only knows its first node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.first: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.first is None

    def nodes(self) -> Iterator[Node]:
        """Yield every node from first to last."""
        node = self.first
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Optional[Node]:
        last = None
        for last in self.nodes():
            pass
        return last

    def find(self, value: Any) -> Optional[Node]:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self.nodes() if node.value == value), None)

    def find_previous(self, value: Any) -> Optional[Node]:
        """Return the node before the first one holding ``value``.

        None is returned when ``value`` is absent or sits in the first node.
        """
        previous = None
        for node in self.nodes():
            if node.value == value:
                return previous
            previous = node
        return None

    def has_node(self, node: Node) -> bool:
        """Return True when ``node`` itself is part of this list."""
        return any(candidate is node for candidate in self.nodes())

    def push_front(self, value: Any) -> Node:
        """Add ``value`` as the new first element."""
        return self.insert_node_first(Node(value))

    def push_back(self, value: Any) -> Node:
        """Add ``value`` as the new last element."""
        return self.insert_node_last(Node(value))

    def pop_front(self) -> Any:
        """Remove the first element and return its value."""
        if self.first is None:
            raise IndexError("pop from empty list")
        node = self.first
        self.first = node.next
        node.next = None
        return node.value

    def pop_back(self) -> Any:
        """Remove the last element and return its value."""
        if self.first is None:
            raise IndexError("pop from empty list")
        previous = None
        last = self.first
        while last.next is not None:
            previous, last = last, last.next
        if previous is None:
            self.first = None
        else:
            previous.next = None
        return last.value

    def insert_node_first(self, node: Node) -> Node:
        """Link ``node`` in as the first element."""
        node.next = self.first
        self.first = node
        return node

    def insert_node_after(self, node: Node, previous: Node) -> Node:
        """Link ``node`` in directly after ``previous``."""
        if not self.has_node(previous):
            raise ValueError("previous node is not part of the list")
        node.next = previous.next
        previous.next = node
        return node

    def insert_node_last(self, node: Node) -> Node:
        """Link ``node`` in as the last element."""
        node.next = None
        last = self._last_node()
        if last is None:
            self.first = node
        else:
            last.next = node
        return node

    def remove(self, value: Any) -> bool:
        """Remove the first element holding ``value``.

        The list is left unchanged when no element holds it; the return value
        tells whether anything was removed.
        """
        target = self.find(value)
        if target is None:
            return False
        previous = self.find_previous(value)
        if previous is None:
            self.first = target.next
        else:
            previous.next = target.next
        target.next = None
        return True

    def remove_after(self, previous: Node) -> Node:
        """Unlink and return the node following ``previous``."""
        if previous.next is None:
            raise ValueError("Tidak ada element berikutnya")
        removed = previous.next
        previous.next = removed.next
        removed.next = None
        return removed

    def clear(self) -> None:
        """Remove every element."""
        node = self.first
        while node is not None:
            node.next, node = None, node.next
        self.first = None

    def format(self) -> str:
        """Render the contents followed by a separator line."""
        if self.is_empty():
            body = EMPTY_TEXT
        else:
            body = "Isi List: " + "".join(f"{value} -> " for value in self) + "NULL"
        return f"{body}\n{SEPARATOR}"