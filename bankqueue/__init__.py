"""A bank ticket queue built on a singly linked list, with a stack and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "linkedlist", "stack", "ticketqueue"]