"""Linked list, FIFO queue and LIFO stack of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class LinkedList:
    """A singly linked sequence of values, head first."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def insert_head(self, data: int) -> None:
        """Put ``data`` in front of the current head."""
        self._items.insert(0, data)

    def delete_head(self) -> int:
        """Remove the head and return its value."""
        if not self._items:
            raise IndexError("delete from an empty list")
        return self._items.pop(0)

    def insert_at(self, position: int, data: int) -> None:
        """Insert ``data``: at the head for position 0, otherwise right after
        the node at ``position``."""
        if position == 0:
            self.insert_head(data)
            return
        if not 0 < position < len(self._items):
            raise IndexError("position out of range")
        self._items.insert(position + 1, data)

    def delete_at(self, position: int) -> int:
        """Remove the node at ``position`` and return its value."""
        if not self._items:
            raise IndexError("list is empty")
        if not 0 <= position < len(self._items):
            raise IndexError("position out of range")
        return self._items.pop(position)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"


class Queue:
    """First-in first-out queue."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(items)

    def enqueue(self, data: int) -> None:
        """Add ``data`` at the rear."""
        self._items.append(data)

    def dequeue(self) -> int:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("queue underflow")
        return self._items.popleft()

    def peek(self) -> int | None:
        """Return the front value, or None when the queue is empty."""
        return self._items[0] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Show the queue front to rear, e.g. ``1 -> 2 -> NULL``."""
        return "".join(f"{value} -> " for value in self._items) + "NULL"

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"


class Stack:
    """Last-in first-out stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = list(items)

    def push(self, data: int) -> None:
        """Put ``data`` on top."""
        self._items.append(data)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Show the stack top to bottom, e.g. ``3 -> 2 -> NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"