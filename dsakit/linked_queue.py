"""First-in first-out queue on a chain of nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    next: Optional[_Node] = field(default=None, repr=False)


class LinkedQueue:
    """Queue with constant-time enqueue at the rear and dequeue at the front."""

    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0

    def enqueue(self, key: Any) -> None:
        """Add ``key`` at the rear."""
        node = _Node(key)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the key at the front."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.key

    def front(self) -> Any:
        """Return the key at the front without removing it."""
        if self._front is None:
            raise IndexError("front of an empty queue")
        return self._front.key

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        keys = []
        node = self._front
        while node is not None:
            keys.append(node.key)
            node = node.next
        return f"LinkedQueue({keys!r})"