"""Singly, doubly and XOR-linked lists of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class _SingleNode:
    value: Any
    next: Optional[_SingleNode] = field(default=None, repr=False)


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    next: Optional[_DoubleNode] = field(default=None, repr=False)
    prev: Optional[_DoubleNode] = field(default=None, repr=False)


@dataclass(eq=False)
class _XorNode:
    value: Any
    link: int = 0


class SinglyLinkedList:
    """Forward-linked chain of values built from an iterable."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_SingleNode] = None
        tail: Optional[_SingleNode] = None
        for value in values:
            node = _SingleNode(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """List linked in both directions, supporting front, back and mid insertion."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        node = _DoubleNode(value, next=self._head)
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def _node_at(self, index: int) -> _DoubleNode:
        if not 0 <= index < self._size:
            raise IndexError(f"no node at position {index}")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_after(self, index: int, value: Any) -> None:
        """Insert ``value`` right after the node at position ``index``."""
        previous = self._node_at(index)
        node = _DoubleNode(value, next=previous.next, prev=previous)
        previous.next = node
        if node.next is not None:
            node.next.prev = node
        else:
            self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class XorLinkedList:
    """List whose nodes keep one link: the XOR of their neighbours' addresses.

    Nodes live in an address table; address 0 stands for no node.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, _XorNode] = {}
        self._head = 0
        self._next_address = 1

    def insert(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        address = self._next_address
        self._next_address += 1
        node = _XorNode(value, link=0 ^ self._head)
        if self._head:
            head = self._nodes[self._head]
            following = 0 ^ head.link
            head.link = address ^ following
        self._nodes[address] = node
        self._head = address

    def __iter__(self) -> Iterator[Any]:
        previous, current = 0, self._head
        while current:
            node = self._nodes[current]
            yield node.value
            previous, current = current, previous ^ node.link

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"XorLinkedList({list(self)!r})"