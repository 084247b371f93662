"""A bounded binary min-heap stored in a list."""

from __future__ import annotations

from typing import Any


class MinHeap:
    """Min-heap holding at most ``capacity`` keys."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"MinHeap(capacity={self.capacity}, items={self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"heap index {index} out of range")

    def _sift_up(self, index: int, *, to_root: bool = False) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not to_root and not items[parent] > items[index]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            smallest = index
            left, right = 2 * index + 1, 2 * index + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def peek(self) -> Any:
        """Return the smallest key without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def insert_key(self, key: Any) -> None:
        """Add ``key``; raise OverflowError when the heap is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full: could not insert key")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def decrease_key(self, index: int, new_value: Any) -> None:
        """Lower the key stored at ``index`` to ``new_value``."""
        self._check_index(index)
        if self._items[index] < new_value:
            raise ValueError("new value is larger than the current key")
        self._items[index] = new_value
        self._sift_up(index)

    def extract_min(self) -> Any:
        """Remove and return the smallest key."""
        if not self._items:
            raise IndexError("extract from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def delete_key(self, index: int) -> Any:
        """Remove the key stored at ``index`` and return it."""
        self._check_index(index)
        self._sift_up(index, to_root=True)
        return self.extract_min()