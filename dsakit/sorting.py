"""Classic comparison and distribution sorts.

Every function takes an iterable and returns a new sorted list (or string);
the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

_CHAR_RANGE = 255


def _sift_down(items: list, size: int, root: int) -> None:
    """Restore the max-heap property below ``root`` within ``items[:size]``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable) -> list:
    """Sort ascending with an in-place max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def bubble_sort(values: Iterable) -> list:
    """Sort ascending, stopping early once a pass makes no exchange."""
    items = list(values)
    for done in range(len(items) - 1):
        swapped = False
        for j in range(len(items) - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort floats in the half-open interval [0, 1) using one bucket per value."""
    items = list(values)
    size = len(items)
    buckets: list[list[float]] = [[] for _ in range(size)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[min(int(size * value), size - 1)].append(value)
    return list(chain.from_iterable(sorted(bucket) for bucket in buckets))


def count_sort_chars(text: str) -> str:
    """Return the characters of ``text`` in code-point order (codes 0..255)."""
    counts = [0] * (_CHAR_RANGE + 1)
    for char in text:
        code = ord(char)
        if code > _CHAR_RANGE:
            raise ValueError(f"character {char!r} is outside the range 0..{_CHAR_RANGE}")
        counts[code] += 1
    return "".join(chr(code) * count for code, count in enumerate(counts))


def counting_sort(values: Iterable[int], lower: int, upper: int) -> list[int]:
    """Sort integers known to lie in ``lower..upper`` inclusive by counting them."""
    if lower > upper:
        raise ValueError("lower limit must not exceed upper limit")
    counts = [0] * (upper - lower + 1)
    for value in values:
        if not lower <= value <= upper:
            raise ValueError(f"{value} is outside the range {lower}..{upper}")
        counts[value - lower] += 1
    return [lower + offset for offset, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable) -> list:
    """Sort ascending by inserting each element into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable) -> list:
    """Quicksort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def _digit_pass(items: list[int], exp: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exp) % 10].append(value)
    return list(chain.from_iterable(buckets))


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort for non-negative integers."""
    items = list(values)
    if not items:
        return items
    if any(value < 0 for value in items):
        raise ValueError("radix sort only handles non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _digit_pass(items, exp)
        exp *= 10
    return items


def selection_sort(values: Iterable, descending: bool = False) -> list:
    """Sort by repeatedly selecting the smallest (or largest) remaining element."""
    items = list(values)
    for i in range(len(items)):
        chosen = i
        for j in range(i + 1, len(items)):
            if (items[j] > items[chosen]) if descending else (items[j] < items[chosen]):
                chosen = j
        if chosen != i:
            items[i], items[chosen] = items[chosen], items[i]
    return items


def shell_sort(values: Iterable) -> list:
    """Shell sort with gaps halving from half the length."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for j in range(gap, len(items)):
            k = j - gap
            while k >= 0 and items[k + gap] < items[k]:
                items[k], items[k + gap] = items[k + gap], items[k]
                k -= gap
        gap //= 2
    return items