"""Small algorithms over integer sequences."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence


def remove_duplicates(values: Iterable[Hashable]) -> list:
    """Drop repeated values, keeping each first occurrence in its original order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def union(first: Iterable[Hashable], second: Iterable[Hashable]) -> list:
    """Distinct values of ``first`` then the new values of ``second``, in order of appearance."""
    result = remove_duplicates(first)
    seen = set(result)
    for value in second:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of unit-width bars.

    An empty histogram has area 0.
    """
    stack: list[int] = []
    best = 0

    def close_bar(right: int) -> None:
        nonlocal best
        top = stack.pop()
        width = right - stack[-1] - 1 if stack else right
        best = max(best, heights[top] * width)

    for index, height in enumerate(heights):
        while stack and heights[stack[-1]] > height:
            close_bar(index)
        stack.append(index)
    while stack:
        close_bar(len(heights))
    return best