"""In-place quicksort (Lomuto partition) and top-down merge sort."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element.

    Elements less than or equal to the pivot end up before it, greater
    ones after it. Returns the pivot's final index.
    """
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with quicksort."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))


def _merge_sort_range(items: MutableSequence[Any], left: int, right: int) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort_range(items, left, mid)
    _merge_sort_range(items, mid + 1, right)

    left_part = list(items[left : mid + 1])
    right_part = list(items[mid + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(left_part) and j < len(right_part):
        if left_part[i] <= right_part[j]:
            items[k] = left_part[i]
            i += 1
        else:
            items[k] = right_part[j]
            j += 1
        k += 1
    for value in (*left_part[i:], *right_part[j:]):
        items[k] = value
        k += 1


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place with merge sort."""
    _merge_sort_range(items, 0, len(items) - 1)