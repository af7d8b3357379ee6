"""Classic comparison sorts, with operation counting for merge and quick sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

__all__ = [
    "SortStats",
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "merge_sort_with_stats",
    "quick_sort_with_stats",
]


@dataclass
class SortStats:
    """Counts of element moves and comparisons made by a sort."""

    swaps: int = 0
    comparisons: int = 0


def bubble_sort(items: Iterable[Any]) -> list:
    """Return a sorted list, stopping early once a pass makes no swap."""
    data = list(items)
    for end in range(len(data) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if data[j + 1] < data[j]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def insertion_sort(items: Iterable[Any]) -> list:
    """Return a sorted list built by inserting each element in place."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def selection_sort(items: Iterable[Any]) -> list:
    """Return a sorted list by repeatedly selecting the minimum."""
    data = list(items)
    for i in range(len(data)):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        if data[smallest] < data[i]:
            data[i], data[smallest] = data[smallest], data[i]
    return data


def _merge(left: list, right: list, stats: SortStats) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
        stats.comparisons += 1
        stats.swaps += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(data: list, stats: SortStats) -> list:
    if len(data) <= 1:
        return data
    split = (len(data) + 1) // 2
    left = _merge_sort(data[:split], stats)
    right = _merge_sort(data[split:], stats)
    return _merge(left, right, stats)


def merge_sort_with_stats(items: Iterable[Any]) -> tuple[list, SortStats]:
    """Merge sort, returning the sorted list and the merge step counts."""
    stats = SortStats()
    return _merge_sort(list(items), stats), stats


def merge_sort(items: Iterable[Any]) -> list:
    """Return a stably sorted list using top-down merge sort."""
    return merge_sort_with_stats(items)[0]


def _partition(data: list, left: int, right: int, pivot: Any, stats: SortStats) -> int:
    while left <= right:
        while data[left] < pivot:
            left += 1
            stats.comparisons += 1
        while data[right] > pivot:
            right -= 1
            stats.comparisons += 1
        if left <= right:
            data[left], data[right] = data[right], data[left]
            stats.swaps += 1
            stats.comparisons += 1
            left += 1
            right -= 1
    return left


def _quick_sort(data: list, left: int, right: int, stats: SortStats) -> None:
    if left >= right:
        return
    pivot = data[(left + right) // 2]
    index = _partition(data, left, right, pivot, stats)
    _quick_sort(data, left, index - 1, stats)
    _quick_sort(data, index, right, stats)


def quick_sort_with_stats(items: Iterable[Any]) -> tuple[list, SortStats]:
    """Quick sort with a middle pivot, returning the list and operation counts."""
    data = list(items)
    stats = SortStats()
    _quick_sort(data, 0, len(data) - 1, stats)
    return data, stats


def quick_sort(items: Iterable[Any]) -> list:
    """Return a sorted list using quick sort with a middle pivot."""
    return quick_sort_with_stats(items)[0]