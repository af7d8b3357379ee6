"""Binary search over a sorted sequence."""

from __future__ import annotations

from typing import Any, Optional, Sequence

__all__ = ["iterative_search", "recursive_search"]


def iterative_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of ``target`` in sorted ``items``, or None if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target < value:
            high = mid - 1
        else:
            low = mid + 1
    return None


def recursive_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Recursive binary search; return an index of ``target`` or None."""

    def search(low: int, high: int) -> Optional[int]:
        if low > high:
            return None
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target < value:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)