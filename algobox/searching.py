"""Searching a sequence: linear, binary and interpolation search."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _ensure_sorted(values: Sequence[Any]) -> None:
    if any(later < earlier for earlier, later in zip(values, values[1:])):
        raise ValueError("input is not sorted")


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to target, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of key in sorted values, or None.

    Raises ValueError when values is not sorted ascending.
    """
    _ensure_sorted(values)
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < key:
            low = mid + 1
        elif values[mid] == key:
            return mid
        else:
            high = mid - 1
    return None


def recursive_binary_search(values: Sequence[Any], key: Any) -> bool:
    """Report whether key occurs in sorted values, searching recursively."""

    def search(low: int, high: int) -> bool:
        if low > high:
            return False
        mid = (low + high) // 2
        if key == values[mid]:
            return True
        if key < values[mid]:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(values) - 1)


def interpolation_search(values: Sequence[int], item: int) -> int | None:
    """Return an index of item in sorted numeric values, or None."""
    low, high = 0, len(values) - 1
    while low <= high and values[low] <= item <= values[high]:
        if values[high] == values[low]:
            return low if values[low] == item else None
        mid = low + (high - low) * (item - values[low]) // (values[high] - values[low])
        if values[mid] == item:
            return mid
        if item < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None