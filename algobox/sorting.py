"""Classic sorting algorithms that return new, ascending lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


def _check_non_negative(items: list[Any]) -> None:
    for value in items:
        if not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"expected a non-negative integer, got {value}")


def _sift_down(items: list[Any], root: int, size: int) -> None:
    while (child := 2 * root + 1) < size:
        if child + 1 < size and items[child] < items[child + 1]:
            child += 1
        if not items[root] < items[child]:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap."""
    items = list(values)
    size = len(items)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down(items, start, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _partition(items: list[Any], left: int, right: int) -> int:
    pivot = items[left]
    while left < right:
        while left < right and items[right] >= pivot:
            right -= 1
        if left != right:
            items[left] = items[right]
            left += 1
        while left < right and items[left] <= pivot:
            left += 1
        if left != right:
            items[right] = items[left]
            right -= 1
    items[left] = pivot
    return left


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort with the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = _partition(items, low, high)
        pending.append((low, pivot - 1))
        pending.append((pivot + 1, high))
    return items


def radix_sort_passes(values: Iterable[int]) -> Iterator[list[int]]:
    """Yield the list after each least-significant-digit radix pass.

    Only non-negative integers are accepted.
    """
    items = list(values)
    _check_non_negative(items)
    largest = max(items, default=0)
    exponent = 1
    while largest // exponent > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[value // exponent % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        yield list(items)
        exponent *= 10


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by decimal digits."""
    items = list(values)
    passes = list(radix_sort_passes(items))
    return passes[-1] if passes else items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Exchange each position with any later, smaller element."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        for j in range(i + 1, size):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with gaps halving down to one."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Repeatedly swap adjacent out-of-order pairs."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for d in range(size - done - 1):
            if items[d] > items[d + 1]:
                items[d], items[d + 1] = items[d + 1], items[d]
    return items


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Counting sort of non-negative integers: one bucket per value."""
    items = list(values)
    _check_non_negative(items)
    if not items:
        return []
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insert each element into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def sort_strings(names: Iterable[str]) -> list[str]:
    """Sort strings by character code, as a byte-wise comparison would."""
    return sorted(names)