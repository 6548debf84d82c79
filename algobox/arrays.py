"""Whole-array queries: maximum and element frequencies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import Any


def largest(values: Iterable[Any]) -> Any:
    """Return the largest element; raise ValueError when there is none."""
    items = list(values)
    if not items:
        raise ValueError("largest() of an empty sequence")
    return max(items)


def count_frequencies(values: Iterable[Hashable]) -> dict[Hashable, int]:
    """Map each distinct element to its count, in order of first appearance."""
    return dict(Counter(values))