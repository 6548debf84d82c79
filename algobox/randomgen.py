"""Lists of random integers in a closed range starting at zero."""

from __future__ import annotations

import random


def random_numbers(
    count: int, maximum: int, rng: random.Random | None = None
) -> list[int]:
    """Return count random integers between 0 and maximum inclusive."""
    if count < 0:
        raise ValueError("count must be non-negative")
    if maximum < 0:
        raise ValueError("maximum must be non-negative")
    generator = rng if rng is not None else random.Random()
    return [generator.randrange(maximum + 1) for _ in range(count)]