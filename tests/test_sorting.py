import random
from dataclasses import dataclass, field

import pytest

from algobox.sorting import (
    bubble_sort,
    bucket_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    radix_sort_passes,
    selection_sort,
    shell_sort,
    sort_strings,
)

_rng = random.Random(1234)

GENERAL_DATA = [
    [],
    [1],
    [2, 1],
    [5, -3, 8, 0, -3, 12, 7],
    list(range(20)),
    list(range(20, 0, -1)),
    [4, 4, 4, 4],
    [_rng.randint(-1000, 1000) for _ in range(200)],
]
NON_NEGATIVE_DATA = [
    [],
    [0],
    [0, 0, 0],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [9, 1, 9, 1, 5],
    [_rng.randint(0, 5000) for _ in range(200)],
]


@pytest.mark.parametrize("data", GENERAL_DATA)
def test_general_sorts_match_sorted(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected


@pytest.mark.parametrize("data", NON_NEGATIVE_DATA)
def test_all_sorts_on_non_negative(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert radix_sort(data) == expected
    assert bucket_sort(data) == expected


def test_input_not_mutated():
    data = [3, 1, 2, 10, 0]
    original = list(data)
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert radix_sort(data) == expected
    assert bucket_sort(data) == expected
    assert data == original


def test_accepts_any_iterable():
    expected = [1, 2, 3]
    assert heap_sort(x for x in (3, 2, 1)) == expected
    assert merge_sort(x for x in (3, 2, 1)) == expected
    assert quick_sort(x for x in (3, 2, 1)) == expected
    assert selection_sort(x for x in (3, 2, 1)) == expected
    assert shell_sort(x for x in (3, 2, 1)) == expected
    assert bubble_sort(x for x in (3, 2, 1)) == expected
    assert insertion_sort(x for x in (3, 2, 1)) == expected


def test_quick_sort_large_sorted_input_does_not_recurse_too_deep():
    data = list(range(5000))
    assert quick_sort(data) == data


@dataclass(order=True)
class _Tagged:
    key: int
    tag: str = field(compare=False)


def test_merge_sort_is_stable():
    data = [_Tagged(2, "a"), _Tagged(1, "b"), _Tagged(2, "c"), _Tagged(1, "d")]
    result = merge_sort(data)
    assert [item.key for item in result] == sorted(item.key for item in data)
    ones = [item.tag for item in result if item.key == 1]
    twos = [item.tag for item in result if item.key == 2]
    assert ones == ["b", "d"]
    assert twos == ["a", "c"]


def test_radix_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_bucket_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        bucket_sort([3, -1, 2])


def test_radix_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        radix_sort([1.5, 2])


def test_bucket_sort_rejects_non_integers():
    with pytest.raises(TypeError):
        bucket_sort([1.5, 2])


def test_radix_passes_one_per_digit_of_maximum():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    passes = list(radix_sort_passes(data))
    assert len(passes) == len(str(max(data)))
    assert passes[-1] == sorted(data)
    assert all(sorted(p) == sorted(data) for p in passes)


def test_radix_first_pass_orders_by_last_digit():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    first = next(radix_sort_passes(data))
    assert [v % 10 for v in first] == sorted(v % 10 for v in data)


def test_radix_passes_empty_for_all_zero():
    assert list(radix_sort_passes([0, 0])) == []
    assert radix_sort([0, 0]) == [0, 0]


def test_sort_strings_uses_character_codes():
    names = ["delta", "Bob", "alice", "charlie"]
    result = sort_strings(names)
    assert result == sorted(names)
    assert result[0] == "Bob"


def test_sort_strings_prefix_first():
    assert sort_strings(["abc", "ab"]) == ["ab", "abc"]