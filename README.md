# algobox

A collection of small, classic algorithms written as plain Python functions.
Everything works on ordinary lists, integers and strings, and no third-party
libraries are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `radix_sort_passes`, `selection_sort`, `shell_sort`, `bubble_sort`, `bucket_sort`, `insertion_sort`, `sort_strings` |
| `algobox.searching` | `linear_search`, `binary_search`, `recursive_binary_search`, `interpolation_search` |
| `algobox.arrays` | `largest`, `count_frequencies` |
| `algobox.numtheory` | `gcd`, `lcm`, `is_prime`, `is_perfect`, `is_armstrong`, `is_strong`, `reverse_number`, `count_digits`, `digit_sum`, `factorial`, `power`, `fibonacci_series`, `is_even`, `is_leap_year`, `combinations`, `permutations` |
| `algobox.arithmetic` | `add_complex`, `format_complex`, `add_without_plus`, `subtract_without_minus`, `xor_swap`, `arithmetic_swap`, `celsius_to_fahrenheit`, `quadratic_roots`, `QuadraticRoots` |
| `algobox.triangles` | `floyd_triangle`, `pascal_triangle`, `format_floyd`, `format_pascal` |
| `algobox.conversions` | `binary_to_decimal`, `to_octal`, `to_hexadecimal` |
| `algobox.randomgen` | `random_numbers` |
| `algobox.matrix` | `multiply`, `transpose`, `determinant`, `cofactor_matrix`, `inverse` |
| `algobox.textops` | `is_palindrome`, `strings_equal`, `copy_string`, `is_vowel`, `swap_strings` |
| `algobox.graph` | `topological_sort`, `CycleError` |
| `algobox.files` | `write_stream`, `read_file`, `copy_file`, `main` |

## Notes on behaviour

- The sorting functions accept any iterable and return a new ascending list,
  leaving their input alone. `radix_sort`, `radix_sort_passes` and
  `bucket_sort` accept only non-negative integers and raise `TypeError` or
  `ValueError` otherwise. `radix_sort_passes` yields the list after each
  decimal-digit pass.
- `linear_search`, `binary_search` and `interpolation_search` return an index
  or `None`; `binary_search` raises `ValueError` for unsorted input.
  `recursive_binary_search` returns `True` or `False`.
- `quadratic_roots` returns a `QuadraticRoots` with `kind` set to `"equal"`,
  `"distinct"` or `"imaginary"`, and raises `ValueError` when any coefficient
  is zero.
- `inverse` raises `ValueError` for a singular matrix; `multiply` raises it
  when the shapes do not match.
- `topological_sort` numbers vertices from 1, breaks ties by the lower vertex
  number, and raises `CycleError` (a `ValueError`) for a cyclic graph.
- `random_numbers` takes an optional `random.Random` for reproducible output.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.searching import binary_search
from algobox.numtheory import gcd, lcm, is_leap_year
from algobox.matrix import determinant
from algobox.graph import topological_sort

merge_sort([5, 2, 9, 1])                 # [1, 2, 5, 9]
binary_search([1, 3, 5, 7], 5)           # 2
gcd(12, 18), lcm(12, 18)                 # (6, 36)
is_leap_year(2000)                       # True
determinant([[1, 2], [3, 4]])            # -2
topological_sort(3, [(1, 2), (2, 3)])    # [1, 2, 3]
```

## Command line

The package installs one command, which copies a file byte for byte:

```
algobox-copy SOURCE TARGET
```

It expects exactly two arguments. When the argument count is wrong, or either
file cannot be opened, it prints a message to standard error and exits with
status 1.

## What it does not do

The functions take their input as arguments; there are no interactive
prompts. `algobox-copy` is the only command; everything else is used from
Python.