"""Floyd's and Pascal's triangles, as rows and as printed text."""

from __future__ import annotations

from itertools import count, islice


def floyd_triangle(rows: int) -> list[list[int]]:
    """Rows of consecutive integers from 1, row i holding i numbers."""
    numbers = count(1)
    return [list(islice(numbers, length)) for length in range(1, rows + 1)]


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for _ in range(rows):
        if not triangle:
            triangle.append([1])
            continue
        previous = triangle[-1]
        inner = [left + right for left, right in zip(previous, previous[1:])]
        triangle.append([1, *inner, 1])
    return triangle


def format_floyd(rows: int) -> str:
    """Floyd's triangle as text, each number followed by a space."""
    return "".join(
        "".join(f"{n} " for n in row) + "\n" for row in floyd_triangle(rows)
    )


def format_pascal(rows: int) -> str:
    """Pascal's triangle as text, indented to centre each row."""
    return "".join(
        " " * (rows - i - 1) + "".join(f"{n} " for n in row) + "\n"
        for i, row in enumerate(pascal_triangle(rows))
    )