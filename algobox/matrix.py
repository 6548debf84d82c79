"""Matrix multiplication, transposition, determinants and inverses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

Matrix = list[list[Any]]


def _rows(m: Sequence[Sequence[Any]]) -> Matrix:
    rows = [list(row) for row in m]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return rows


def _square(m: Sequence[Sequence[Any]]) -> Matrix:
    rows = _rows(m)
    if len(rows) != len(rows[0]):
        raise ValueError("matrix must be square")
    return rows


def _minor(rows: Matrix, skip_row: int, skip_col: int) -> Matrix:
    return [
        [value for j, value in enumerate(row) if j != skip_col]
        for i, row in enumerate(rows)
        if i != skip_row
    ]


def _det(rows: Matrix) -> Any:
    if not rows:
        return 1
    if len(rows) == 1:
        return rows[0][0]
    return sum(
        (-1) ** c * value * _det(_minor(rows, 0, c))
        for c, value in enumerate(rows[0])
    )


def multiply(a: Sequence[Sequence[Any]], b: Sequence[Sequence[Any]]) -> Matrix:
    """Return the matrix product a × b.

    Raises ValueError when the column count of a differs from the row count of b.
    """
    left, right = _rows(a), _rows(b)
    if len(left[0]) != len(right):
        raise ValueError("matrix multiplication cannot be done")
    columns = list(zip(*right))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in left
    ]


def transpose(m: Sequence[Sequence[Any]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    return [list(column) for column in zip(*_rows(m))]


def determinant(m: Sequence[Sequence[Any]]) -> Any:
    """Determinant by cofactor expansion along the first row."""
    return _det(_square(m))


def cofactor_matrix(m: Sequence[Sequence[Any]]) -> Matrix:
    """Matrix of signed cofactors of a square matrix."""
    rows = _square(m)
    size = len(rows)
    return [
        [(-1) ** (i + j) * _det(_minor(rows, i, j)) for j in range(size)]
        for i in range(size)
    ]


def inverse(m: Sequence[Sequence[Any]]) -> Matrix:
    """Inverse of a square matrix via the adjugate.

    Raises ValueError when the matrix is singular.
    """
    rows = _square(m)
    det = _det(rows)
    if det == 0:
        raise ValueError("matrix is not invertible")
    adjugate = transpose(cofactor_matrix(rows))
    return [[value / det for value in row] for row in adjugate]