"""Small arithmetic exercises: complex sums, bitwise tricks, swaps, roots."""

from __future__ import annotations

import math
from dataclasses import dataclass


def add_complex(a: complex, b: complex) -> complex:
    """Add two complex numbers part by part."""
    a, b = complex(a), complex(b)
    return complex(a.real + b.real, a.imag + b.imag)


def format_complex(value: complex) -> str:
    """Render an integral complex number as 'a + bi' or 'a -bi'."""
    value = complex(value)
    real, imag = int(value.real), int(value.imag)
    if imag >= 0:
        return f"{real} + {imag}i"
    return f"{real} {imag}i"


def add_without_plus(a: int, b: int) -> int:
    """Add two integers using a bitwise complement instead of '+'."""
    return a - ~b - 1


def subtract_without_minus(a: int, b: int) -> int:
    """Subtract b from a using two's-complement negation."""
    return a + ~b + 1


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Return (b, a), exchanged by three XOR operations."""
    a ^= b
    b ^= a
    a ^= b
    return a, b


def arithmetic_swap(a: int, b: int) -> tuple[int, int]:
    """Return (b, a), exchanged by addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from degrees Celsius to Fahrenheit."""
    return 1.8 * celsius + 32


@dataclass(frozen=True)
class QuadraticRoots:
    """The two roots of a quadratic and whether they are equal, distinct or imaginary."""

    kind: str
    first: complex | float
    second: complex | float


def quadratic_roots(a: float, b: float, c: float) -> QuadraticRoots:
    """Solve a*x**2 + b*x + c = 0.

    Raises ValueError when any coefficient is zero.
    """
    if a == 0 or b == 0 or c == 0:
        raise ValueError("only non-zero coefficients are accepted")
    discriminant = b * b - 4 * a * c
    if discriminant == 0:
        root = -b / (2 * a)
        return QuadraticRoots("equal", root, root)
    spread = math.sqrt(abs(discriminant)) / (2 * a)
    centre = -b / (2 * a)
    if discriminant > 0:
        return QuadraticRoots("distinct", centre + spread, centre - spread)
    return QuadraticRoots(
        "imaginary", complex(centre, spread), complex(centre, -spread)
    )