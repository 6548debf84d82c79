"""Number-theory helpers: divisibility, digit properties and counting."""

from __future__ import annotations


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm.

    Raises ValueError when both arguments are zero.
    """
    a, b = abs(a), abs(b)
    if a == 0 and b == 0:
        raise ValueError("gcd(0, 0) is undefined")
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def is_prime(n: int) -> bool:
    """Report whether n is a prime number."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def is_perfect(n: int) -> bool:
    """Report whether n equals the sum of its proper divisors."""
    if n <= 0:
        return False
    return sum(d for d in range(1, n) if n % d == 0) == n


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Report whether n equals the sum of the cubes of its digits."""
    if n < 0:
        return False
    return sum(d**3 for d in _digits(n)) == n


def _digit_factorial(d: int) -> int:
    result = 1
    for k in range(2, d + 1):
        result *= k
    return result


def is_strong(n: int) -> bool:
    """Report whether n equals the sum of the factorials of its digits."""
    if n <= 0:
        return False
    return sum(_digit_factorial(d) for d in _digits(n)) == n


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of n, keeping its sign."""
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    reversed_value = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        reversed_value = reversed_value * 10 + digit
    return sign * reversed_value


def count_digits(n: int) -> int:
    """Number of decimal digits in n, ignoring its sign."""
    return len(_digits(n))


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of n, ignoring its sign."""
    return sum(_digits(n))


def factorial(n: int) -> int:
    """Return n!; raises ValueError for negative n."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return 1 if n <= 1 else n * factorial(n - 1)


def power(base: int, exponent: int) -> int:
    """Raise base to a non-negative integer exponent by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fibonacci_series(n: int) -> list[int]:
    """Return 0, 1 followed by the next n Fibonacci numbers."""
    if n < 0:
        raise ValueError("n must be non-negative")
    series = [0, 1]
    for _ in range(n):
        series.append(series[-2] + series[-1])
    return series


def is_even(n: int) -> bool:
    """Report whether n is divisible by two."""
    return n % 2 == 0


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def _check_choice(n: int, r: int) -> None:
    if r < 0 or n < 0:
        raise ValueError("n and r must be non-negative")
    if n < r:
        raise ValueError("n must be at least r")


def combinations(n: int, r: int) -> int:
    """Number of ways to choose r of n items, order ignored."""
    _check_choice(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def permutations(n: int, r: int) -> int:
    """Number of ordered arrangements of r of n items."""
    _check_choice(n, r)
    return factorial(n) // factorial(n - r)