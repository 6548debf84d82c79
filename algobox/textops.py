"""String exercises: palindromes, comparison, copying, vowels and swapping."""

from __future__ import annotations

_VOWELS = frozenset("aeiouAEIOU")


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def is_palindrome(text: str) -> bool:
    """Report whether text reads the same reversed (case-sensitive)."""
    return text == text[::-1]


def strings_equal(a: str, b: str) -> bool:
    """Compare two strings character by character up to any NUL terminator."""
    return _terminated(a) == _terminated(b)


def copy_string(text: str) -> str:
    """Copy text up to, but not including, the first NUL character."""
    return "".join(ch for ch in _terminated(text))


def is_vowel(ch: str) -> bool:
    """Report whether a single character is an English vowel.

    Raises ValueError when ch is not exactly one character.
    """
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch in _VOWELS


def swap_strings(first: str, second: str) -> tuple[str, str]:
    """Return the two strings exchanged."""
    return second, first