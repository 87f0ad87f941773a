"""String counting puzzles."""

from __future__ import annotations

from string import ascii_lowercase

MODULUS = 1_000_000_007

_LETTER_INDEX = {letter: index for index, letter in enumerate(ascii_lowercase)}


def count_substrings(s: str) -> int:
    """Count the palindromic substrings of s, by position."""
    size = len(s)
    count = 0
    for center in range(2 * size - 1):
        left = center // 2
        right = left + center % 2
        while left >= 0 and right < size and s[left] == s[right]:
            count += 1
            left -= 1
            right += 1
    return count


def length_after_transformations(s: str, t: int) -> int:
    """Return the length of s after t steps, modulo 1_000_000_007.

    In each step every letter becomes the next one, and 'z' becomes "ab".
    """
    if t < 0:
        raise ValueError(f"number of transformations must not be negative: {t}")
    counts = [0] * len(ascii_lowercase)
    for char in s:
        try:
            counts[_LETTER_INDEX[char]] += 1
        except KeyError:
            raise ValueError(f"not a lower-case letter: {char!r}") from None
    for _ in range(t):
        wrapped = counts[-1]
        counts = [wrapped % MODULUS, (counts[0] + wrapped) % MODULUS, *counts[1:-1]]
    return sum(counts) % MODULUS