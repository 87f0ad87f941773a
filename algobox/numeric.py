"""Integer sequences and small array puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; any n below 2 is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number (T0 = 0, T1 = T2 = 1)."""
    if n < 0:
        raise ValueError(f"index must not be negative: {n}")
    if n == 0:
        return 0
    if n in (1, 2):
        return 1
    first, second, third = 0, 1, 1
    for _ in range(n - 2):
        first, second, third = second, third, first + second + third
    return third


def three_consecutive_odds(arr: Iterable[int]) -> bool:
    """Tell whether three odd values appear one right after another."""
    run = 0
    for value in arr:
        # Only positive odd values count; a negative value breaks the run.
        if value > 0 and value % 2 == 1:
            run += 1
            if run == 3:
                return True
        else:
            run = 0
    return False


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values taken with no two neighbours taken."""
    if len(nums) == 1:
        return nums[0]
    best, best_before = 0, 0
    for value in nums:
        best, best_before = max(best_before + value, best), best
    return best


def triangle_type(nums: Sequence[int]) -> str:
    """Classify side lengths as 'equilateral', 'isosceles', 'scalene' or 'none'."""
    if len(nums) < 3:
        raise ValueError("at least three side lengths are required")
    shortest, middle, longest, *_ = sorted(nums)
    if shortest + middle <= longest:
        return "none"
    distinct = len(set(nums))
    if distinct == 1:
        return "equilateral"
    if distinct == 2:
        return "isosceles"
    return "scalene"