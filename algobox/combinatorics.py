"""Combinations, permutations and subsets by backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, each usable any number of times, summing to target."""
    pool = list(candidates)
    if any(value <= 0 for value in pool):
        raise ValueError("candidates must be positive")

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        if remaining < 0:
            return
        for index, value in enumerate(pool[start:], start):
            yield from search(index, remaining - value, [*chosen, value])

    return list(search(0, target, []))


def combination_sum_unique(candidates: Iterable[int], target: int) -> list[list[int]]:
    """Return the distinct combinations, each candidate used at most once, summing to target."""
    pool = sorted(candidates)

    def search(start: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        if remaining == 0:
            yield chosen
            return
        if remaining < 0:
            return
        for index, value in enumerate(pool[start:], start):
            if index > start and value == pool[index - 1]:
                continue
            yield from search(index + 1, remaining - value, [*chosen, value])

    return list(search(0, target, []))


def _swap_permutations(items: list[int], start: int, distinct: bool) -> Iterator[list[int]]:
    if start == len(items):
        yield list(items)
        return
    seen: set[int] = set()
    for index in range(start, len(items)):
        if distinct:
            if items[index] in seen:
                continue
            seen.add(items[index])
        items[start], items[index] = items[index], items[start]
        yield from _swap_permutations(items, start + 1, distinct)
        items[start], items[index] = items[index], items[start]


def permute(nums: Iterable[int]) -> list[list[int]]:
    """Return every ordering of nums, produced by successive swaps."""
    return list(_swap_permutations(list(nums), 0, distinct=False))


def permute_unique(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct ordering of nums."""
    return list(_swap_permutations(sorted(nums), 0, distinct=True))


def combine(n: int, k: int) -> list[list[int]]:
    """Return every k-element combination of 1..n in lexicographic order."""
    if k < 0:
        return []
    return [list(choice) for choice in combinations(range(1, n + 1), k)]


def _subsets(items: list[int], skip_duplicates: bool) -> Iterator[list[int]]:
    def walk(start: int, chosen: list[int]) -> Iterator[list[int]]:
        yield chosen
        for index, value in enumerate(items[start:], start):
            if skip_duplicates and index > start and value == items[index - 1]:
                continue
            yield from walk(index + 1, [*chosen, value])

    return walk(0, [])


def subsets(nums: Iterable[int]) -> list[list[int]]:
    """Return every subset of nums, built from the sorted values."""
    return list(_subsets(sorted(nums), skip_duplicates=False))


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset of nums, which may hold repeated values."""
    return list(_subsets(sorted(nums), skip_duplicates=True))