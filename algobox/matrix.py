"""Matrix transformations."""

from __future__ import annotations

from collections.abc import Sequence


def set_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of matrix with every row and column holding a zero set to zero."""
    zero_rows = {r for r, row in enumerate(matrix) if any(value == 0 for value in row)}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    return [
        [0 if r in zero_rows or c in zero_cols else value for c, value in enumerate(row)]
        for r, row in enumerate(matrix)
    ]