"""Sudoku and N-queens solvers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

EMPTY = "."
QUEEN = "Q"
_DIGITS = "123456789"
_SIZE = 9


def _box(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def solve_sudoku(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a solved copy of a 9x9 board whose empty cells hold '.'."""
    grid = [list(row) for row in board]
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("board must be 9 rows of 9 cells")

    rows = [set(row) for row in grid]
    cols = [set(col) for col in zip(*grid)]
    boxes: list[set[str]] = [set() for _ in range(_SIZE)]
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            boxes[_box(r, c)].add(cell)
    empties = [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == EMPTY]

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        box = boxes[_box(r, c)]
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in box:
                continue
            grid[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            box.add(digit)
            if fill(position + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            box.discard(digit)
            grid[r][c] = EMPTY
        return False

    if not fill(0):
        raise ValueError("board has no solution")
    return grid


def _queen_columns(n: int) -> Iterator[tuple[int, ...]]:
    def place(columns: tuple[int, ...]) -> Iterator[tuple[int, ...]]:
        row = len(columns)
        if row == n:
            yield columns
            return
        for col in range(n):
            if all(col != c and abs(col - c) != row - r for r, c in enumerate(columns)):
                yield from place((*columns, col))

    return place(())


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"board size must not be negative: {n}")


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens as rows of '.' and 'Q'."""
    _check_size(n)
    return [
        [EMPTY * col + QUEEN + EMPTY * (n - col - 1) for col in columns]
        for columns in _queen_columns(n)
    ]


def total_n_queens(n: int) -> int:
    """Return how many placements of n non-attacking queens exist."""
    _check_size(n)
    return sum(1 for _ in _queen_columns(n))