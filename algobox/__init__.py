"""Classic dynamic-programming and backtracking algorithms: sequences, strings, combinatorics, boards, matrices and trees."""

__version__ = "0.1.0"