# algobox

Classic algorithms in plain Python with no third-party dependencies: integer
sequences, dynamic programming over arrays and strings, combinatorial
generators, board puzzles, and small matrix and tree helpers.

## Installation

```
pip install algobox
```

## Modules

| Module | Contents |
| --- | --- |
| `algobox.numeric` | `fib`, `tribonacci`, `three_consecutive_odds`, `rob`, `triangle_type` |
| `algobox.text` | `count_substrings`, `length_after_transformations`, `MODULUS` |
| `algobox.combinatorics` | `combination_sum`, `combination_sum_unique`, `permute`, `permute_unique`, `combine`, `subsets`, `subsets_with_dup` |
| `algobox.boards` | `solve_sudoku`, `solve_n_queens`, `total_n_queens` |
| `algobox.matrix` | `set_zeroes` |
| `algobox.trees` | `TreeNode`, `binary_tree_paths` |

## Examples

```python
from algobox.numeric import fib, rob, triangle_type
from algobox.combinatorics import combine, subsets_with_dup
from algobox.boards import total_n_queens
from algobox.text import count_substrings
from algobox.trees import TreeNode, binary_tree_paths

fib(10)                       # 55
rob([2, 7, 9, 3, 1])          # 12
triangle_type([3, 4, 5])      # "scalene"

combine(4, 2)                 # [[1, 2], [1, 3], [1, 4], [2, 3], [2, 4], [3, 4]]
subsets_with_dup([1, 2, 2])   # [[], [1], [1, 2], [1, 2, 2], [2], [2, 2]]

total_n_queens(8)             # 92
count_substrings("aaa")       # 6

tree = TreeNode(1, TreeNode(2, right=TreeNode(5)), TreeNode(3))
binary_tree_paths(tree)       # ["1->2->5", "1->3"]
```

## Notes on behaviour

- `fib` returns any `n` below 2 unchanged; `tribonacci` raises `ValueError`
  for a negative index.
- `three_consecutive_odds` counts only positive odd values toward a run.
- `rob` takes values so that no two neighbours are both taken, and returns
  the largest sum.
- `triangle_type` returns `"equilateral"`, `"isosceles"`, `"scalene"` or
  `"none"` when the sides cannot form a triangle; fewer than three sides
  raise `ValueError`.
- `length_after_transformations(s, t)` gives the length of `s` after `t`
  steps in which each letter becomes the next and `"z"` becomes `"ab"`,
  modulo `MODULUS` (1 000 000 007). Characters other than lower-case letters
  and a negative `t` raise `ValueError`.
- `combination_sum` lets each candidate be reused and requires positive
  candidates; `combination_sum_unique` uses each candidate at most once and
  returns no repeated combinations.
- `permute` lists orderings in swap order; `permute_unique` skips repeated
  orderings. `subsets` and `subsets_with_dup` work from the sorted values.
- `solve_sudoku` takes a 9×9 board of single-character strings with `"."`
  for empty cells and returns a solved copy; the input is left untouched.
  A board of the wrong shape or with no solution raises `ValueError`.
- `solve_n_queens(n)` returns each placement as `n` strings of `"."` and
  `"Q"`; `total_n_queens(n)` returns how many there are. Negative sizes
  raise `ValueError`.
- `set_zeroes` returns a copy of the matrix in which every row and column
  that held a zero is set to zero; the input is left untouched.

## What it does not do

algobox is a library only: it has no command-line tool, and it does not read
or write puzzles or data from files.

## Running the tests

```
pip install "algobox[test]"
pytest
```