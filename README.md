# algokit

A compact collection of classic algorithms on strings, integers, integer
sequences and binary trees. It is written in plain Python and has no
runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.strings`

- `is_valid_parentheses(s)` checks whether the brackets `()[]{}` in `s`
  are balanced and correctly nested. Any other character makes the string
  invalid, as does an odd length.
- `add_binary(a, b)` adds two binary strings and returns the sum as a
  binary string. The result is at least as wide as the wider operand.
  A string holding anything but `0` and `1` raises `ValueError`.

```python
from algokit.strings import add_binary, is_valid_parentheses

is_valid_parentheses("([]{})")   # True
is_valid_parentheses("(]")       # False
add_binary("1010", "1011")       # "10101"
```

### `algokit.numbers`

- `is_palindrome(x)` tests whether an integer's decimal digits read the
  same backwards. Negative numbers are never palindromes.
- `climb_stairs(n)` counts the distinct ways to climb `n` steps taking one
  or two steps at a time. `n` below 1 raises `ValueError`.
- `hamming_weight(n)` counts the set bits of a non-negative integer;
  a negative `n` raises `ValueError`.
- `integer_sqrt(x)` returns the floor of the square root of `x`; a
  negative `x` raises `ValueError`.

### `algokit.arrays`

- `search_insert(nums, target)` returns the index of `target` in a sorted
  sequence, or the index where it would be inserted.
- `summary_ranges(nums)` collapses runs of consecutive integers into
  ranges, e.g. `[0, 1, 2, 4, 5, 7]` gives `["0->2", "4->5", "7"]`.
- `contains_duplicate(nums)` reports whether any value appears twice.
- `plus_one(digits)` adds one to a number given as decimal digits, most
  significant first, and returns a new list: `[9, 9]` gives `[1, 0, 0]`.

### `algokit.tree`

`TreeNode` is a binary tree node with `val`, `left` and `right`.
`TreeNode.inorder()` yields the values of its subtree in in-order sequence.

- `is_same_tree(p, q)` and `is_symmetric(root)` compare tree structure
  and values.
- `max_depth(root)` and `count_nodes(root)` measure a tree; both return 0
  for an empty tree (`None`).
- `sorted_array_to_bst(nums)` builds a height-balanced search tree from a
  sorted sequence, or returns `None` for an empty one.
- `has_path_sum(root, target_sum)` looks for a root-to-leaf path whose
  values add up to `target_sum`.
- `invert_tree(root)` mirrors a tree in place and returns its root.
- `minimum_difference(root)` returns the smallest difference between
  values that are next to each other in in-order sequence; a tree with
  fewer than two nodes raises `ValueError`.
- `average_of_levels(root)` returns the mean value of each level, top to
  bottom.

```python
from algokit.tree import average_of_levels, max_depth, sorted_array_to_bst

root = sorted_array_to_bst([-10, -3, 0, 5, 9])
list(root.inorder())     # [-10, -3, 0, 5, 9]
max_depth(root)          # 3
```

## What it does not do

algokit is a library only: it has no command-line tool, and it does not
read or write trees or sequences from files.