# algokit

A collection of classic algorithms written as plain Python functions and
classes, with no third-party dependencies. Every function takes its input as
arguments and returns its result; sorting functions return a new sorted list
and leave their input untouched.

## Modules

### `algokit.recursion`

- `rotated_search(items, target)`: index of `target` in a rotated ascending
  sequence, or -1.
- `binary_search_recursive(items, target)` and `linear_search(items, target)`:
  index or -1.
- `recursive_bubble_sort(items)`, `recursive_selection_sort(items)`: sorted copies.
- `star_triangle(rows)`: a descending triangle of `"* "` cells as a string.
- `permutations(text)`, `subsets(text)`: lists of strings.
- `remove_char(text, char)`, `remove_banana(text)`, `remove_ban_not_banana(text)`:
  character and substring removal.
- `reverse_number(n)`: the decimal digits of `n` reversed.
- `boggle_score(grid, word)`: 1000 points per cell where `word` starts
  rightwards or downwards.
- `has_subset_sum(numbers, target)`: whether some subset sums to `target`.
- `square_root(n)`: approximate square root by binary search and 0.001 steps.
- `hanoi(n, source="A", target="C", spare="B")`: an iterator of
  `(disk, from_peg, to_peg)` moves.

### `algokit.searching`

`binary_search`, `ceiling_index`, `order_agnostic_search`, `find_min` (minimum of
a rotated ascending sequence), `missing_number`, `find_duplicates`,
`first_missing_positive` (cyclic-sort lookups), and the matrix searches
`staircase_search`, `floor_row` and `sorted_matrix_search`. Matrix searches
return `(row, col)` or `(-1, -1)`.

### `algokit.sorting`

`bubble_sort`, `counting_sort`, `cycle_sort`, `heap_sort`, `merge_sort`,
`insertion_sort`, `quick_sort`, `radix_sort` (with its single step
`digit_pass(items, exponent)`), `selection_sort` and `wave_sort`, plus
`is_sorted(items)` and `step_paths(grid, goal)`, which lists every down/right
walk through a grid of visit counts. `counting_sort` and `radix_sort` raise
`ValueError` on negative values; `cycle_sort` needs values from `1..n`.

### `algokit.stacks`

- `is_balanced(expression)`: bracket matching for `()`, `[]` and `{}`.
- `infix_to_postfix(expression)`, `infix_to_prefix(expression)`: conversion of
  expressions with single-character operands; unmatched parentheses raise
  `InvalidExpressionError` (a `ValueError`).
- `sort_stack(items)`: a stack given bottom to top, sorted so the largest lies
  at the bottom.
- `equal_sum_pairs(numbers)`: pairs of value pairs with equal sums.
- `remove_pairs(text)`: cancels each character against an earlier equal one.

### `algokit.binary_tree`

`TreeNode`, `build_preorder(values)` (with `-1` marking a missing child),
`populate_complete(size)`, recursive and iterative `preorder`, `inorder` and
`postorder`, `all_traversals` (all three in one walk), `level_order` (values
grouped by depth), `count_nodes`, `sum_nodes`, `height` and `diameter` (both
counted in nodes).

### `algokit.linked_list`

`ListNode`, `LinkedList` (append and iteration), `from_iterable`, `to_list`,
`swap_pairs`, `rotate`, `delete_duplicates` and `add_numbers` (numbers stored
as digit lists, least significant digit first).

### `algokit.bst`

`BinarySearchTree` with `insert`, `delete`, `in`, `len()`, `minimum`, `maximum`,
`level_of`, `inorder`, `preorder`, `postorder`, `level_order`, `height`,
`diameter` (counted in edges), `total`, `count_right_nodes`, `count_leaves` and
`render` (a sideways drawing). Also `is_difference_tree`, `min_depth` and
`sibling_difference_sum` for plain `TreeNode` trees.

## Installation

```
pip install .
```

## Examples

```python
from algokit.searching import binary_search
from algokit.sorting import merge_sort
from algokit.stacks import infix_to_postfix, is_balanced
from algokit.recursion import hanoi
from algokit.bst import BinarySearchTree

binary_search([1, 2, 3, 4, 5, 6, 7, 8], 8)   # 7
merge_sort([5, 4, 1, 6, 2])                   # [1, 2, 4, 5, 6]
is_balanced("{[()]}")                          # True
infix_to_postfix("a+b*c")                      # "abc*+"
list(hanoi(2))                                 # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]

tree = BinarySearchTree([10, 20, 2, 5])
5 in tree                                      # True
tree.inorder()                                 # [2, 5, 10, 20]
```

## What it does not do

algokit is a library only: it has no command-line program, reads no input
and prints nothing. Call its functions from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```