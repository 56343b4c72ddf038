# algorecipes

A collection of small, self-contained algorithm exercises: linked lists,
binary trees, array and string problems, and two simple data structures.
Every exercise is a plain function (or a small class) that takes ordinary
Python values and returns ordinary Python values. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `algorecipes.linkedlist`

`ListNode(val, next)` is a singly linked list node; iterating over a node
yields its value and those of the nodes after it. `from_values(values)` builds
a list (an empty input gives `None`) and `to_values(head)` turns one back into
a Python list.

- `reverse_list(head)` reverses the list in place and returns the new head.
- `is_palindrome(head)` compares the values forwards and backwards; the list
  is left as it was found.
- `remove_nth_from_end(head, n)` unlinks the n-th node from the end; raises
  `ValueError` when `n` is not between 1 and the list's length.
- `add_two_numbers(l1, l2)` adds two numbers stored as digits, least
  significant first.
- `delete_duplicates(head)` removes, from a sorted list, every value that
  occurs more than once.
- `remove_elements(head, val)` unlinks every node holding `val`.
- `rotate_right(head, k)` rotates the list right by `k` places.
- `swap_pairs(head)` swaps each pair of adjacent nodes.
- `has_cycle(head)` tells whether following `next` ever revisits a node.

### `algorecipes.tree`

`TreeNode(val, left, right)` is a binary tree node.
`from_level_order(values)` builds a tree from a level-order listing with
`None` for missing children (raising `ValueError` when a value has no parent
to attach to), and `to_level_order(root)` produces such a listing without
trailing `None`s.

- Traversals: `inorder`, `preorder`, `postorder`, each returning a list.
- `sorted_array_to_bst(nums)` builds a height-balanced search tree, taking the
  lower middle element of each slice as its root.
- `count_nodes(root)`, `max_depth(root)`.
- `is_same_tree(p, q)`, `is_symmetric(root)`, `is_subtree(root, sub_root)`.
- `invert_tree(root)` mirrors the tree in place.
- `merge_trees(root1, root2)` overlays two trees, summing values where both
  have a node.

### `algorecipes.treequeries`

- `diameter(root)`: edges on the longest path between any two nodes.
- `find_tilt(root)`: sum over all nodes of the absolute difference between the
  sums of their left and right subtrees.
- `minimum_difference(root)`: smallest difference between in-order neighbours
  of a search tree; `ValueError` with fewer than two nodes.
- `is_cousins(root, x, y)`: same depth, different parents.
- `second_minimum_value(root)`: second smallest distinct value of a tree where
  each node holds the smaller of its children's values, or `None`.
- `sum_root_to_leaf(root)`: sum of the binary numbers spelt by 0/1 values
  along each root-to-leaf path.

### `algorecipes.structures`

- `QueueStack`: a last-in, first-out stack kept in a single queue, with
  `push(x)`, `pop()`, `top()`, `empty()` and `len()`. `pop` and `top` raise
  `IndexError` on an empty stack.
- `NumArray(nums)`: answers `sum_range(left, right)` (inclusive) from prefix
  sums; raises `IndexError` for a range outside the list.

### `algorecipes.searching`

`contains_duplicate`, `contains_nearby_duplicate(nums, k)`,
`count_k_difference(nums, k)`, `find_disappeared_numbers(nums)` (raises
`ValueError` for values outside `1..len(nums)`), `get_common(nums1, nums2)`
(smallest common value or `-1`), `intersection(nums1, nums2)` (distinct common
values, ascending) and `intersect(nums1, nums2)` (multiset intersection in the
order of `nums2`).

### `algorecipes.arrays`

`majority_element` (voting pass; `ValueError` on empty input), `max_profit`,
`maximum_count`, `maximum_strong_pair_xor`, `merge_sorted(nums1, m, nums2, n)`
(in place), `missing_number`, `move_zeroes` (in place) and `third_max`
(`ValueError` on empty input).

### `algorecipes.strings`

`are_occurrences_equal`, `convert_to_title(column_number)`,
`title_to_number(title)`, `get_lucky(s, k)`, `is_isomorphic(s, t)`,
`is_palindrome(s)` (ASCII letters and digits only, case ignored) and
`is_anagram(s, t)`. The conversions raise `ValueError` on letters outside
their alphabet or numbers below 1.

### `algorecipes.mathutils`

`climb_stairs(n)`, `hamming_weight(n)` (set bits of `n` as a 32-bit unsigned
value), `is_perfect_square(num)`, `my_sqrt(x)` (integer square root, rounded
down), `generate_pascal(num_rows)` and `pascal_row(row_index)`.

## Example

```python
from algorecipes.linkedlist import from_values, to_values, add_two_numbers
from algorecipes.tree import from_level_order, max_depth
from algorecipes.mathutils import generate_pascal

total = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
print(to_values(total))            # [7, 0, 8]

root = from_level_order([3, 9, 20, None, None, 15, 7])
print(max_depth(root))             # 3

print(generate_pascal(4))          # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

## What it does not do

This is a library only: it installs no command, reads no input and prints
nothing. Call its functions from your own code or an interactive session.