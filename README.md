# algopatterns

Classic algorithm patterns written as plain Python functions and a few small
classes, grouped by technique. The package has no dependencies beyond the
standard library.

| Module | Contents |
| --- | --- |
| `algopatterns.arrays` | `max_profit`, `max_profit_multiple`, `increasing_triplet`, `majority_element`, `move_zeroes`, `zero_filled_subarray`, `product_except_self`, `remove_duplicates`, `rotate`, `max_sub_array`, `max_subarray_sum_circular` |
| `algopatterns.two_pointers` | `three_sum`, `max_area`, `merge`, `two_sum_sorted` |
| `algopatterns.sliding_window` | `length_of_longest_substring`, `longest_ones`, `min_sub_array_len`, `find_max_average` |
| `algopatterns.dynamic_programming` | `climb_stairs`, `min_cost_climbing_stairs`, `min_path_sum`, `unique_paths_with_obstacles`, `min_distance`, `longest_common_subsequence`, `longest_palindrome_subseq` |
| `algopatterns.integers` | `count_bits`, `hamming_weight`, `reverse_bits`, `single_number`, `is_happy` |
| `algopatterns.hashing` | `HashMap` (`put`, `get`, `remove`), `contains_nearby_duplicate`, `is_isomorphic`, `max_number_of_balloons`, `num_identical_pairs`, `can_construct` |
| `algopatterns.stacks` | `MinStack` (`push`, `pop`, `top`, `get_min`), `StockSpanner` (`next`), `calculate`, `remove_adjacent_duplicates`, `remove_stars`, `is_valid`, `find132pattern`, `daily_temperatures`, `next_greater_element` |
| `algopatterns.queues` | `RecentCounter` (`ping`), `time_required_to_buy` |
| `algopatterns.prefix_sums` | `NumArray` (`sum_range`), `subarray_sum`, `subarrays_div_by_k` |
| `algopatterns.strings` | `is_subsequence`, `longest_common_prefix`, `reverse_words`, `is_palindrome`, `convert`, `frequency_sort` |
| `algopatterns.linked_lists` | `ListNode`, `from_values`, `to_values`, `middle_node`, `get_intersection_node`, `delete_duplicates`, `remove_nth_from_end`, `swap_pairs`, `reverse_list`, `is_palindrome_list` |
| `algopatterns.grids` | `rotate_image`, `set_zeroes`, `spiral_order`, `oranges_rotting`, `num_islands` |
| `algopatterns.trees` | `TreeNode`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `level_order`, `zigzag_level_order`, `right_side_view`, `width_of_binary_tree`, `binary_tree_paths`, `is_same_tree`, `is_symmetric`, `diameter_of_binary_tree`, `invert_tree` |

## Examples

```python
from algopatterns.arrays import max_sub_array
from algopatterns.dynamic_programming import climb_stairs, min_distance
from algopatterns.linked_lists import from_values, reverse_list, to_values
from algopatterns.stacks import MinStack, calculate
from algopatterns.trees import TreeNode, level_order

max_sub_array([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
climb_stairs(5)                                   # 8
min_distance("horse", "ros")                      # 3
calculate("3+2*2")                                # 7

to_values(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()                                   # -3

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
level_order(root)                                 # [[3], [9, 20], [15, 7]]
```

## Behaviour worth knowing

- `move_zeroes`, `remove_duplicates`, `rotate`, `merge`, `rotate_image`,
  `set_zeroes`, `reverse_list`, `swap_pairs` and `invert_tree` change what they
  are given.
- Functions that need at least one element, such as `max_profit`,
  `majority_element` and `max_sub_array`, raise `ValueError` on an empty
  sequence.
- `calculate` handles non-negative integers with `+ - * /`, truncates division
  toward zero, raises `ValueError` on a malformed expression and
  `ZeroDivisionError` on division by zero.
- `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack;
  `HashMap.get` returns `-1` for a missing key.
- `hamming_weight` and `reverse_bits` treat their argument as a 32-bit word and
  raise `ValueError` for values that do not fit.
- `two_sum_sorted` returns 1-based positions, or `(-1, -1)` when no pair exists.

## What it does not do

This is a library only: it has no command-line program and reads no input from
files or the terminal. Call the functions from your own code.

## Tests

The test suite lives in `tests/` and runs with pytest, which the `test` extra
installs.