# puzzlekit

A collection of well-known algorithm puzzles. Each one is a small Python
function over plain lists, strings and integers. Linked lists and binary
trees have their own lightweight node classes, and two booking calendars
are provided as small classes.

It is a library only: there is no command-line tool.

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

| Module | Contents |
| --- | --- |
| `puzzlekit.arrays` | `two_sum`, `remove_duplicates`, `plus_one`, `sort_colors`, `merge`, `rotate`, `move_zeroes`, `reverse_string`, `get_maximum_xor`, `rotate_the_box` |
| `puzzlekit.searching` | `search_range`, `search_insert`, `my_sqrt`, `search_rotated`, `find_min`, `binary_search`, `next_greatest_letter`, `peak_index_in_mountain_array`, `arrange_coins`, `is_sorted_and_rotated` |
| `puzzlekit.stacks` | `largest_rectangle_area`, `maximal_rectangle`, `max_width_ramp` |
| `puzzlekit.strings` | `longest_palindrome`, `is_palindrome_number`, `is_valid_parentheses`, `length_of_last_word`, `min_window`, `is_scramble`, `is_palindrome`, `shortest_palindrome`, `check_inclusion`, `longest_diverse_string`, `find_kth_bit`, `max_unique_split`, `remove_occurrences`, `is_circular_sentence`, `minimum_steps`, `maximum_length`, `compressed_string` |
| `puzzlekit.numbers` | `diff_ways_to_compute`, `lexical_order`, `find_kth_number`, `maximum_swap`, `count_max_or_subsets`, `sieve_of_eratosthenes`, `prime_sub_operation` |
| `puzzlekit.heaps` | `smallest_range`, `min_groups`, `max_k_elements`, `pick_gifts`, `find_score` |
| `puzzlekit.sequences` | `minimum_total_distance`, `minimum_mountain_removals`, `max_moves`, `longest_square_streak`, `maximum_beauty`, `minimum_subarray_length`, `is_array_special`, `can_arrange`, `divide_players`, `remove_subfolders` |
| `puzzlekit.linked` | `ListNode`, `build_list`, `to_list`, `add_two_numbers`, `delete_duplicates` |
| `puzzlekit.trees` | `TreeNode`, `build_tree`, `tree_values`, `kth_largest_level_sum`, `replace_value_in_tree`, `minimum_diameter_after_merge` |
| `puzzlekit.booking` | `SingleBookingCalendar`, `DoubleBookingCalendar` |

## Examples

```python
from puzzlekit.arrays import two_sum
from puzzlekit.strings import longest_palindrome, is_valid_parentheses
from puzzlekit.linked import build_list, to_list, add_two_numbers
from puzzlekit.trees import build_tree, kth_largest_level_sum
from puzzlekit.booking import SingleBookingCalendar

two_sum([2, 7, 11, 15], 9)           # (0, 1)
two_sum([1, 2], 10)                  # None
longest_palindrome("cbbd")           # "bb"
is_valid_parentheses("([]{})")       # True

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
to_list(total)                       # [7, 0, 8]

root = build_tree([5, 8, 9, 2, 1, 3, 7])
kth_largest_level_sum(root, 1)       # 17

calendar = SingleBookingCalendar()
calendar.book(10, 20)                # True
calendar.book(15, 25)                # False
```

Trees are built from and read back as level-order lists in which `None`
marks a missing child (`build_tree`, `tree_values`). Bookings are half-open
ranges `[start, end)`; `DoubleBookingCalendar` accepts a booking unless it
would make some time triple-booked.

## In-place functions

`remove_duplicates`, `sort_colors`, `merge`, `rotate`, `move_zeroes` and
`reverse_string` change the list you pass in (`remove_duplicates` also
returns the count of unique values kept at the front).
`replace_value_in_tree` changes the tree it is given and returns its root.
`plus_one` and `rotate_the_box` return new lists and leave their input alone.

## Errors

Where an input has no meaningful answer, functions raise `ValueError`: for
example `my_sqrt` of a negative number, `find_min` or
`next_greatest_letter` of an empty sequence, `find_kth_number` with `k`
outside `1..n`, `remove_occurrences` with an empty `part`, and
`minimum_total_distance` when the factories cannot repair every robot.