# leetsolve

Small, dependency-free solutions to well-known algorithm exercises, grouped
by theme. Every solution is a plain function; the only class is `ListNode`
for singly linked lists.

## Installation

```
pip install .
```

## Modules

- `leetsolve.linked_list`: `ListNode` (a dataclass with `val` and `next`,
  `ListNode.from_values(values)` to build a list, iteration over its values),
  `add_two_numbers`, `delete_duplicates`, `reverse_list`
- `leetsolve.grids`: `num_islands` (grid of `"1"`/`"0"` strings),
  `max_area_of_island` (grid of `1`/`0` integers). Neither changes the grid.
- `leetsolve.counting`: `single_number`, `is_prime`, `count_primes`,
  `missing_number`, `top_k_frequent`, `num_identical_pairs`
- `leetsolve.searching`: `two_sum`, `search_insert`, `intersection`
- `leetsolve.sequences`: `max_area`, `max_area_brute_force`, `trap`,
  `plus_one`, `max_profit`, `rob`, `move_zeroes`, `find_max_average`,
  `check_straight_line`, `kids_with_candies`, `running_sum`
- `leetsolve.text`: `length_of_longest_substring`, `longest_common_prefix`,
  `group_anagrams`, `length_of_last_word`, `is_anagram`, `is_subsequence`,
  `defang_ip_addr`, `balanced_string_split`, `reformat_date`
- `leetsolve.brackets`: `is_valid`, `backspace_string`, `backspace_compare`,
  `remove_duplicates`, `max_depth`

A few behaviours worth knowing:

- `two_sum` returns `[-1, -1]` when no pair adds up to the target.
- `top_k_frequent` pads with `-1` when `k` exceeds the number of distinct values.
- `single_number` returns `0` when no value occurs exactly once.
- `move_zeroes` rearranges the list it is given and returns `None`;
  `plus_one` returns a new list.
- `find_max_average` raises `ValueError` when `k` is not between 1 and the
  length of the input.
- `reformat_date` raises `ValueError` for an unknown month abbreviation.

## Examples

```python
from leetsolve.searching import two_sum
from leetsolve.linked_list import ListNode, add_two_numbers
from leetsolve.text import reformat_date

two_sum([2, 7, 11, 15], 9)            # [0, 1]
reformat_date("20th Oct 2052")        # "2052-10-20"

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
list(total)                           # [7, 0, 8]
```

## What it does not do

The package is a library only: it has no command-line tool and reads no
input on its own. Call the functions from Python.

## Running the tests

```
pip install ".[test]"
pytest
```