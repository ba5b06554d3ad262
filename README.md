# algopatterns

Classic algorithm patterns written as small, plain Python functions: list
exercises, breadth-first search, fast and slow pointers on linked lists,
interval insertion and merging, sliding windows, simple sorts and searches,
subsets and permutations, and a few recursive classics. A separate module
holds producer/consumer demonstrations built on threads and blocking queues.

The package has no dependencies beyond the standard library.

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

- `algopatterns.datastructures`: `remove_even`, `merge_sorted`, `two_sum`
  (raises `ValueError` when no pair exists), `two_sum_or_empty`,
  `products_except_self`, `find_minimum`, `find_second_maximum`,
  `rotate_right`, `rotate_left`, `rearrange_array`, `rearrange_array_strict`,
  `arrange_max_min`, `max_sum_sublist` and `max_sum_sublist_from_zero`.
- `algopatterns.bfs`: the `TreeNode` dataclass and `level_order_traversal`.
- `algopatterns.cycles`: the `ListNode` dataclass (nodes compare by
  identity), `has_cycle`, `cycle_length` and `find_cycle_start` (which
  returns the value of the node where the cycle begins, or 0).
- `algopatterns.intervals`: `insert_interval` and `merge_intervals`.
- `algopatterns.sliding_window`: `average_of_subarrays`,
  `max_fruits_in_baskets`, `longest_distinct_substring`,
  `longest_substring_with_k_distinct`, `max_subarray_of_size_k`,
  `max_subarray_with_max_k` and `smallest_subarray_with_sum`.
- `algopatterns.sorting`: `insertion_sort` and `selection_sort` (both return
  a sorted copy), `find_two_numbers_adding_to`, `find_pivot_index`,
  `binary_search` and `group_anagrams`.
- `algopatterns.subsets`: `find_subsets`, `find_subsets_without_duplicates`
  and `generate_permutations`.
- `algopatterns.recursion`: `factorial`, `is_palindrome` and `power`.
- `algopatterns.two_pointers`: `remove_duplicates`, which compacts a sorted
  list in place and returns the length of its duplicate-free prefix.
- `algopatterns.concurrency`: `numbers`, `fan_in`, `fibonacci`, the `Money`
  dataclass, `racing`, `dynamite`, `range_close_money`, `sequence_food`,
  and the demos `buffered_demo`, `fan_in_demo`, `fibonacci_demo`,
  `fruits_demo` and `generator_demo`. Each demo prints what it receives and
  returns it.

## Examples

```python
from algopatterns.datastructures import max_sum_sublist
from algopatterns.sliding_window import average_of_subarrays
from algopatterns.subsets import find_subsets
from algopatterns.intervals import insert_interval

max_sum_sublist([-2, 10, 7, -5, 15, 6])          # ([10, 7, -5, 15, 6], 33)
average_of_subarrays([1, 3, 2, 6, -1, 4, 1, 8, 2], 5)
# [2.2, 2.8, 2.4, 3.6, 2.8]
find_subsets([1, 2, 3])
# [[], [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]
insert_interval([[1, 3], [5, 7], [8, 12]], [4, 6])
# [[1, 3], [4, 7], [8, 12]]
```

```python
from algopatterns.concurrency import fan_in, fibonacci, numbers

list(fibonacci(5))                     # [0, 1, 1, 2, 3]
sorted(fan_in(numbers(3), numbers(3)))  # [0, 0, 1, 1, 2, 2]
```

## Commands

`algopatterns` prints the maximum-sum sublist of the integers given on the
command line, computed by `max_sum_sublist` and by
`max_sum_sublist_from_zero`, one result per line. With no integers it uses
`-2 10 7 -5 15 6`:

```
algopatterns
algopatterns 1 -2 3 4
```

`algopatterns-concurrency` runs one demonstration. The choices are
`buffered`, `dynamite` (the default), `fan-in`, `fibonacci`, `fruits`,
`generator`, `money`, `racing` and `sequence`:

```
algopatterns-concurrency
algopatterns-concurrency fibonacci --count 10
algopatterns-concurrency racing --racers 3
algopatterns-concurrency dynamite --limit 100 --timeout 0.001
```

## Notes on behaviour

Some functions keep deliberate quirks of the scans they implement:

- `max_sum_sublist` starts its running sum at the first element and then
  visits that element again, so a positive first element is counted twice.
- `max_sum_sublist_from_zero` starts its best sum at zero and returns the
  sublist running at the end of the scan.
- `find_second_maximum` returns the maximum when the list starts with it.
- `insert_interval` merges the new interval into one existing interval only.
- `find_subsets_without_duplicates` skips only the first two earlier subsets
  when a value repeats.