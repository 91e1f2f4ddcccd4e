# dsakit

A small library of classic algorithms on lists and matrices: sorting,
prefix and suffix sums, two-pointer techniques, matrix traversal and
rotation, binary search in its many forms, and binary search over an
answer range.

Every function takes ordinary Python sequences and returns new values;
the caller's input is never changed. It needs nothing beyond the
standard library.

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

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`: each returns a new
sorted list. `bubble_sort` stops early when its first pass makes no swap.

### `dsakit.arrays`

- `prefix_sums`, `suffix_sums`, `suffix_max`: running totals or maxima
  from the left or from the right.
- `can_split_equal_sum`: whether the sequence can be cut into two
  non-empty parts with equal sums.
- `max_subarray_sum` (Kadane's algorithm) and `max_subarray_sum_brute`:
  largest sum of a non-empty contiguous run.
- `max_forward_difference`: largest `values[j] - values[i]` with `j >= i`.
- `subarrays`: a generator of every contiguous sub-array, shortest first.

### `dsakit.two_pointers`

- `segregate_binary`: moves all zeros in front of the other values.
- `pair_with_sum`, `pair_with_difference`: a pair from a sorted sequence
  with the given sum or difference, or `None`.
- `three_sum`, `three_sum_binary`, `three_sum_brute`: a triple with the
  given sum, or `None` (the first two expect a sorted sequence).
- `trapped_water`, `trapped_water_peak`: rain water held between bars of
  the given heights.

### `dsakit.matrix`

Matrices are sequences of equal-length rows; ragged input raises
`ValueError`, as do non-square matrices where a square one is needed.

- `flat_index`, `row_col_index`: convert between `(row, column)` and a
  row-major position.
- `contains`, `add`, `row_with_max_sum`, `diagonal_sums`, `reverse_rows`,
  `zeros`.
- `wave_order`, `spiral_order`: traversal orders.
- `transpose`, `rotate_clockwise`, `rotate_anticlockwise`, `rotate_180`,
  `rotate_k` (k quarter turns clockwise; negative k turns anticlockwise).

### `dsakit.searching`

Searches for a position return it, or `None` when nothing matches.

- `binary_search`, `first_occurrence`, `last_occurrence`,
  `count_occurrences`, `search_insert_position` on ascending sequences.
- `kth_missing`: the k-th positive integer missing from a strictly
  increasing sequence.
- `peak_index`: peak of a mountain sequence.
- `rotated_minimum`, `search_rotated`: on rotated ascending sequences.
- `search_matrix_rows`, `search_matrix_flat`: `(row, column)` of a target
  in a sorted matrix; `search_sorted_matrix`: whether a target is in a
  matrix whose rows and columns are all ascending.

### `dsakit.partition`

- `aggressive_cows`: largest minimum distance between cows in stalls.
- `book_allocation`, `painter_partition`: smallest possible largest load
  when items go in order to a number of workers.
- `min_eating_speed`: slowest speed that finishes every pile in time.

Impossible requests (for example more students than books, or fewer
hours than piles) raise `ValueError`.

## Example

```python
from dsakit.arrays import max_subarray_sum
from dsakit.matrix import spiral_order
from dsakit.partition import book_allocation
from dsakit.sorting import bubble_sort

bubble_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]
book_allocation([20, 50, 14, 90], 2)   # 90
```

## What it does not do

dsakit is a library only. It has no command-line program and does not
read input interactively or print results; call the functions from your
own code.