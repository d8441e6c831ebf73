# dsakit

A small collection of classic algorithm and data-structure exercises written as
plain Python functions. It needs nothing beyond the standard library.

The functions return new values rather than changing their arguments, and report
"not found" with `None` and bad input with `ValueError`.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is inside

- `dsakit.sorting`: `bubble_sort` (stops after a pass with no swap),
  `insertion_sort` (ascending, or descending with `descending=True`),
  `selection_sort`, `sort_pairs` (by first value, then second) and
  `sort_pairs_by_second` (by second value, then first).
- `dsakit.searching`: `binary_search` and `linear_search` (both give a 1-based
  position or `None`), `contains`, `search_rotated` (0-based index in a rotated
  sorted sequence, or `None`), `peak_index_in_mountain`, `single_non_duplicate`.
- `dsakit.strings`: `is_palindrome` (ignores case and non-alphanumerics),
  `remove_occurrences`, `check_inclusion` (is a permutation of the pattern a
  substring of the text), `reverse_chars`, `reverse_string`.
- `dsakit.arrays`: `two_sum`, `max_area`, `max_profit`, `single_number`,
  `product_except_self`, `next_permutation` (the last permutation wraps to the
  first), `next_string_permutation`, `max_subarray_sum` (Kadane's algorithm),
  `max_subarray_sum_brute_force`, `sort_colors` (Dutch national flag),
  `merge_sorted`.
- `dsakit.majority`: `majority_element` (Moore's voting),
  `majority_element_brute_force`, `majority_element_sorted`, `pair_sum`,
  `pair_sum_two_pointer`.
- `dsakit.array_basics`: `intersection`, `difference`, `sum_and_product`,
  `swap_min_max`, `min_max_positions` (1-based positions), `doubled`,
  `reversed_values`.
- `dsakit.allocation`: binary search on the answer with `aggressive_cows`,
  `allocate_books`, `painters_partition`.
- `dsakit.numbers`: `digit_sum`, `factorial`, `n_cr`, `sum_to`, `fibonacci`,
  `primes_up_to`, `is_prime`, `binary_to_decimal`, `decimal_to_binary`,
  `is_power_of_two`, `reverse_number`, `is_even`, `power`.
- `dsakit.patterns`: text patterns returned as lists of lines, such as
  `square_stars`, `star_triangle`, `number_triangle`, `floyd_triangle`,
  `number_pyramid`, `butterfly`, `hollow_diamond`, `inverted_number_triangle`,
  `pairs_grid`, `triples_grid` and more; `PATTERNS` maps each command name to
  its function.

## Examples

```python
from dsakit.sorting import insertion_sort
from dsakit.searching import search_rotated
from dsakit.arrays import max_subarray_sum
from dsakit.numbers import power
from dsakit.patterns import star_triangle

insertion_sort([4, 1, 5, 2, 3])                   # [1, 2, 3, 4, 5]
insertion_sort([4, 1, 5, 2, 3], descending=True)  # [5, 4, 3, 2, 1]
search_rotated([4, 5, 6, 7, 0, 1, 2], 1)          # 5
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4]) # 6
power(2.0, 10)                                    # 1024.0
star_triangle(3)                                  # ['*', '* *', '* * *']
```

## Printing patterns

The `dsakit-patterns` command prints one of the text patterns. Pattern names
are the function names with hyphens instead of underscores (for example
`star-triangle`, `number-pyramid`, `hollow-diamond`); the size is given with
`-n` / `--size` and defaults to 4.

    dsakit-patterns --help

For example, to print a butterfly of size 4:

    dsakit-patterns butterfly --size 4

## What it does not do

The package is a set of functions and one printing command. It does not read
input interactively and offers no other commands.