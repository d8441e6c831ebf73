"""Array puzzles: two-pointer scans, prefix products, permutations and subarrays."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate
from operator import mul, xor
from typing import Any


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two values adding up to ``target``, or None.

    The index of the smaller value comes first.
    """
    indexed = sorted((value, index) for index, value in enumerate(nums))
    start, end = 0, len(indexed) - 1
    while start < end:
        total = indexed[start][0] + indexed[end][0]
        if total == target:
            return indexed[start][1], indexed[end][1]
        if total < target:
            start += 1
        else:
            end -= 1
    return None


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the given vertical lines."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    iterator = iter(prices)
    try:
        best_buy = next(iterator)
    except StopIteration:
        raise ValueError("prices must not be empty") from None
    profit = 0
    for price in iterator:
        if price > best_buy:
            profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def next_permutation(values: Iterable[Any]) -> list[Any]:
    """Return the next lexicographic permutation; the last one wraps to the first."""
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return items[::-1]
    successor = next(
        i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items


def next_string_permutation(text: str) -> str:
    """Return the next lexicographic rearrangement of the characters of ``text``."""
    return "".join(next_permutation(text))


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    current = 0
    for value in nums:
        current += value
        best = current if best is None else max(best, current)
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def max_subarray_sum_brute_force(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run by trying every start."""
    if not nums:
        raise ValueError("nums must not be empty")
    return max(
        max(accumulate(nums[start:])) for start in range(len(nums))
    )


def sort_colors(nums: Iterable[int]) -> list[int]:
    """Return the 0/1/2 values grouped in order with a single Dutch-flag pass.

    Any value other than 0 or 1 is treated as 2.
    """
    items = list(nums)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[high], items[mid] = items[mid], items[high]
            high -= 1
    return items


def merge_sorted(first: Sequence[Any], m: int, second: Sequence[Any], n: int) -> list[Any]:
    """Merge the first ``m`` values of ``first`` with the first ``n`` of ``second``.

    Both prefixes must already be sorted; the result holds ``m + n`` values.
    """
    if not 0 <= m <= len(first):
        raise ValueError("m is out of range for first")
    if not 0 <= n <= len(second):
        raise ValueError("n is out of range for second")
    return list(heapq.merge(first[:m], second[:n]))