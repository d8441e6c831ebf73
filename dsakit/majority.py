"""Majority element and pair sum searches."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby
from typing import Any


def majority_element(nums: Sequence[Any]) -> Any:
    """Return the majority candidate found by Moore's voting algorithm."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = None
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def majority_element_brute_force(nums: Sequence[Any]) -> Any | None:
    """Return the value occurring more than half the time, or None."""
    half = len(nums) // 2
    for value in nums:
        if sum(1 for other in nums if other == value) > half:
            return value
    return None


def majority_element_sorted(nums: Sequence[Any]) -> Any:
    """Return the majority value by sorting and counting runs.

    Without a majority, the largest value is returned.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    half = len(nums) // 2
    value = None
    for value, run in groupby(sorted(nums)):
        if sum(1 for _ in run) > half:
            return value
    return value


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first pair of indices whose values add up to ``target``, or None."""
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                return i, j
    return None


def pair_sum_two_pointer(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two values adding up to ``target`` in sorted ``nums``, or None."""
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None