"""Linear and binary search variants."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the 1-based position of ``target`` in sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target > values[mid]:
            start = mid + 1
        elif target < values[mid]:
            end = mid - 1
        else:
            return mid + 1
    return None


def peak_index_in_mountain(values: Sequence[Any]) -> int:
    """Return the index of the peak of a mountain sequence.

    Raises ValueError when no interior peak exists.
    """
    start, end = 1, len(values) - 2
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] > values[mid - 1] and values[mid] > values[mid + 1]:
            return mid
        if values[mid] > values[mid - 1]:
            start = mid + 1
        else:
            end = mid - 1
    raise ValueError("sequence is not a mountain")


def search_rotated(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in a rotated sorted sequence, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == target:
            return mid
        if values[start] <= values[mid]:
            if values[start] <= target <= values[mid]:
                end = mid - 1
            else:
                start = mid + 1
        else:
            if values[mid] <= target <= values[end]:
                start = mid + 1
            else:
                end = mid - 1
    return None


def single_non_duplicate(values: Sequence[Any]) -> Any:
    """Return the only element that appears once in a sorted sequence of pairs.

    Raises ValueError when the sequence is empty or has no such element.
    """
    n = len(values)
    if n == 0:
        raise ValueError("empty sequence")
    if n == 1:
        return values[0]
    if values[0] != values[1]:
        return values[0]
    if values[-1] != values[-2]:
        return values[-1]

    start, end = 0, n - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid - 1] != values[mid] and values[mid] != values[mid + 1]:
            return values[mid]
        if mid % 2 == 0:
            if values[mid] == values[mid + 1]:
                start = mid + 2
            else:
                end = mid - 1
        else:
            if values[mid] == values[mid - 1]:
                start = mid + 1
            else:
                end = mid - 1
    raise ValueError("no single element found")


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the 1-based position of the first ``target`` in ``values``, or None."""
    for position, value in enumerate(values, start=1):
        if value == target:
            return position
    return None


def contains(values: Sequence[Any], value: Any) -> bool:
    """Tell whether ``value`` occurs in ``values``."""
    return any(item == value for item in values)