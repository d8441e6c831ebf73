"""Classic comparison sorts and pair ordering helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order using bubble sort.

    Stops early as soon as a full pass makes no swap.
    """
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for left in range(unsorted_end):
            if items[left] > items[left + 1]:
                items[left], items[left + 1] = items[left + 1], items[left]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[T], descending: bool = False) -> list[T]:
    """Return the values sorted by insertion sort, ascending unless ``descending``."""
    result: list[T] = []
    for current in values:
        position = len(result)
        while position > 0 and _out_of_order(result[position - 1], current, descending):
            position -= 1
        result.insert(position, current)
    return result


def _out_of_order(previous: Any, current: Any, descending: bool) -> bool:
    return previous < current if descending else previous > current


def selection_sort(values: Iterable[T]) -> list[T]:
    """Return the values in ascending order using selection sort."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def sort_pairs(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Return the pairs ordered by first value, then by second value."""
    return sorted(tuple(pair) for pair in pairs)


def sort_pairs_by_second(pairs: Iterable[tuple[Any, Any]]) -> list[tuple[Any, Any]]:
    """Return the pairs ordered by second value, ties broken by first value."""
    return sorted((tuple(pair) for pair in pairs), key=lambda pair: (pair[1], pair[0]))