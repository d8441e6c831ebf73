"""Basic array exercises: membership filters, totals, extremes and reversal."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any


def intersection(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the values of ``first`` that also occur in ``second``, in order."""
    others = list(second)
    return [value for value in first if value in others]


def difference(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Return the values of ``first`` that do not occur in ``second``, in order."""
    others = list(second)
    return [value for value in first if value not in others]


def sum_and_product(values: Iterable[int]) -> tuple[int, int]:
    """Return the sum and the product of the values."""
    items = list(values)
    return sum(items), math.prod(items)


def _extreme_indices(values: Sequence[Any]) -> tuple[int, int]:
    if not values:
        raise ValueError("values must not be empty")
    indices = range(len(values))
    smallest = min(indices, key=values.__getitem__)
    largest = max(indices, key=values.__getitem__)
    return smallest, largest


def swap_min_max(values: Iterable[Any]) -> list[Any]:
    """Return the values with the first smallest and first largest swapped."""
    items = list(values)
    smallest, largest = _extreme_indices(items)
    items[smallest], items[largest] = items[largest], items[smallest]
    return items


def min_max_positions(values: Sequence[Any]) -> tuple[tuple[Any, int], tuple[Any, int]]:
    """Return ``((minimum, position), (maximum, position))`` with 1-based positions.

    The first occurrence of each extreme is reported.
    """
    smallest, largest = _extreme_indices(values)
    return (values[smallest], smallest + 1), (values[largest], largest + 1)


def doubled(values: Iterable[int]) -> list[int]:
    """Return every value multiplied by two."""
    return [2 * value for value in values]


def reversed_values(values: Iterable[Any]) -> list[Any]:
    """Return the values in reverse order."""
    return list(values)[::-1]