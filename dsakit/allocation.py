"""Binary search on the answer: stall placement, book allocation, painters."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence


def _search(low: int, high: int, feasible: Callable[[int], bool], *, largest: bool) -> int | None:
    """Binary search for the largest (or smallest) feasible value in [low, high]."""
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if feasible(mid):
            answer = mid
            if largest:
                low = mid + 1
            else:
                high = mid - 1
        elif largest:
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _groups_needed(items: Iterable[int], limit: int) -> int:
    groups, load = 1, 0
    for item in items:
        if load + item <= limit:
            load += item
        else:
            groups += 1
            load = item
    return groups


def aggressive_cows(stalls: Iterable[int], cows: int) -> int | None:
    """Return the largest minimum distance at which ``cows`` fit in the stalls.

    Returns None when no positive distance allows every cow a stall.
    """
    positions = sorted(stalls)
    if not positions:
        raise ValueError("stalls must not be empty")
    if cows < 1:
        raise ValueError("cows must be at least 1")

    def feasible(distance: int) -> bool:
        placed, last = 1, positions[0]
        if placed >= cows:
            return True
        for position in positions[1:]:
            if position - last >= distance:
                placed += 1
                last = position
                if placed >= cows:
                    return True
        return False

    return _search(1, positions[-1] - positions[0], feasible, largest=True)


def allocate_books(pages: Sequence[int], students: int) -> int | None:
    """Return the smallest possible maximum of pages any student has to read.

    Books are given out in order, each student taking a contiguous run.
    Returns None when there are more students than books.
    """
    if students < 1:
        raise ValueError("students must be at least 1")
    if students > len(pages):
        return None

    def feasible(limit: int) -> bool:
        if any(book > limit for book in pages):
            return False
        return _groups_needed(pages, limit) <= students

    return _search(0, sum(pages), feasible, largest=False)


def painters_partition(boards: Sequence[int], painters: int) -> int:
    """Return the least time in which ``painters`` can paint the boards in order."""
    if not boards:
        raise ValueError("boards must not be empty")
    if painters < 1:
        raise ValueError("painters must be at least 1")
    result = _search(
        max(boards),
        sum(boards),
        lambda limit: _groups_needed(boards, limit) <= painters,
        largest=False,
    )
    assert result is not None
    return result