"""Text patterns built from nested loops: squares, triangles, pyramids, diamonds."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator
from itertools import count


def _check(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _spaced(items) -> str:
    return " ".join(str(item) for item in items)


def square_stars(n: int) -> list[str]:
    """Return an ``n`` by ``n`` square of stars."""
    _check(n)
    return ["*" * n for _ in range(n)]


def spaced_square_stars(n: int) -> list[str]:
    """Return an ``n`` by ``n`` square of space-separated stars."""
    _check(n)
    return [_spaced("*" * n) for _ in range(n)]


def counting_rows(n: int) -> list[str]:
    """Return ``n`` rows, each counting from 1 to ``n``."""
    _check(n)
    row = "".join(str(value) for value in range(1, n + 1))
    return [row for _ in range(n)]


def letter_rows(n: int) -> list[str]:
    """Return ``n`` rows, each holding the first ``n`` letters."""
    _check(n)
    row = "".join(_letter(k) for k in range(n))
    return [row for _ in range(n)]


def continuous_numbers(n: int) -> list[str]:
    """Return ``n`` rows of ``n`` numbers counting on from row to row."""
    _check(n)
    numbers: Iterator[int] = count(1)
    return [_spaced(next(numbers) for _ in range(n)) for _ in range(n)]


def continuous_letters(n: int) -> list[str]:
    """Return ``n`` rows of ``n`` letters continuing from row to row."""
    _check(n)
    offsets: Iterator[int] = count(0)
    return [_spaced(_letter(next(offsets)) for _ in range(n)) for _ in range(n)]


def star_triangle(n: int) -> list[str]:
    """Return a right triangle of stars, one more star per row."""
    _check(n)
    return [_spaced("*" * row) for row in range(1, n + 1)]


def repeated_number_triangle(n: int) -> list[str]:
    """Return a triangle whose row ``k`` repeats the number ``k`` ``k`` times."""
    _check(n)
    return [_spaced([row] * row) for row in range(1, n + 1)]


def repeated_letter_triangle(n: int) -> list[str]:
    """Return a triangle whose ``k``-th row repeats the ``k``-th letter ``k`` times."""
    _check(n)
    return [_spaced([_letter(row - 1)] * row) for row in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Return a triangle whose row ``k`` counts from 1 up to ``k``."""
    _check(n)
    return [_spaced(range(1, row + 1)) for row in range(1, n + 1)]


def reverse_number_triangle(n: int) -> list[str]:
    """Return a triangle whose row ``k`` counts down from ``k`` to 1."""
    _check(n)
    return [_spaced(range(row, 0, -1)) for row in range(1, n + 1)]


def floyd_triangle(n: int) -> list[str]:
    """Return Floyd's triangle: consecutive numbers, one more per row."""
    _check(n)
    numbers: Iterator[int] = count(1)
    return [_spaced(next(numbers) for _ in range(row)) for row in range(1, n + 1)]


def letter_floyd_triangle(n: int) -> list[str]:
    """Return Floyd's triangle made of consecutive letters."""
    _check(n)
    offsets: Iterator[int] = count(0)
    return [
        _spaced(_letter(next(offsets)) for _ in range(row)) for row in range(1, n + 1)
    ]


def butterfly(n: int) -> list[str]:
    """Return a butterfly of stars, ``2 * n - 1`` rows of width ``2 * n``."""
    _check(n)
    top = [
        "*" * (i + 1) + " " * (2 * (n - i - 1)) + "*" * (i + 1) for i in range(n)
    ]
    bottom = [
        "*" * (n - i - 1) + " " * (2 * (i + 1)) + "*" * (n - i - 1)
        for i in range(n - 1)
    ]
    return top + bottom


def hollow_diamond(n: int) -> list[str]:
    """Return the outline of a diamond with ``2 * n - 1`` rows."""
    _check(n)
    lines = []
    for i in range(n):
        line = " " * (n - i - 1) + "*"
        if i != 0:
            line += " " * (2 * i - 1) + "*"
        lines.append(line)
    for i in range(n - 1):
        line = " " * (i + 1) + "*"
        if i != n - 2:
            line += " " * (2 * (n - i) - 5) + "*"
        lines.append(line)
    return lines


def inverted_number_triangle(n: int) -> list[str]:
    """Return a right-aligned inverted triangle whose row ``k`` repeats ``k``."""
    _check(n)
    return [" " * i + str(i + 1) * (n - i) for i in range(n)]


def inverted_letter_triangle(n: int) -> list[str]:
    """Return a right-aligned inverted triangle whose ``k``-th row repeats the ``k``-th letter."""
    _check(n)
    return [" " * i + _letter(i) * (n - i) for i in range(n)]


def number_pyramid(n: int) -> list[str]:
    """Return a centred pyramid whose rows count up to the row number and back down."""
    _check(n)
    lines = []
    for i in range(n):
        rising = "".join(str(value) for value in range(1, i + 2))
        falling = "".join(str(value) for value in range(i, 0, -1))
        lines.append(" " * (n - i - 1) + rising + falling)
    return lines


def reverse_letter_triangle(n: int) -> list[str]:
    """Return a triangle whose ``k``-th row runs from the ``k``-th letter back to A."""
    _check(n)
    return [_spaced(_letter(j - 1) for j in range(row, 0, -1)) for row in range(1, n + 1)]


def pairs_grid(n: int) -> list[str]:
    """Return every pair ``(i, j)`` with ``1 <= i, j <= n``, one row per ``i``."""
    _check(n)
    return [
        _spaced(f"({i}, {j})" for j in range(1, n + 1)) for i in range(1, n + 1)
    ]


def triples_grid(n: int) -> list[str]:
    """Return every triple ``(i, j, k)`` up to ``n``, one block of rows per ``i``.

    Blocks are separated by an empty line.
    """
    _check(n)
    lines: list[str] = []
    for i in range(1, n + 1):
        if i > 1:
            lines.append("")
        for j in range(1, n + 1):
            lines.append(_spaced(f"({i}, {j}, {k})" for k in range(1, n + 1)))
    return lines


PATTERNS: dict[str, Callable[[int], list[str]]] = {
    func.__name__.replace("_", "-"): func
    for func in (
        square_stars,
        spaced_square_stars,
        counting_rows,
        letter_rows,
        continuous_numbers,
        continuous_letters,
        star_triangle,
        repeated_number_triangle,
        repeated_letter_triangle,
        number_triangle,
        reverse_number_triangle,
        floyd_triangle,
        letter_floyd_triangle,
        butterfly,
        hollow_diamond,
        inverted_number_triangle,
        inverted_letter_triangle,
        number_pyramid,
        reverse_letter_triangle,
        pairs_grid,
        triples_grid,
    )
}


def main(argv: list[str] | None = None) -> int:
    """Print the named pattern of the given size."""
    parser = argparse.ArgumentParser(description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("-n", "--size", type=int, default=4, help="pattern size (default 4)")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    for line in PATTERNS[args.pattern](args.size):
        print(line)
    return 0