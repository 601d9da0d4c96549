"""Triangles of digits, built row by row from a single size ``n``."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "odd_length_count",
    "alternating_odd_even",
    "odd_palindrome",
    "descending_ascending",
    "descending_repeat",
    "repeat_row",
    "tail_from_row",
    "row_start_run",
    "inverted_row_start_run",
    "odd_run_from_row",
    "shrinking_repeat",
    "reverse_repeat",
    "count_up",
    "shrinking_count",
    "count_down",
    "inverted_count_down",
    "descending_tail",
    "ascending_tail_inverted",
]


def _digits(values: Iterable[int]) -> str:
    return "".join(str(v) for v in values)


def _rows_up(n: int) -> range:
    return range(1, n + 1)


def _rows_down(n: int) -> range:
    return range(n, 0, -1)


def odd_length_count(n: int) -> list[str]:
    """Row ``i`` counts from 1 to ``2i - 1``."""
    return [_digits(range(1, 2 * i)) for i in _rows_up(n)]


def alternating_odd_even(n: int) -> list[str]:
    """Row ``i`` holds ``i`` odd numbers on odd rows and ``i`` even numbers on even rows."""
    return [_digits(range(1 if i % 2 else 2, 0, 2)[:0] or range(1 if i % 2 else 2, (1 if i % 2 else 2) + 2 * i, 2))
            for i in _rows_up(n)]


def odd_palindrome(n: int) -> list[str]:
    """Row ``i`` climbs the odd numbers to ``2i - 1`` and falls back to 1."""
    return [
        _digits(range(1, 2 * i, 2)) + _digits(range(2 * i - 3, 0, -2))
        for i in _rows_up(n)
    ]


def descending_ascending(n: int) -> list[str]:
    """Row ``i`` counts down from ``i`` to 2, then up from 1 to ``n - i + 1``."""
    return [
        _digits(range(i, 1, -1)) + _digits(range(1, n - i + 2))
        for i in _rows_up(n)
    ]


def descending_repeat(n: int) -> list[str]:
    """Rows from ``n`` down to 1, each repeating its number that many times."""
    return [str(i) * i for i in _rows_down(n)]


def repeat_row(n: int) -> list[str]:
    """Row ``i`` repeats ``i`` exactly ``i`` times."""
    return [str(i) * i for i in _rows_up(n)]


def tail_from_row(n: int) -> list[str]:
    """Row ``i`` counts from ``i`` up to ``n``."""
    return [_digits(range(i, n + 1)) for i in _rows_up(n)]


def row_start_run(n: int) -> list[str]:
    """Row ``i`` holds ``i`` consecutive numbers starting at ``i``."""
    return [_digits(range(i, 2 * i)) for i in _rows_up(n)]


def inverted_row_start_run(n: int) -> list[str]:
    """Rows from ``n`` down to 1, row ``i`` holding ``i`` numbers from ``i``."""
    return [_digits(range(i, 2 * i)) for i in _rows_down(n)]


def odd_run_from_row(n: int) -> list[str]:
    """Row ``i`` holds ``n - i + 1`` odd numbers starting at ``2i - 1``."""
    return [
        _digits(range(2 * i - 1, 2 * i - 1 + 2 * (n - i + 1), 2))
        for i in _rows_up(n)
    ]


def shrinking_repeat(n: int) -> list[str]:
    """Row ``i`` repeats ``i`` exactly ``n - i + 1`` times."""
    return [str(i) * (n - i + 1) for i in _rows_up(n)]


def reverse_repeat(n: int) -> list[str]:
    """Row ``i`` repeats ``n - i + 1`` exactly ``i`` times."""
    return [str(n - i + 1) * i for i in _rows_up(n)]


def count_up(n: int) -> list[str]:
    """Row ``i`` counts from 1 to ``i``."""
    return [_digits(range(1, i + 1)) for i in _rows_up(n)]


def shrinking_count(n: int) -> list[str]:
    """Row ``i`` counts from 1 to ``n - i + 1``."""
    return [_digits(range(1, n - i + 2)) for i in _rows_up(n)]


def count_down(n: int) -> list[str]:
    """Row ``i`` counts down from ``i`` to 1."""
    return [_digits(range(i, 0, -1)) for i in _rows_up(n)]


def inverted_count_down(n: int) -> list[str]:
    """Rows from ``n`` down to 1, each counting down from its number to 1."""
    return [_digits(range(i, 0, -1)) for i in _rows_down(n)]


def descending_tail(n: int) -> list[str]:
    """Rows from ``n`` down to 1, row ``i`` counting down from ``n`` to ``i``."""
    return [_digits(range(n, i - 1, -1)) for i in _rows_down(n)]


def ascending_tail_inverted(n: int) -> list[str]:
    """Rows from ``n`` down to 1, row ``i`` counting up from ``i`` to ``n``."""
    return [_digits(range(i, n + 1)) for i in _rows_down(n)]