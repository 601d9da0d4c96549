"""Square and rectangular grids of characters and numbers."""

from __future__ import annotations

from collections.abc import Callable
from itertools import count

__all__ = [
    "ones_square",
    "star_square",
    "hollow_square",
    "row_parity_square",
    "column_parity_square",
    "chessboard",
    "cross_square",
    "corner_ones_square",
    "middle_zero_square",
    "row_number_square",
    "column_number_square",
    "descending_columns",
    "mirrored_columns",
    "continuous_numbers",
    "progressive_grid",
    "nested_square",
    "spiral",
]


def _square(n: int, cell: Callable[[int, int], str]) -> list[str]:
    """Build an n-by-n grid; ``cell`` receives 1-based row and column."""
    positions = range(1, n + 1)
    return ["".join(cell(i, j) for j in positions) for i in positions]


def _digits(values) -> str:
    return "".join(str(v) for v in values)


def ones_square(n: int) -> list[str]:
    """An n-by-n square of ones."""
    return _square(n, lambda i, j: "1")


def star_square(n: int) -> list[str]:
    """An n-by-n square of stars."""
    return _square(n, lambda i, j: "*")


def hollow_square(n: int) -> list[str]:
    """An n-by-n square with a star border and a blank interior."""
    return _square(n, lambda i, j: "*" if i in (1, n) or j in (1, n) else " ")


def row_parity_square(n: int) -> list[str]:
    """Odd rows of zeros alternating with even rows of ones."""
    return _square(n, lambda i, j: "1" if i % 2 == 0 else "0")


def column_parity_square(n: int) -> list[str]:
    """Odd columns of zeros alternating with even columns of ones."""
    return _square(n, lambda i, j: "1" if j % 2 == 0 else "0")


def chessboard(n: int) -> list[str]:
    """A board of alternating ones and zeros, with a one in the top-left corner."""
    return _square(n, lambda i, j: "1" if (i + j) % 2 == 0 else "0")


def cross_square(n: int) -> list[str]:
    """Ones on both diagonals, zeros elsewhere."""
    return _square(n, lambda i, j: "1" if j == i or j == n - i + 1 else "0")


def corner_ones_square(n: int) -> list[str]:
    """Ones in the corners and interior, zeros along the rest of the border."""

    def cell(i: int, j: int) -> str:
        if i in (1, n) and j in (1, n):
            return "1"
        if i in (1, n) or j in (1, n):
            return "0"
        return "1"

    return _square(n, cell)


def middle_zero_square(n: int) -> list[str]:
    """A square of ones with a single zero in the middle."""
    middle = (n + 1) // 2
    return _square(n, lambda i, j: "0" if i == middle and j == middle else "1")


def row_number_square(n: int) -> list[str]:
    """Each row repeats its own 1-based row number."""
    return _square(n, lambda i, j: str(i))


def column_number_square(n: int) -> list[str]:
    """Each row counts the column numbers from 1 to n."""
    return _square(n, lambda i, j: str(j))


def descending_columns(rows: int, cols: int) -> list[str]:
    """Rows that count down from ``cols`` and are padded with ``rows - i + 1``."""
    return [
        _digits(range(cols, cols - i, -1)) + str(rows - i + 1) * max(cols - i, 0)
        for i in range(1, rows + 1)
    ]


def mirrored_columns(rows: int, cols: int) -> list[str]:
    """Rows that count up from the row number to ``cols`` and then down to 1."""
    return [
        _digits(range(i, cols + 1)) + _digits(range(i - 1, 0, -1))
        for i in range(1, rows + 1)
    ]


def continuous_numbers(rows: int, cols: int) -> list[str]:
    """Each row holds ``cols`` consecutive numbers starting at the row number."""
    return [_digits(range(i, i + cols)) for i in range(1, rows + 1)]


def progressive_grid(rows: int, cols: int) -> list[str]:
    """Numbers 1, 2, 3, ... laid out row by row, each left-aligned in three columns."""
    counter = count(1)
    return [
        "".join(f"{next(counter):<3d}" for _ in range(cols))
        for _ in range(rows)
    ]


def nested_square(n: int) -> list[str]:
    """Concentric rings of numbers with ``n`` on the outside."""

    def row(outer_value: int, inner_value: int, width: int) -> str:
        return (
            _digits(range(n, outer_value, -1))
            + str(inner_value) * width
            + _digits(range(outer_value + 1, n + 1))
        )

    upper = [row(i, i, 2 * i - 1) for i in range(n, 0, -1)]
    lower = [row(i, i + 1, 2 * i - 1) for i in range(1, n)]
    return upper + lower


def spiral(size: int = 10) -> list[str]:
    """A clockwise spiral of 1..size*size, each value left-aligned in five columns.

    The spiral fills complete rings only, so ``size`` must be even.
    """
    if size < 0 or size % 2:
        raise ValueError(f"spiral size must be a non-negative even number, got {size}")

    board = [[0] * size for _ in range(size)]
    counter = count(1)
    for left in range(size // 2):
        top = size - 1 - left
        for j in range(left, top + 1):
            board[left][j] = next(counter)
        for j in range(left + 1, top + 1):
            board[j][top] = next(counter)
        for j in range(top - 1, left - 1, -1):
            board[top][j] = next(counter)
        for j in range(top - 1, left, -1):
            board[j][left] = next(counter)

    return ["".join(f"{value:<5d}" for value in row) for row in board]