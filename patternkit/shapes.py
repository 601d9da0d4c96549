"""Star shapes: rhombuses, triangles, diamonds, arrows and a plus sign."""

from __future__ import annotations

__all__ = [
    "rhombus",
    "left_rhombus",
    "hollow_rhombus",
    "hollow_left_rhombus",
    "pyramid",
    "right_triangle",
    "diamond",
    "hollow_diamond",
    "right_arrow",
    "left_arrow",
    "plus",
]


def _hollow_row(i: int, n: int) -> str:
    if i in (1, n):
        return "*" * n
    return "".join("*" if j in (1, n) else " " for j in range(1, n + 1))


def rhombus(n: int) -> list[str]:
    """A solid rhombus leaning right, ``n`` stars wide."""
    return [" " * (n - i) + "*" * n for i in range(1, n + 1)]


def left_rhombus(n: int) -> list[str]:
    """A solid rhombus leaning left, ``n`` stars wide."""
    return [" " * i + "*" * n for i in range(1, n + 1)]


def hollow_rhombus(n: int) -> list[str]:
    """The outline of a rhombus leaning right."""
    return [" " * (n - i) + _hollow_row(i, n) for i in range(1, n + 1)]


def hollow_left_rhombus(n: int) -> list[str]:
    """The outline of a rhombus leaning left."""
    return [" " * i + _hollow_row(i, n) for i in range(1, n + 1)]


def pyramid(n: int) -> list[str]:
    """A centred pyramid of ``n`` rows."""
    return [" " * (n - i) + "*" * (2 * i - 1) for i in range(1, n + 1)]


def right_triangle(n: int) -> list[str]:
    """A right-angled triangle of ``n`` rows."""
    return ["*" * i for i in range(1, n + 1)]


def diamond(rows: int) -> list[str]:
    """A solid diamond whose widest row is ``2 * rows - 1`` stars."""
    lines = []
    stars, spaces = 1, rows - 1
    for i in range(1, rows * 2):
        lines.append(" " * spaces + "*" * (2 * stars - 1))
        if i < rows:
            spaces, stars = spaces - 1, stars + 1
        else:
            spaces, stars = spaces + 1, stars - 1
    return lines


def hollow_diamond(n: int) -> list[str]:
    """A diamond cut out of a ``2n``-by-``2n`` block of stars."""
    upper = [
        "*" * (n - i + 1) + " " * (2 * i - 2) + "*" * (n - i + 1)
        for i in range(1, n + 1)
    ]
    lower = ["*" * i + " " * (2 * n - 2 * i) + "*" * i for i in range(1, n + 1)]
    return upper + lower


def right_arrow(n: int) -> list[str]:
    """An arrow of stars pointing right."""
    upper = [" " * (2 * i - 2) + "*" * (n - i + 1) for i in range(1, n)]
    lower = [" " * (2 * n - 2 * i) + "*" * i for i in range(1, n + 1)]
    return upper + lower


def left_arrow(n: int) -> list[str]:
    """An arrow of stars pointing left."""
    upper = [" " * (n - i) + "*" * (n - i + 1) for i in range(1, n)]
    lower = [" " * (i - 1) + "*" * i for i in range(1, n + 1)]
    return upper + lower


def plus(n: int) -> list[str]:
    """A plus sign with arms ``n - 1`` long, ``2n - 1`` rows high."""
    return [
        "+" * (2 * n - 1) if i == n else " " * (n - 1) + "+"
        for i in range(1, 2 * n)
    ]