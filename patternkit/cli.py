"""Command-line entry point that prints any pattern of the package."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from patternkit import grids, shapes, triangles

__all__ = ["main"]

_SIDE = "Enter number of rows/cols: "
_ROWS = "Enter number of rows: "
_COLS = "Enter number of columns: "
_VALUE = "Enter value of n : "
_N = "Enter N: "


@dataclass(frozen=True)
class _Pattern:
    render: Callable[..., list[str]]
    prompts: tuple[str, ...]
    ask: bool = True


def _registry() -> dict[str, _Pattern]:
    entries: dict[str, _Pattern] = {}

    def add(funcs, prompts, ask=True):
        for func in funcs:
            entries[func.__name__.replace("_", "-")] = _Pattern(func, prompts, ask)

    add(
        [
            grids.ones_square, grids.star_square, grids.hollow_square,
            grids.row_parity_square, grids.column_parity_square, grids.chessboard,
            grids.cross_square, grids.corner_ones_square, grids.middle_zero_square,
            grids.row_number_square, grids.column_number_square,
        ],
        (_SIDE,),
    )
    add(
        [
            grids.descending_columns, grids.mirrored_columns,
            grids.continuous_numbers, grids.progressive_grid,
        ],
        (_ROWS, _COLS),
    )
    add([grids.nested_square], (_N,))
    add([grids.spiral], ("Enter size: ",), ask=False)
    add(
        [
            shapes.rhombus, shapes.hollow_rhombus, shapes.diamond,
        ],
        (_ROWS,),
    )
    add(
        [
            shapes.left_rhombus, shapes.hollow_left_rhombus, shapes.pyramid,
            shapes.right_triangle,
        ],
        (_SIDE,),
    )
    add(
        [shapes.hollow_diamond, shapes.right_arrow, shapes.left_arrow],
        (_VALUE,),
    )
    add([shapes.plus], (_N,))
    add([getattr(triangles, name) for name in triangles.__all__], (_N,))
    return entries


_PATTERNS = _registry()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternkit",
        description="Print a text pattern. Sizes not given on the command line are asked for.",
    )
    parser.add_argument("pattern", choices=sorted(_PATTERNS), metavar="PATTERN",
                        help="one of: " + ", ".join(sorted(_PATTERNS)))
    parser.add_argument("sizes", nargs="*", type=int, metavar="SIZE",
                        help="size arguments of the pattern")
    return parser


def _ask(prompt: str) -> int:
    text = input(prompt).strip()
    return int(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, read missing sizes from standard input and print the pattern."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    pattern = _PATTERNS[args.pattern]

    sizes = list(args.sizes)
    if sizes and len(sizes) != len(pattern.prompts):
        parser.error(
            f"{args.pattern} takes {len(pattern.prompts)} size(s), got {len(sizes)}"
        )
    if not sizes and pattern.ask:
        try:
            sizes = [_ask(prompt) for prompt in pattern.prompts]
        except EOFError:
            parser.error("expected a size on standard input")
        except ValueError:
            parser.error("size must be an integer")
        print()

    try:
        lines = pattern.render(*sizes)
    except ValueError as exc:
        parser.error(str(exc))

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())