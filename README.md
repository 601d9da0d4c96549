# patternkit

Build the classic text patterns as lists of strings that you can print,
compare or reuse: squares of stars and digits, chessboards, number grids,
number triangles, rhombi, diamonds, arrows, a plus sign and a number spiral.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## From the command line

The `patternkit` command prints one pattern. Name the pattern, then give its
sizes:

```
patternkit pyramid 3
patternkit descending-columns 3 4
patternkit spiral 4
```

Pattern names are the function names below with `_` written as `-`
(`hollow-square`, `count-up`, `right-arrow`, ...). Most patterns take one
size; `descending-columns`, `mirrored-columns`, `continuous-numbers` and
`progressive-grid` take two (rows, then columns).

If no sizes are given, the command asks for each one on standard input.
`spiral` does not ask: without a size it prints a 10-by-10 spiral, and a
size it is given must be even. A wrong number of sizes, a size that is not
an integer or an odd spiral size ends the command with an error message.

For the full list of patterns:

```
patternkit --help
```

## From Python

Every function takes the size of the pattern and returns its rows as a list
of strings:

```python
from patternkit.grids import chessboard, spiral
from patternkit.shapes import pyramid
from patternkit.triangles import count_up

chessboard(3)   # ['101', '010', '101']
pyramid(3)      # ['  *', ' ***', '*****']
count_up(3)     # ['1', '12', '123']

for row in spiral(4):
    print(row)
```

### `patternkit.grids`

Square and rectangular patterns:

- `ones_square(n)`, `star_square(n)`, `hollow_square(n)`
- `row_parity_square(n)`, `column_parity_square(n)`, `chessboard(n)`
- `cross_square(n)`, `corner_ones_square(n)`, `middle_zero_square(n)`
- `row_number_square(n)`, `column_number_square(n)`
- `descending_columns(rows, cols)`, `mirrored_columns(rows, cols)`
- `continuous_numbers(rows, cols)`
- `progressive_grid(rows, cols)`: the numbers 1, 2, 3, ... row by row, each
  left-aligned in a field three characters wide
- `nested_square(n)`: concentric rings of digits with `n` outermost
- `spiral(size=10)`: a clockwise spiral of 1 to `size * size`, each number
  left-aligned in a field five characters wide; raises `ValueError` unless
  `size` is even and not negative

### `patternkit.shapes`

Star and plus-sign shapes:

- `rhombus(n)`, `left_rhombus(n)`, `hollow_rhombus(n)`, `hollow_left_rhombus(n)`
- `pyramid(n)`, `right_triangle(n)`
- `diamond(rows)`, `hollow_diamond(n)`
- `right_arrow(n)`, `left_arrow(n)`
- `plus(n)`

### `patternkit.triangles`

Number triangles:

- `count_up(n)`, `count_down(n)`, `shrinking_count(n)`, `inverted_count_down(n)`
- `repeat_row(n)`, `reverse_repeat(n)`, `shrinking_repeat(n)`, `descending_repeat(n)`
- `tail_from_row(n)`, `descending_tail(n)`, `ascending_tail_inverted(n)`
- `row_start_run(n)`, `inverted_row_start_run(n)`, `odd_run_from_row(n)`
- `odd_length_count(n)`, `alternating_odd_even(n)`, `odd_palindrome(n)`
- `descending_ascending(n)`

Numbers are written one after another with no separator, so rows that reach
10 or more run their digits together.