import pytest

from patternkit import shapes


@pytest.mark.parametrize("n", [0, -2])
def test_non_positive_size_gives_nothing(n):
    results = [
        shapes.rhombus(n),
        shapes.left_rhombus(n),
        shapes.hollow_rhombus(n),
        shapes.hollow_left_rhombus(n),
        shapes.pyramid(n),
        shapes.right_triangle(n),
        shapes.diamond(n),
        shapes.hollow_diamond(n),
        shapes.right_arrow(n),
        shapes.left_arrow(n),
        shapes.plus(n),
    ]
    assert results == [[]] * 11


@pytest.mark.parametrize("n", [1, 4, 6])
def test_rhombus(n):
    rows = shapes.rhombus(n)
    assert len(rows) == n
    assert all(row.strip() == "*" * n for row in rows)
    assert [len(row) - len(row.lstrip()) for row in rows] == list(range(n - 1, -1, -1))


@pytest.mark.parametrize("n", [1, 4, 6])
def test_left_rhombus(n):
    rows = shapes.left_rhombus(n)
    assert all(row.strip() == "*" * n for row in rows)
    assert [len(row) - len(row.lstrip()) for row in rows] == list(range(1, n + 1))


def test_hollow_rhombus_outline():
    n = 5
    rows = shapes.hollow_rhombus(n)
    assert len(rows) == n
    assert rows[0].strip() == "*" * n
    assert rows[-1] == "*" * n
    for row in rows[1:-1]:
        body = row.lstrip()
        assert body.count("*") == 2
        assert len(row[len(row) - n:]) == n
    assert [len(row) for row in rows] == [2 * n - i for i in range(1, n + 1)]


def test_hollow_left_rhombus_matches_hollow_rhombus_bodies():
    n = 5
    left = shapes.hollow_left_rhombus(n)
    right = shapes.hollow_rhombus(n)
    assert [row[-n:] for row in left] == [row[-n:] for row in right]
    assert [len(row) - n for row in left] == list(range(1, n + 1))


@pytest.mark.parametrize("n", [1, 3, 6])
def test_pyramid(n):
    rows = shapes.pyramid(n)
    assert [row.count("*") for row in rows] == [2 * i - 1 for i in range(1, n + 1)]
    assert rows[-1] == "*" * (2 * n - 1)
    assert [row.index("*") for row in rows] == list(range(n - 1, -1, -1))


def test_pyramid_is_diamond_upper_half():
    assert shapes.diamond(5)[:5] == shapes.pyramid(5)


def test_right_triangle():
    rows = shapes.right_triangle(4)
    assert [len(row) for row in rows] == [1, 2, 3, 4]
    assert set("".join(rows)) == {"*"}


@pytest.mark.parametrize("rows_count", [1, 3, 5])
def test_diamond_symmetric(rows_count):
    rows = shapes.diamond(rows_count)
    assert len(rows) == 2 * rows_count - 1
    assert rows == rows[::-1]
    assert max(row.count("*") for row in rows) == 2 * rows_count - 1


@pytest.mark.parametrize("n", [1, 3, 5])
def test_hollow_diamond(n):
    rows = shapes.hollow_diamond(n)
    assert len(rows) == 2 * n
    assert all(len(row) == 2 * n for row in rows)
    assert all(row == row[::-1] for row in rows)
    assert rows[0] == "*" * (2 * n)
    assert rows[-1] == "*" * (2 * n)
    assert rows[n - 1] == rows[n]


def test_arrows_have_same_star_counts():
    left = shapes.left_arrow(4)
    right = shapes.right_arrow(4)
    assert [row.count("*") for row in left] == [row.count("*") for row in right]


def test_plus():
    assert shapes.plus(3) == ["  +", "  +", "+++++", "  +", "  +"]


@pytest.mark.parametrize("n", [1, 2, 6])
def test_plus_shape(n):
    rows = shapes.plus(n)
    assert len(rows) == 2 * n - 1
    assert rows[n - 1] == "+" * (2 * n - 1)
    assert all(row.index("+") == n - 1 for i, row in enumerate(rows) if i != n - 1)