import pytest

from puzzlesolvers.positions import cat_and_mouse, commands, kangaroo, page_count


@pytest.mark.parametrize(
    "x1, v1, x2, v2, expected",
    [
        (0, 3, 4, 2, "YES"),
        (0, 2, 5, 3, "NO"),
        (0, 2, 0, 2, "YES"),
        (0, 2, 1, 2, "NO"),
        (0, 4, 5, 2, "NO"),
        (3, 1, 3, 7, "YES"),
    ],
)
def test_kangaroo(x1, v1, x2, v2, expected):
    assert kangaroo(x1, v1, x2, v2) == expected


@pytest.mark.parametrize("x1, v1, x2, v2", [(0, 3, 4, 2), (0, 2, 5, 3), (1, 5, 9, 1)])
def test_kangaroo_is_symmetric(x1, v1, x2, v2):
    assert kangaroo(x1, v1, x2, v2) == kangaroo(x2, v2, x1, v1)


def test_page_count_examples():
    assert page_count(6, 2) == 1
    assert page_count(5, 4) == 0


@pytest.mark.parametrize("n", [1, 2, 5, 6, 11])
def test_page_count_is_bounded(n):
    for p in range(1, n + 1):
        result = page_count(n, p)
        assert 0 <= result <= n // 2


@pytest.mark.parametrize("n", [1, 4, 7, 10])
def test_page_count_first_and_last_pages_need_no_turns(n):
    assert page_count(n, 1) == page_count(n, n) == page_count(1, 1)


@pytest.mark.parametrize(
    "x, y, z, expected",
    [
        (1, 2, 3, "Cat B"),
        (1, 3, 2, "Mouse C"),
        (2, 5, 4, "Cat B"),
        (3, 9, 4, "Cat A"),
    ],
)
def test_cat_and_mouse(x, y, z, expected):
    assert cat_and_mouse(x, y, z) == expected


def test_cat_and_mouse_swapping_cats_swaps_winner():
    assert cat_and_mouse(3, 9, 4) == "Cat A"
    assert cat_and_mouse(9, 3, 4) == "Cat B"


def test_kangaroo_command():
    assert commands()["kangaroo"]("0 3 4 2\n") == "YES\n"


def test_drawing_book_command_matches_function():
    assert commands()["drawing-book"]("6\n2\n") == f"{page_count(6, 2)}\n"


def test_cats_and_a_mouse_command():
    output = commands()["cats-and-a-mouse"]("2\n1 2 3\n1 3 2\n")
    assert output == "Cat B\nMouse C\n"


def test_kangaroo_command_rejects_short_line():
    with pytest.raises(ValueError):
        commands()["kangaroo"]("0 3 4\n")