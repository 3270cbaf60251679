"""Puzzles about positions on a line and pages in a book."""

from __future__ import annotations

from collections.abc import Callable

from .numbers import _fields, _line_reader, _run_cases


def kangaroo(x1: int, v1: int, x2: int, v2: int) -> str:
    """Say whether two kangaroos jumping forward ever land on the same spot."""
    if v1 == v2:
        return "YES" if x1 == x2 else "NO"
    distance = x2 - x1
    closing_speed = v1 - v2
    if distance % closing_speed == 0 and distance // closing_speed >= 0:
        return "YES"
    return "NO"


def page_count(n: int, p: int) -> int:
    """Fewest page turns to reach page p of an n-page book from either end."""
    from_front = p // 2
    from_back = n // 2 - p // 2
    return min(from_front, from_back)


def cat_and_mouse(x: int, y: int, z: int) -> str:
    """Name the cat that reaches the mouse first, or the mouse if they tie."""
    distance_a = abs(x - z)
    distance_b = abs(y - z)
    if distance_a < distance_b:
        return "Cat A"
    if distance_b < distance_a:
        return "Cat B"
    return "Mouse C"


def _kangaroo_command(text: str) -> str:
    x1, v1, x2, v2 = _fields(_line_reader(text)(), 4)
    return f"{kangaroo(x1, v1, x2, v2)}\n"


def _drawing_book_command(text: str) -> str:
    read = _line_reader(text)
    n = int(read().strip())
    p = int(read().strip())
    return f"{page_count(n, p)}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "kangaroo": _kangaroo_command,
        "drawing-book": _drawing_book_command,
        "cats-and-a-mouse": lambda text: _run_cases(
            text, lambda line: cat_and_mouse(*_fields(line, 3))
        ),
    }