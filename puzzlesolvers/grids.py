"""Puzzles about small grids, boards, divisors and paths over clouds."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Sequence

from .counting import _counted_list, _items
from .numbers import _fields, _line_reader

_MAGIC_SQUARES = (
    ((8, 1, 6), (3, 5, 7), (4, 9, 2)),
    ((6, 1, 8), (7, 5, 3), (2, 9, 4)),
    ((4, 9, 2), (3, 5, 7), (8, 1, 6)),
    ((2, 9, 4), (7, 5, 3), (6, 1, 8)),
    ((8, 3, 4), (1, 5, 9), (6, 7, 2)),
    ((4, 3, 8), (9, 5, 1), (2, 7, 6)),
    ((6, 7, 2), (1, 5, 9), (8, 3, 4)),
    ((2, 7, 6), (9, 5, 1), (4, 3, 8)),
)

_QUEEN_DIRECTIONS = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


def forming_magic_square(s: Sequence[Sequence[int]]) -> int:
    """Least total change that turns the 3x3 grid s into a magic square."""
    if len(s) != 3 or any(len(row) != 3 for row in s):
        raise ValueError("a 3x3 grid is needed")
    return min(
        min(
            sum(
                abs(value - target)
                for row, magic_row in zip(s, magic)
                for value, target in zip(row, magic_row)
            )
            for magic in _MAGIC_SQUARES
        ),
        81,
    )


def organizing_containers(container: Sequence[Sequence[int]]) -> str:
    """Say whether swaps can leave each container holding balls of one type only."""
    n = len(container)
    if any(len(row) != n for row in container):
        raise ValueError("the container matrix must be square")
    capacities = Counter(sum(row) for row in container)
    type_totals = Counter(sum(column) for column in zip(*container))
    if n and capacities != type_totals:
        return "Impossible"
    return "Possible"


def queens_attack(
    n: int, r_q: int, c_q: int, obstacles: Iterable[Sequence[int]]
) -> int:
    """Squares a queen at (r_q, c_q) attacks on an n x n board with obstacles."""
    blocked = {(row, col) for row, col in obstacles}
    count = 0
    for dr, dc in _QUEEN_DIRECTIONS:
        r, c = r_q + dr, c_q + dc
        while 0 < r <= n and 0 < c <= n and (r, c) not in blocked:
            count += 1
            r += dr
            c += dc
    return count


def non_divisible_subset(k: int, s: Sequence[int]) -> int:
    """Size of the largest subset of s in which no two elements sum to a multiple of k."""
    if k <= 0:
        raise ValueError("k must be positive")
    if any(num < 0 for num in s):
        raise ValueError("values must not be negative")
    remainders = Counter(num % k for num in s)
    result = min(remainders[0], 1)
    for i in range(1, k // 2 + 1):
        if i != k - i:
            result += max(remainders[i], remainders[k - i])
        else:
            result += 1
    return result


def get_total_x(a: Sequence[int], b: Sequence[int]) -> int:
    """Count integers that every element of a divides and that divide every element of b."""
    if not a or not b:
        raise ValueError("both lists must be non-empty")
    multiple = math.lcm(*a)
    if multiple <= 0:
        raise ValueError("the elements of a must be non-zero")
    divisor = math.gcd(*b)
    return sum(
        1 for x in range(multiple, divisor + 1, multiple) if divisor % x == 0
    )


def jumping_on_clouds(c: Sequence[int]) -> int:
    """Fewest jumps of one or two clouds to reach the last, avoiding clouds marked 1."""
    jumps = 0
    i = 0
    while i < len(c) - 1:
        i += 2 if i + 2 < len(c) and c[i + 2] == 0 else 1
        jumps += 1
    return jumps


def _row(line: str, count: int) -> list[int]:
    values = [int(field) for field in line.rstrip(" \t\r\n").split(" ")]
    if len(values) != count:
        raise ValueError(f"bad input: expected {count} values, got {len(values)}")
    return values


def _magic_square_command(text: str) -> str:
    read = _line_reader(text)
    grid = [_row(read(), 3) for _ in range(3)]
    return f"{forming_magic_square(grid)}\n"


def _organizing_containers_command(text: str) -> str:
    read = _line_reader(text)
    queries = int(read().strip())
    answers = []
    for _ in range(queries):
        n = int(read().strip())
        container = [_row(read(), n) for _ in range(n)]
        answers.append(f"{organizing_containers(container)}\n")
    return "".join(answers)


def _queens_attack_command(text: str) -> str:
    read = _line_reader(text)
    n, k = _fields(read(), 2)
    r_q, c_q = _fields(read(), 2)
    obstacles = [_row(read(), 2) for _ in range(k)]
    return f"{queens_attack(n, r_q, c_q, obstacles)}\n"


def _non_divisible_subset_command(text: str) -> str:
    read = _line_reader(text)
    n, k = _fields(read(), 2)
    return f"{non_divisible_subset(k, _items(read(), n))}\n"


def _between_two_sets_command(text: str) -> str:
    read = _line_reader(text)
    n, m = _fields(read(), 2)
    a = _items(read(), n)
    b = _items(read(), m)
    return f"{get_total_x(a, b)}\n"


def _jumping_on_clouds_command(text: str) -> str:
    return f"{jumping_on_clouds(_counted_list(_line_reader(text)))}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "forming-a-magic-square": _magic_square_command,
        "organizing-containers": _organizing_containers_command,
        "queens-attack-2": _queens_attack_command,
        "non-divisible-subset": _non_divisible_subset_command,
        "between-two-sets": _between_two_sets_command,
        "jumping-on-the-clouds": _jumping_on_clouds_command,
    }