"""Puzzles about single integers and ranges of integers."""

from __future__ import annotations

import math
from collections.abc import Callable

_UINT32_RANGE = 1 << 32


def solve_me_first(a: int, b: int) -> int:
    """Return the sum of two unsigned 32-bit integers, wrapping on overflow."""
    return (a + b) % _UINT32_RANGE


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz lines for 1..n."""
    lines = []
    for i in range(1, n + 1):
        if i % 15 == 0:
            lines.append("FizzBuzz")
        elif i % 3 == 0:
            lines.append("Fizz")
        elif i % 5 == 0:
            lines.append("Buzz")
        else:
            lines.append(str(i))
    return lines


def extra_long_factorial(n: int) -> int:
    """Return n!, treating every n below 2 as giving 1."""
    return math.factorial(n) if n >= 2 else 1


def find_digits(n: int) -> int:
    """Count the non-zero digits of n that divide n evenly."""
    if n <= 0:
        return 0
    return sum(1 for ch in str(n) if ch != "0" and n % int(ch) == 0)


def utopian_tree(n: int) -> int:
    """Height of a tree that doubles in odd cycles and grows by one in even ones."""
    height = 1
    for cycle in range(1, n + 1):
        height = height * 2 if cycle % 2 else height + 1
    return height


def viral_advertising(n: int) -> int:
    """Cumulative likes after n days of the sharing campaign."""
    shared = 5
    cumulative = 0
    for _ in range(n):
        liked = shared // 2
        cumulative += liked
        shared = liked * 3
    return cumulative


def reverse_digits(num: int) -> int:
    """Reverse the decimal digits of num, keeping its sign."""
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def beautiful_days(i: int, j: int, k: int) -> int:
    """Count days in [i, j] whose difference from their reversal is divisible by k."""
    return sum(1 for day in range(i, j + 1) if abs(day - reverse_digits(day)) % k == 0)


def _ceil_sqrt(value: int) -> int:
    root = math.isqrt(value)
    return root if root * root == value else root + 1


def squares(a: int, b: int) -> int:
    """Count the perfect squares in the inclusive range [a, b]."""
    if a < 0 or b < 0:
        raise ValueError("square bounds must be non-negative")
    return math.isqrt(b) - _ceil_sqrt(a) + 1


def save_the_prisoner(n: int, m: int, s: int) -> int:
    """Seat of the prisoner who gets the last of m sweets, starting at seat s of n."""
    last = (s + m - 1) % n
    return last if last != 0 else n


def _line_reader(text: str) -> Callable[[], str]:
    lines = iter(text.splitlines())
    return lambda: next(lines, "")


def _ints(line: str) -> list[int]:
    return [int(field) for field in line.strip().split(" ")]


def _fields(line: str, count: int) -> list[int]:
    values = _ints(line)
    if len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return values[:count]


def _run_cases(text: str, solve: Callable[[str], object]) -> str:
    read = _line_reader(text)
    cases = int(read().strip())
    return "".join(f"{solve(read())}\n" for _ in range(cases))


def _solve_me_first_command(text: str) -> str:
    values = [int(token) for token in text.split()[:2]]
    values += [0] * (2 - len(values))
    return f"{solve_me_first(*values)}\n"


def _fizz_buzz_command(text: str) -> str:
    n = int(_line_reader(text)().strip())
    return "".join(f"{line}\n" for line in fizz_buzz(n))


def _single_int_command(solve: Callable[[int], int]) -> Callable[[str], str]:
    def command(text: str) -> str:
        return f"{solve(int(_line_reader(text)().strip()))}\n"

    return command


def _beautiful_days_command(text: str) -> str:
    i, j, k = _fields(_line_reader(text)(), 3)
    return f"{beautiful_days(i, j, k)}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "solve-me-first": _solve_me_first_command,
        "fizz-buzz": _fizz_buzz_command,
        "extra-long-factorials": _single_int_command(extra_long_factorial),
        "find-digits": lambda text: _run_cases(
            text, lambda line: find_digits(int(line.strip()))
        ),
        "utopian-tree": lambda text: _run_cases(
            text, lambda line: utopian_tree(int(line.strip()))
        ),
        "viral-advertising": _single_int_command(viral_advertising),
        "beautiful-days": _beautiful_days_command,
        "sherlock-and-squares": lambda text: _run_cases(
            text, lambda line: squares(*_fields(line, 2))
        ),
        "save-the-prisoner": lambda text: _run_cases(
            text, lambda line: save_the_prisoner(*_fields(line, 3))
        ),
    }