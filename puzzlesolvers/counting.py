"""Puzzles that count, tally or pick items out of a list of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from itertools import combinations

from .numbers import _fields, _line_reader


def birthday_cake_candles(candles: Sequence[int]) -> int:
    """Count how many candles share the greatest height.

    Heights below zero are never counted, since the tallest height starts at zero.
    """
    tallest = 0
    count = 0
    for height in candles:
        if height > tallest:
            tallest, count = height, 1
        elif height == tallest:
            count += 1
    return count


def migratory_birds(arr: Sequence[int]) -> int:
    """Most frequently sighted bird type, the smallest type on a tie; 0 if none."""
    frequency = Counter(arr)
    if not frequency:
        return 0
    best = max(frequency.values())
    return min(bird for bird, seen in frequency.items() if seen == best)


def sock_merchant(ar: Sequence[int]) -> int:
    """Number of matching pairs of socks by colour."""
    return sum(count // 2 for count in Counter(ar).values())


def equalize_array(arr: Sequence[int]) -> int:
    """Fewest deletions that leave every remaining element equal."""
    frequency = Counter(arr)
    return len(arr) - max(frequency.values(), default=0)


def picking_numbers(a: Sequence[int]) -> int:
    """Longest subset in which any two elements differ by at most one."""
    frequency = Counter(a)
    return max(
        (
            count + max(frequency[num - 1], frequency[num + 1])
            for num, count in frequency.items()
        ),
        default=0,
    )


def divisible_sum_pairs(k: int, ar: Sequence[int]) -> int:
    """Count pairs i < j whose sum is divisible by k."""
    if k == 0:
        raise ZeroDivisionError("k must not be zero")
    return sum(1 for x, y in combinations(ar, 2) if (x + y) % k == 0)


def birthday(s: Sequence[int], d: int, m: int) -> int:
    """Count contiguous segments of length m whose squares sum to d."""
    if m < 0:
        raise ValueError("segment length must not be negative")
    return sum(1 for start in range(len(s) - m + 1) if sum(s[start : start + m]) == d)


def angry_professor(k: int, a: Sequence[int]) -> str:
    """Say whether the class is cancelled: "YES" if fewer than k arrive on time."""
    on_time = sum(1 for arrival in a if arrival <= 0)
    return "NO" if on_time >= k else "YES"


def hurdle_race(k: int, height: Sequence[int]) -> int:
    """Doses of potion needed to clear every hurdle with a natural jump of k."""
    return max(max(height, default=0) - k, 0)


def _items(line: str, count: int) -> list[int]:
    if count <= 0:
        return []
    return _fields(line, count)


def _counted_list(read: Callable[[], str]) -> list[int]:
    count = int(read().strip())
    return _items(read(), count)


def _list_command(solve: Callable[[list[int]], object]) -> Callable[[str], str]:
    def command(text: str) -> str:
        return f"{solve(_counted_list(_line_reader(text)))}\n"

    return command


def _divisible_sum_pairs_command(text: str) -> str:
    read = _line_reader(text)
    n, k = _fields(read(), 2)
    return f"{divisible_sum_pairs(k, _items(read(), n))}\n"


def _subarray_division_command(text: str) -> str:
    read = _line_reader(text)
    squares = _counted_list(read)
    d, m = _fields(read(), 2)
    return f"{birthday(squares, d, m)}\n"


def _angry_professor_command(text: str) -> str:
    read = _line_reader(text)
    cases = int(read().strip())
    lines = []
    for _ in range(cases):
        n, k = _fields(read(), 2)
        lines.append(f"{angry_professor(k, _items(read(), n))}\n")
    return "".join(lines)


def _hurdle_race_command(text: str) -> str:
    read = _line_reader(text)
    n, k = _fields(read(), 2)
    return f"{hurdle_race(k, _items(read(), n))}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "birthday-cake-candles": _list_command(birthday_cake_candles),
        "migratory-birds": _list_command(migratory_birds),
        "sales-by-match": _list_command(sock_merchant),
        "equalize-the-array": _list_command(equalize_array),
        "picking-numbers": _list_command(picking_numbers),
        "divisible-sum-pairs": _divisible_sum_pairs_command,
        "subarray-division": _subarray_division_command,
        "angry-professor": _angry_professor_command,
        "the-hurdle-race": _hurdle_race_command,
    }