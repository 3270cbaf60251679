"""Puzzles that walk through or transform sequences of integers."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .counting import _counted_list, _items
from .numbers import _fields, _line_reader


def breaking_records(scores: Sequence[int]) -> list[int]:
    """Times the season's best and worst scores were broken, best first."""
    if not scores:
        raise ValueError("at least one score is needed")
    lowest = highest = scores[0]
    best_breaks = worst_breaks = 0
    for score in scores:
        if score < lowest:
            lowest = score
            worst_breaks += 1
        elif score > highest:
            highest = score
            best_breaks += 1
    return [best_breaks, worst_breaks]


def count_apples_and_oranges(
    s: int,
    t: int,
    a: int,
    b: int,
    apples: Sequence[int],
    oranges: Sequence[int],
) -> tuple[int, int]:
    """Count the apples and oranges that land on the house spanning [s, t].

    Apples fall from the tree at a, oranges from the tree at b; each distance
    is added to its tree's position.
    """
    apple_count = sum(1 for distance in apples if s <= a + distance <= t)
    orange_count = sum(1 for distance in oranges if s <= b + distance <= t)
    return apple_count, orange_count


def cut_the_sticks(arr: Sequence[int]) -> list[int]:
    """Number of sticks left before each cut by the length of the shortest."""
    sticks = list(arr)
    counts = []
    while sticks:
        counts.append(len(sticks))
        shortest = min(sticks)
        sticks = [length - shortest for length in sticks if length - shortest > 0]
    return counts


def circular_array_rotation(
    a: Sequence[int], k: int, queries: Sequence[int]
) -> list[int]:
    """Values at the queried indices after rotating a right k times."""
    n = len(a)
    if n == 0:
        raise ZeroDivisionError("cannot rotate an empty array")
    shift = k % n
    rotated = [a[(i - shift) % n] for i in range(n)]
    answers = []
    for query in queries:
        if not 0 <= query < n:
            raise IndexError(f"query index {query} out of range")
        answers.append(rotated[query])
    return answers


def climbing_leaderboard(ranked: Sequence[int], player: Sequence[int]) -> list[int]:
    """Dense rank of the player after each game.

    ranked is in descending order and player's scores in ascending order.
    """
    unique: list[int] = []
    for score in ranked:
        if not unique or score != unique[-1]:
            unique.append(score)
    position = len(unique) - 1
    ranks = []
    for score in player:
        while position >= 0 and score >= unique[position]:
            position -= 1
        ranks.append(position + 2)
    return ranks


def permutation_equation(p: Sequence[int]) -> list[int]:
    """For each x in 1..n, the y with p(p(y)) == x; 0 where there is none."""
    position = {value: index for index, value in enumerate(p, start=1)}
    return [position.get(position.get(x, 0), 0) for x in range(1, len(p) + 1)]


def grading_students(grades: Sequence[int]) -> list[int]:
    """Round passing grades up to the next multiple of 5 when it is under 3 away."""
    rounded = []
    for grade in grades:
        if grade >= 38:
            next_multiple = (grade // 5 + 1) * 5
            if next_multiple - grade < 3:
                grade = next_multiple
        rounded.append(grade)
    return rounded


def _lines(values: Sequence[object], separator: str = "\n") -> str:
    return separator.join(str(value) for value in values) + "\n"


def _breaking_records_command(text: str) -> str:
    return _lines(breaking_records(_counted_list(_line_reader(text))), " ")


def _apple_and_orange_command(text: str) -> str:
    read = _line_reader(text)
    s, t = _fields(read(), 2)
    a, b = _fields(read(), 2)
    m, n = _fields(read(), 2)
    apples = _items(read(), m)
    oranges = _items(read(), n)
    return _lines(count_apples_and_oranges(s, t, a, b, apples, oranges))


def _cut_the_sticks_command(text: str) -> str:
    return _lines(cut_the_sticks(_counted_list(_line_reader(text))))


def _circular_array_rotation_command(text: str) -> str:
    read = _line_reader(text)
    n, k, q = _fields(read(), 3)
    a = _items(read(), n)
    queries = [int(read().strip()) for _ in range(q)]
    return _lines(circular_array_rotation(a, k, queries))


def _climbing_leaderboard_command(text: str) -> str:
    read = _line_reader(text)
    ranked = _counted_list(read)
    player = _counted_list(read)
    return _lines(climbing_leaderboard(ranked, player))


def _sequence_equation_command(text: str) -> str:
    return _lines(permutation_equation(_counted_list(_line_reader(text))))


def _grading_students_command(text: str) -> str:
    read = _line_reader(text)
    count = int(read().strip())
    grades = [int(read().strip()) for _ in range(count)]
    return _lines(grading_students(grades))


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "breaking-the-records": _breaking_records_command,
        "apple-and-orange": _apple_and_orange_command,
        "cut-the-sticks": _cut_the_sticks_command,
        "circular-array-rotation": _circular_array_rotation_command,
        "climbing-the-leaderboard": _climbing_leaderboard_command,
        "sequence-equation": _sequence_equation_command,
        "grading-students": _grading_students_command,
    }