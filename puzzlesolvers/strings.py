"""Puzzles about strings, words and bit strings."""

from __future__ import annotations

import math
from collections.abc import Callable
from itertools import combinations

from .numbers import _fields, _line_reader, _run_cases


def append_and_delete(s: str, t: str, k: int) -> str:
    """Say whether s can become t in exactly k appends or deletes at the end."""
    common = 0
    for a, b in zip(s, t):
        if a != b:
            break
        common += 1
    total_ops = len(s) + len(t) - 2 * common
    if total_ops > k:
        return "No"
    if (k - total_ops) % 2 == 0 or k >= len(s) + len(t):
        return "Yes"
    return "No"


def bigger_is_greater(w: str) -> str:
    """Smallest rearrangement of w that is greater than w, or "no answer"."""
    chars = list(w)
    i = len(chars) - 2
    while i >= 0 and chars[i] >= chars[i + 1]:
        i -= 1
    if i < 0:
        return "no answer"
    j = len(chars) - 1
    while chars[j] <= chars[i]:
        j -= 1
    chars[i], chars[j] = chars[j], chars[i]
    chars[i + 1 :] = reversed(chars[i + 1 :])
    return "".join(chars)


def encryption(s: str) -> str:
    """Write s without spaces into a grid row by row and read it back by columns.

    Each column is followed by a single space.
    """
    text = s.replace(" ", "")
    root = math.isqrt(len(text))
    cols = root if root * root == len(text) else root + 1
    return "".join(f"{text[c::cols]} " for c in range(cols))


def designer_pdf_viewer(h: list[int], word: str) -> int:
    """Area of the highlight over word, given the height of each letter a..z."""
    tallest = 0
    for ch in word:
        index = ord(ch) - ord("a")
        if not 0 <= index < len(h):
            raise ValueError(f"no height given for character {ch!r}")
        tallest = max(tallest, h[index])
    return tallest * len(word)


def repeated_string(s: str, n: int) -> int:
    """Count the letter a in the first n characters of s repeated forever."""
    if not s:
        raise ValueError("cannot repeat an empty string")
    whole, rest = divmod(n, len(s))
    return s.count("a") * whole + s[:rest].count("a")


def counting_valleys(path: str) -> int:
    """Count the valleys walked along a path of U and D steps from sea level."""
    altitude = 0
    valleys = 0
    in_valley = False
    for step in path:
        if step == "U":
            altitude += 1
        elif step == "D":
            altitude -= 1
        if altitude < 0:
            in_valley = True
        elif in_valley:
            in_valley = False
            valleys += 1
    return valleys


def acm_team(topic: list[str]) -> list[int]:
    """Most topics a two-person team knows, and how many teams know that many."""
    best = 0
    teams = 0
    for first, second in combinations(topic, 2):
        known = sum(1 for a, b in zip(first, second) if a == "1" or b == "1")
        if known > best:
            best, teams = known, 1
        elif known == best:
            teams += 1
    return [best, teams]


def _append_and_delete_command(text: str) -> str:
    read = _line_reader(text)
    s = read()
    t = read()
    k = int(read().strip())
    return f"{append_and_delete(s, t, k)}\n"


def _encryption_command(text: str) -> str:
    return f"{encryption(_line_reader(text)())}\n"


def _designer_pdf_viewer_command(text: str) -> str:
    read = _line_reader(text)
    heights = _fields(read(), 26)
    word = read()
    return f"{designer_pdf_viewer(heights, word)}\n"


def _repeated_string_command(text: str) -> str:
    read = _line_reader(text)
    s = read()
    n = int(read().strip())
    return f"{repeated_string(s, n)}\n"


def _counting_valleys_command(text: str) -> str:
    read = _line_reader(text)
    int(read().strip())
    return f"{counting_valleys(read())}\n"


def _acm_team_command(text: str) -> str:
    read = _line_reader(text)
    (count,) = _fields(read(), 1)
    topics = [read() for _ in range(count)]
    return "".join(f"{value}\n" for value in acm_team(topics))


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "append-and-delete": _append_and_delete_command,
        "bigger-is-greater": lambda text: _run_cases(text, bigger_is_greater),
        "encryption": _encryption_command,
        "designer-pdf-viewer": _designer_pdf_viewer_command,
        "repeated-string": _repeated_string_command,
        "counting-valleys": _counting_valleys_command,
        "acm-icpc-team": _acm_team_command,
    }