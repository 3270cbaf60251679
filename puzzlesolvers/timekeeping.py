"""Puzzles about calendars, clock times and due dates."""

from __future__ import annotations

from collections.abc import Callable


def day_of_programmer(year: int) -> str:
    """Date of the 256th day of the year in the Russian calendar, as dd.mm.yyyy."""
    if year < 1918:
        day = 12 if year % 4 == 0 else 13
    elif year == 1918:
        day = 26
    else:
        leap = year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)
        day = 12 if leap else 13
    return f"{day:02d}.09.{year}"


def time_conversion(s: str) -> str:
    """Convert a 12-hour time such as 07:05:45PM to 24-hour form."""
    if len(s) < 10:
        raise ValueError(f"malformed 12-hour time: {s!r}")
    hour, minute, second = int(s[:2]), int(s[3:5]), int(s[6:8])
    meridiem = s[8:10]
    if meridiem == "AM" and hour == 12:
        hour = 0
    elif meridiem == "PM" and hour != 12:
        hour += 12
    return f"{hour:02d}:{minute:02d}:{second:02d}"


def library_fine(d1: int, m1: int, y1: int, d2: int, m2: int, y2: int) -> int:
    """Fine for a book returned on d1/m1/y1 that was due on d2/m2/y2."""
    if (y1, m1, d1) <= (y2, m2, d2):
        return 0
    if y1 > y2:
        return 10000
    if m1 > m2:
        return (m1 - m2) * 500
    return (d1 - d2) * 15


def _line_reader(text: str) -> Callable[[], str]:
    lines = iter(text.splitlines())
    return lambda: next(lines, "")


def _fields(line: str, count: int) -> list[int]:
    values = [int(field) for field in line.strip().split(" ")]
    if len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return values[:count]


def _day_of_programmer_command(text: str) -> str:
    return f"{day_of_programmer(int(_line_reader(text)().strip()))}\n"


def _time_conversion_command(text: str) -> str:
    return f"{time_conversion(_line_reader(text)())}\n"


def _library_fine_command(text: str) -> str:
    read = _line_reader(text)
    returned = _fields(read(), 3)
    due = _fields(read(), 3)
    return f"{library_fine(*returned, *due)}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "day-of-the-programmer": _day_of_programmer_command,
        "time-conversion": _time_conversion_command,
        "library-fine": _library_fine_command,
    }