"""Puzzles about splitting bills, budgets and filling orders."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .counting import _items
from .numbers import _fields, _line_reader


def _halve_toward_zero(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def bon_appetit(bill: Sequence[int], k: int, b: int) -> str:
    """Check Anna's charge: "Bon Appetit" if fair, else the refund she is owed.

    Item k is the one Anna did not eat; b is what she was charged.
    """
    shared = sum(cost for index, cost in enumerate(bill) if index != k)
    fair_share = _halve_toward_zero(shared)
    if fair_share == b:
        return "Bon Appetit"
    return str(b - fair_share)


def get_money_spent(keyboards: Sequence[int], drives: Sequence[int], b: int) -> int:
    """Most that can be spent on one keyboard and one drive within b, or -1."""
    return max(
        (
            keyboard + drive
            for keyboard in keyboards
            for drive in drives
            if keyboard + drive <= b
        ),
        default=-1,
    )


def get_min_cost(crew_id: Sequence[int], job_id: Sequence[int]) -> int:
    """Least total distance when every crew is matched to a job."""
    if len(job_id) < len(crew_id):
        raise ValueError("there must be at least as many jobs as crews")
    crews = sorted(crew_id)
    jobs = sorted(job_id)
    return sum(abs(crew - job) for crew, job in zip(crews, jobs))


def filled_orders(order: Sequence[int], k: int) -> int:
    """Most orders that can be filled, smallest first, with k widgets."""
    filled = 0
    spent = 0
    for amount in sorted(order):
        if spent + amount > k:
            break
        spent += amount
        filled += 1
    return filled


def _int_line(read: Callable[[], str]) -> int:
    return int(read().strip())


def _one_per_line(read: Callable[[], str]) -> list[int]:
    count = _int_line(read)
    return [_int_line(read) for _ in range(count)]


def _bill_division_command(text: str) -> str:
    read = _line_reader(text)
    n, k = _fields(read(), 2)
    bill = _items(read(), n)
    b = _int_line(read)
    return f"{bon_appetit(bill, k, b)}\n"


def _electronic_shop_command(text: str) -> str:
    read = _line_reader(text)
    b, n, m = _fields(read(), 3)
    keyboards = _items(read(), n)
    drives = _items(read(), m)
    return f"{get_money_spent(keyboards, drives, b)}\n"


def _road_repair_command(text: str) -> str:
    read = _line_reader(text)
    crews = _one_per_line(read)
    jobs = _one_per_line(read)
    return f"{get_min_cost(crews, jobs)}\n"


def _unexpected_demand_command(text: str) -> str:
    read = _line_reader(text)
    orders = _one_per_line(read)
    k = _int_line(read)
    return f"{filled_orders(orders, k)}\n"


def commands() -> dict[str, Callable[[str], str]]:
    """Map problem names to handlers that turn input text into output text."""
    return {
        "bill-division": _bill_division_command,
        "electronic-shop": _electronic_shop_command,
        "road-repair": _road_repair_command,
        "unexpected-demand": _unexpected_demand_command,
    }