"""Command-line entry point that runs a named puzzle on standard input."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from pathlib import Path

from . import counting, grids, numbers, positions, sequences, shopping, strings, timekeeping

_MODULES = (
    numbers,
    timekeeping,
    positions,
    strings,
    counting,
    sequences,
    grids,
    shopping,
)


def _registry() -> dict[str, Callable[[str], str]]:
    handlers: dict[str, Callable[[str], str]] = {}
    for module in _MODULES:
        handlers.update(module.commands())
    return handlers


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output text."""
    handlers = _registry()
    try:
        handler = handlers[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return handler(text)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and write its answer."""
    parser = argparse.ArgumentParser(
        prog="puzzlesolvers",
        description="Solve a programming puzzle read from standard input.",
    )
    parser.add_argument("problem", choices=sorted(_registry()))
    parser.add_argument(
        "-o",
        "--output",
        default=os.environ.get("OUTPUT_PATH") or None,
        help="file to write the answer to (default: OUTPUT_PATH or standard output)",
    )
    args = parser.parse_args(argv)

    text = sys.stdin.read()
    try:
        output = run(args.problem, text)
    except (ValueError, ZeroDivisionError, IndexError) as exc:
        print(f"{args.problem}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(output)
    else:
        sys.stdout.write(output)
    return 0