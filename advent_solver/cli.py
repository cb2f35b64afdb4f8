"""Command line entry point: solve one part of one day from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from types import ModuleType

from advent_solver import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day18,
    day19,
    day20,
)

_DAYS: dict[int, ModuleType] = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
    12: day12,
    13: day13,
    14: day14,
    15: day15,
    18: day18,
    19: day19,
    20: day20,
}


def _solver(day: int, part: int) -> Callable[[str], object]:
    module = _DAYS.get(day)
    if module is None:
        available = ", ".join(str(known) for known in _DAYS)
        raise ValueError(f"no solution for day {day}; available days: {available}")
    if part == 1:
        return module.part1
    if part == 2:
        return module.part2
    raise ValueError(f"part must be 1 or 2, not {part}")


def solve(day: int, part: int, text: str) -> object:
    """Answer for the given day and part from the puzzle input text."""
    return _solver(day, part)(text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent-solver",
        description="Solve one part of one puzzle day from an input file.",
    )
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, help="puzzle part, 1 or 2")
    parser.add_argument("input", help="path of the puzzle input, or - for standard input")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        solver = _solver(args.day, args.part)
        text = _read_input(args.input)
        answer = solver(text)
    except (OSError, ValueError) as error:
        print(f"advent-solver: {error}", file=sys.stderr)
        return 1
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())