"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

from itertools import accumulate, takewhile
from operator import add, mul
from typing import Callable

Equation = tuple[int, list[int]]


def parse_equations(text: str) -> list[Equation]:
    """Read lines of the form 'target: v1 v2 ...' up to the first blank line."""
    equations: list[Equation] = []
    for line in takewhile(bool, text.splitlines()):
        head, separator, rest = line.partition(":")
        if not separator:
            raise ValueError(f"not an equation: {line!r}")
        equations.append((int(head), [int(value) for value in rest.split()]))
    return equations


def _concat(left: int, right: int) -> int:
    return left * 10 ** len(str(right)) + right


def can_produce(values: list[int], target: int, concatenate: bool = False) -> bool:
    """Whether +, * (and optionally ||), applied left to right, reach target."""
    if not values:
        raise ValueError("an equation needs at least one value")
    operators: list[Callable[[int, int], int]] = [add, mul]
    if concatenate:
        operators.append(_concat)
    # zero_from[i]: a zero among values[i:] could still shrink an overshooting total
    zero_from = list(
        accumulate(reversed(values), lambda found, value: found or value == 0, initial=False)
    )[::-1]

    stack = [(1, values[0])]
    while stack:
        index, total = stack.pop()
        if index == len(values):
            if total == target:
                return True
            continue
        if total > target and not zero_from[index]:
            continue
        following = values[index]
        stack.extend((index + 1, operator(total, following)) for operator in operators)
    return False


def _calibration(text: str, concatenate: bool) -> int:
    return sum(
        target
        for target, values in parse_equations(text)
        if can_produce(values, target, concatenate)
    )


def part1(text: str) -> int:
    return _calibration(text, concatenate=False)


def part2(text: str) -> int:
    return _calibration(text, concatenate=True)