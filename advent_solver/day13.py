"""Day 13: the cheapest way to win claw machine prizes."""

from __future__ import annotations

import re
from dataclasses import dataclass

PART2_OFFSET = 10_000_000_000_000
_A_COST = 3
_B_COST = 1

_MACHINE = re.compile(
    r"Button A: X\+(\d+), Y\+(\d+)\s+"
    r"Button B: X\+(\d+), Y\+(\d+)\s+"
    r"Prize: X=(\d+), Y=(\d+)"
)


@dataclass(frozen=True)
class ClawMachine:
    a_x: int
    a_y: int
    b_x: int
    b_y: int
    prize_x: int
    prize_y: int


def parse_machines(text: str) -> list[ClawMachine]:
    """Read every machine description in the text."""
    return [
        ClawMachine(*(int(value) for value in match.groups()))
        for match in _MACHINE.finditer(text)
    ]


def min_tokens(machine: ClawMachine, offset: int = 0) -> int | None:
    """Tokens to reach the prize (moved by offset), or None if it cannot be reached exactly."""
    prize_x = machine.prize_x + offset
    prize_y = machine.prize_y + offset
    determinant = machine.a_x * machine.b_y - machine.a_y * machine.b_x
    if determinant == 0:
        return None
    a_presses, a_rest = divmod(prize_x * machine.b_y - prize_y * machine.b_x, determinant)
    b_presses, b_rest = divmod(machine.a_x * prize_y - machine.a_y * prize_x, determinant)
    if a_rest or b_rest:
        return None
    return a_presses * _A_COST + b_presses * _B_COST


def _total(text: str, offset: int) -> int:
    return sum(
        tokens
        for machine in parse_machines(text)
        if (tokens := min_tokens(machine, offset)) is not None
    )


def part1(text: str) -> int:
    return _total(text, 0)


def part2(text: str) -> int:
    return _total(text, PART2_OFFSET)