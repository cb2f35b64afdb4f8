"""Day 3: recovering multiplications from corrupted memory."""

from __future__ import annotations

import re

_WORD_MASK = 0xFFFFFFFF
_NUMBER = r"[ \t\n\v\f\r]*([+-]?[0-9]+)"
_MUL = re.compile(r"mul\(" + _NUMBER + "," + _NUMBER + r"\)")
_INSTRUCTION = re.compile(
    r"(?P<mul>mul\(" + _NUMBER + "," + _NUMBER + r"\))"
    r"|(?P<do>do\(\))"
    r"|(?P<dont>don't\(\))"
)


def sum_multiplications(memory: str) -> int:
    """Sum the products of every well-formed mul(a,b), as a 32-bit word."""
    total = sum(int(a) * int(b) for a, b in _MUL.findall(memory))
    return total & _WORD_MASK


def sum_enabled_multiplications(memory: str) -> int:
    """Like sum_multiplications, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(memory):
        if match.group("do"):
            enabled = True
        elif match.group("dont"):
            enabled = False
        elif enabled:
            total += int(match.group(2)) * int(match.group(3))
    return total & _WORD_MASK


def part1(text: str) -> int:
    return sum_multiplications(text)


def part2(text: str) -> int:
    return sum_enabled_multiplications(text)