"""Day 19: arranging towel patterns into requested designs."""

from __future__ import annotations

from functools import lru_cache
from itertools import takewhile


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Patterns from the first line, designs from the third line on to a blank line."""
    lines = text.splitlines()
    if not lines or not lines[0]:
        raise ValueError("missing towel patterns")
    patterns = [pattern.strip() for pattern in lines[0].split(",")]
    patterns = [pattern for pattern in patterns if pattern]
    designs = list(takewhile(bool, lines[2:]))
    return patterns, designs


def is_possible(design: str, patterns: list[str]) -> bool:
    """Whether the design can be built by joining patterns end to end."""
    stack = [design]
    checked: set[str] = set()
    while stack:
        current = stack.pop()
        if current in checked:
            continue
        checked.add(current)
        for pattern in patterns:
            if not pattern or not current.startswith(pattern):
                continue
            if len(pattern) == len(current):
                return True
            stack.append(current[len(pattern):])
    return False


def count_arrangements(design: str, patterns: list[str]) -> int:
    """Number of distinct ways to build the design from patterns."""
    usable = [pattern for pattern in patterns if pattern]

    @lru_cache(maxsize=None)
    def ways(rest: str) -> int:
        total = 0
        for pattern in usable:
            if not rest.startswith(pattern):
                continue
            total += 1 if len(pattern) == len(rest) else ways(rest[len(pattern):])
        return total

    return ways(design)


def part1(text: str) -> int:
    patterns, designs = parse_towels(text)
    return sum(is_possible(design, patterns) for design in designs)


def part2(text: str) -> int:
    patterns, designs = parse_towels(text)
    return sum(count_arrangements(design, patterns) for design in designs)