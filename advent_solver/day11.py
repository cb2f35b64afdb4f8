"""Day 11: counting stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

PART1_BLINKS = 25
PART2_BLINKS = 75


def _transform(value: int) -> tuple[int, ...]:
    """What a single stone engraved with value turns into after one blink."""
    if value == 0:
        return (1,)
    digits = str(value)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[half:]), int(digits[:half])
    return (value * 2024,)


def blink(counts: Mapping[int, int]) -> dict[int, int]:
    """Apply one blink to a mapping of stone value to number of such stones."""
    following: Counter[int] = Counter()
    for value, count in counts.items():
        for replacement in _transform(value):
            following[replacement] += count
    return dict(following)


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """Number of stones in the line after the given number of blinks."""
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")
    counts: dict[int, int] = dict(Counter(stones))
    for _ in range(blinks):
        counts = blink(counts)
    return sum(counts.values())


def _parse_stones(text: str) -> list[int]:
    """Leading whitespace-separated numbers; reading stops at the first other token."""
    stones: list[int] = []
    for token in text.split():
        if not token.isdigit():
            break
        stones.append(int(token))
    return stones


def part1(text: str) -> int:
    return count_stones(_parse_stones(text), PART1_BLINKS)


def part2(text: str) -> int:
    return count_stones(_parse_stones(text), PART2_BLINKS)