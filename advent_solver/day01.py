"""Day 1: comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split two whitespace-separated columns of integers into two lists."""
    left: list[int] = []
    right: list[int] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"line {line_no}: expected two numbers, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def _check_lengths(left: list[int], right: list[int]) -> None:
    if len(left) != len(right):
        raise ValueError(
            f"lists differ in length: {len(left)} and {len(right)}"
        )


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of differences between the lists' values paired in sorted order."""
    _check_lengths(left, right)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Sum of each left value times how often it appears on the right.

    Left values equal to the largest right value never get counted: the
    sorted merge that produces the score stops once the right list runs out.
    """
    _check_lengths(left, right)
    if not right:
        return 0
    largest = max(right)
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left if value < largest)


def part1(text: str) -> int:
    return total_distance(*parse_lists(text))


def part2(text: str) -> int:
    return similarity_score(*parse_lists(text))