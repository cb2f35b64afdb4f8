"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations

from itertools import pairwise


def parse_reports(text: str) -> list[list[int]]:
    """One report per non-blank line, levels separated by whitespace."""
    return [[int(level) for level in line.split()] for line in text.splitlines() if line.strip()]


def _differences(report: list[int]) -> list[int]:
    return [current - previous for previous, current in pairwise(report)]


def _acceptable(diff: int, increasing: bool) -> bool:
    return 1 <= abs(diff) <= 3 and (diff > 0) == increasing


def is_safe(report: list[int]) -> bool:
    """Levels all rise or all fall, each step by 1 to 3."""
    diffs = _differences(report)
    if not diffs:
        return True
    increasing = diffs[0] > 0
    return all(_acceptable(diff, increasing) for diff in diffs)


def is_safe_dampened(report: list[int]) -> bool:
    """Safe once a single bad level may be tolerated.

    The direction is taken from the majority of the steps; a bad step is
    forgiven once if merging it with a neighbouring step gives a good one,
    or if it is the first or last step.
    """
    diffs = _differences(report)
    count = len(diffs)
    rising = sum(diff > 0 for diff in diffs)
    increasing = rising > count - rising

    dampened = False
    i = 0
    while i < count:
        current = diffs[i]
        if _acceptable(current, increasing):
            i += 1
            continue
        if dampened:
            return False
        if i == count - 1:
            dampened = True
            i += 1
            continue
        if _acceptable(current + diffs[i + 1], increasing):
            dampened = True
            i += 2
            continue
        if i == 0 or _acceptable(current + diffs[i - 1], increasing):
            dampened = True
            i += 1
            continue
        return False
    return True


def part1(text: str) -> int:
    return sum(is_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    return sum(is_safe_dampened(report) for report in parse_reports(text))