"""Day 5: page ordering rules for safety manual updates."""

from __future__ import annotations

from functools import cmp_to_key
from itertools import takewhile

Rule = tuple[int, int]


def _parse_rule(line: str) -> Rule:
    first, separator, last = line.partition("|")
    if not separator:
        raise ValueError(f"not an ordering rule: {line!r}")
    return int(first), int(last)


def parse_manual(text: str) -> tuple[list[Rule], list[list[int]]]:
    """Read rules up to the first blank line, then updates up to the next."""
    lines = iter(text.splitlines())
    rules = [_parse_rule(line) for line in takewhile(bool, lines)]
    updates = [
        [int(page) for page in line.split(",")] for line in takewhile(bool, lines)
    ]
    return rules, updates


def _ordering(rules: list[Rule]) -> dict[Rule, int]:
    """Map a page pair to -1 (in order) or 1 (reversed); the first rule wins."""
    order: dict[Rule, int] = {}
    for first, last in rules:
        order.setdefault((first, last), -1)
        order.setdefault((last, first), 1)
    return order


def is_correct_order(pages: list[int], rules: list[Rule]) -> bool:
    """Check an update against the rules.

    For each page, later pages are examined until one is confirmed to be in
    order by a rule; only a rule that reverses a pair examined before that
    point makes the update incorrect.
    """
    order = _ordering(rules)
    for index, first in enumerate(pages):
        for second in pages[index + 1:]:
            verdict = order.get((first, second), 0)
            if verdict < 0:
                break
            if verdict > 0:
                return False
    return True


def sort_pages(pages: list[int], rules: list[Rule]) -> list[int]:
    """Return the pages reordered according to the rules."""
    order = _ordering(rules)
    return sorted(pages, key=cmp_to_key(lambda a, b: order.get((a, b), 0)))


def _middle(pages: list[int]) -> int:
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    rules, updates = parse_manual(text)
    return sum(_middle(pages) for pages in updates if is_correct_order(pages, rules))


def part2(text: str) -> int:
    rules, updates = parse_manual(text)
    return sum(
        _middle(sort_pages(pages, rules))
        for pages in updates
        if not is_correct_order(pages, rules)
    )