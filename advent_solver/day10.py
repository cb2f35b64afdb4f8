"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator
from functools import cache
from itertools import takewhile

Position = tuple[int, int]


def _uphill(grid: list[str], x: int, y: int) -> Iterator[Position]:
    """Neighbours exactly one step higher, in left, right, up, down order."""
    width, height = len(grid[0]), len(grid)
    target = chr(ord(grid[y][x]) + 1)
    for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
        if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == target:
            yield nx, ny


def trailhead_score(grid: list[str], start: Position) -> int:
    """Number of distinct height-9 cells reachable from start."""
    stack = [start]
    seen: set[Position] = set()
    score = 0
    while stack:
        position = stack.pop()
        if position in seen:
            continue
        seen.add(position)
        x, y = position
        if grid[y][x] == "9":
            score += 1
            continue
        stack.extend(_uphill(grid, x, y))
    return score


def trailhead_rating(grid: list[str], start: Position) -> int:
    """Number of distinct uphill paths from start to any height-9 cell."""

    @cache
    def paths(position: Position) -> int:
        x, y = position
        if grid[y][x] == "9":
            return 1
        return sum(paths(following) for following in _uphill(grid, x, y))

    return paths(start)


def _trailheads(grid: list[str]) -> Iterator[Position]:
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "0":
                yield x, y


def _read_grid(text: str) -> list[str]:
    return list(takewhile(bool, text.splitlines()))


def part1(text: str) -> int:
    grid = _read_grid(text)
    return sum(trailhead_score(grid, start) for start in _trailheads(grid))


def part2(text: str) -> int:
    grid = _read_grid(text)
    return sum(trailhead_rating(grid, start) for start in _trailheads(grid))