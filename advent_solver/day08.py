"""Day 8: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from itertools import combinations, takewhile
from math import gcd

Position = tuple[int, int]


def _antennas(grid: list[str]) -> dict[str, list[Position]]:
    """Group antenna positions by frequency character."""
    groups: dict[str, list[Position]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == ".":
                continue
            if not (cell.isascii() and cell.isalnum()):
                raise ValueError(f"unknown antenna frequency {cell!r} at ({x}, {y})")
            groups[cell].append((x, y))
    return groups


def _bounds(grid: list[str]) -> tuple[int, int]:
    return len(grid[-1]), len(grid)


def _pair_antinodes(a: Position, b: Position) -> Iterator[Position]:
    """Points one third of the way in from each end, and one step beyond each end."""
    (ax, ay), (bx, by) = a, b
    for sx, sy in ((2 * ax + bx, 2 * ay + by), (ax + 2 * bx, ay + 2 * by)):
        if sx % 3 == 0 and sy % 3 == 0:
            yield sx // 3, sy // 3
    dx, dy = bx - ax, by - ay
    yield ax - dx, ay - dy
    yield bx + dx, by + dy


def _line_points(
    a: Position, b: Position, width: int, height: int
) -> Iterator[Position]:
    """Every in-bounds lattice point on the line through a and b."""
    (ax, ay), (bx, by) = a, b
    dx, dy = bx - ax, by - ay
    divisor = gcd(dx, dy)
    dx, dy = dx // divisor, dy // divisor
    for step_x, step_y in ((-dx, -dy), (dx, dy)):
        x, y = (ax, ay) if step_x == -dx and step_y == -dy else (ax + dx, ay + dy)
        while 0 <= x < width and 0 <= y < height:
            yield x, y
            x, y = x + step_x, y + step_y


def count_antinodes(grid: list[str]) -> int:
    """Number of distinct in-bounds antinode positions."""
    if not grid:
        return 0
    width, height = _bounds(grid)
    found = {
        (x, y)
        for positions in _antennas(grid).values()
        for a, b in combinations(positions, 2)
        for x, y in _pair_antinodes(a, b)
        if 0 <= x < width and 0 <= y < height
    }
    return len(found)


def count_harmonic_antinodes(grid: list[str]) -> int:
    """Number of distinct in-bounds positions in line with any same-frequency pair."""
    if not grid:
        return 0
    width, height = _bounds(grid)
    found = {
        point
        for positions in _antennas(grid).values()
        for a, b in combinations(positions, 2)
        for point in _line_points(a, b, width, height)
    }
    return len(found)


def _read_grid(text: str) -> list[str]:
    return list(takewhile(bool, text.splitlines()))


def part1(text: str) -> int:
    return count_antinodes(_read_grid(text))


def part2(text: str) -> int:
    return count_harmonic_antinodes(_read_grid(text))