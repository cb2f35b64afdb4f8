"""Day 12: pricing fences around garden plot regions."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import takewhile

Position = tuple[int, int]

_SIDES = ((-1, 0), (1, 0), (0, -1), (0, 1))

# For each side of a cell: the side, the cell along the edge, and the diagonal cell.
# A fence edge is counted once, at the cell where it begins.
_EDGE_STARTS = (
    ((-1, 0), (0, 1), (-1, 1)),
    ((1, 0), (0, -1), (1, -1)),
    ((0, -1), (-1, 0), (-1, -1)),
    ((0, 1), (1, 0), (1, 1)),
)


class _Garden:
    """A rectangular garden map.

    Neighbours are looked up within the square whose side is the width of the
    first row, so a map must be at least as tall as it is wide.
    """

    def __init__(self, grid: list[str]) -> None:
        if not grid:
            raise ValueError("empty garden map")
        self.grid = grid
        self.width = len(grid[0])
        self.height = len(grid)
        if self.height < self.width:
            raise ValueError("garden map is wider than it is tall")

    def same(self, plant: str, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.width and self.grid[y][x] == plant

    def regions(self) -> Iterator[tuple[str, set[Position]]]:
        visited: set[Position] = set()
        for y in range(self.height):
            for x in range(self.width):
                if (x, y) in visited:
                    continue
                plant = self.grid[y][x]
                region: set[Position] = set()
                stack = [(x, y)]
                while stack:
                    cx, cy = stack.pop()
                    if (cx, cy) in region:
                        continue
                    region.add((cx, cy))
                    stack.extend(
                        (cx + dx, cy + dy)
                        for dx, dy in _SIDES
                        if self.same(plant, cx + dx, cy + dy)
                    )
                visited |= region
                yield plant, region


def fence_price(grid: list[str]) -> int:
    """Sum over regions of area times perimeter."""
    garden = _Garden(grid)
    total = 0
    for plant, region in garden.regions():
        perimeter = sum(
            not garden.same(plant, x + dx, y + dy)
            for x, y in region
            for dx, dy in _SIDES
        )
        total += len(region) * perimeter
    return total


def discounted_fence_price(grid: list[str]) -> int:
    """Sum over regions of area times number of straight fence sides."""
    garden = _Garden(grid)
    total = 0
    for plant, region in garden.regions():
        sides = sum(
            not garden.same(plant, x + sx, y + sy)
            and (
                not garden.same(plant, x + ax, y + ay)
                or garden.same(plant, x + kx, y + ky)
            )
            for x, y in region
            for (sx, sy), (ax, ay), (kx, ky) in _EDGE_STARTS
        )
        total += len(region) * sides
    return total


def _read_grid(text: str) -> list[str]:
    return list(takewhile(bool, text.splitlines()))


def part1(text: str) -> int:
    return fence_price(_read_grid(text))


def part2(text: str) -> int:
    return discounted_fence_price(_read_grid(text))