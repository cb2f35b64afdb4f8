"""Day 20: counting shortcuts through the walls of a race track."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from itertools import takewhile

Position = tuple[int, int]

MIN_SAVING = 100
PART1_CHEAT = 2
PART2_CHEAT = 20


def _check_grid(grid: list[str]) -> tuple[int, int]:
    """Width and height of the track.

    Cheat targets are looked up within the square whose side is the width of
    the first row, so a track must be at least as tall as it is wide.
    """
    if not grid:
        raise ValueError("empty race track")
    width, height = len(grid[0]), len(grid)
    if height < width:
        raise ValueError("race track is wider than it is tall")
    return width, height


def _find(grid: list[str], tile: str) -> Position:
    for y, row in enumerate(grid):
        x = row.find(tile)
        if x >= 0:
            return x, y
    raise ValueError(f"no {tile!r} on the race track")


def race_distances(grid: list[str]) -> dict[Position, int]:
    """Steps from the start to each open cell, explored breadth first up to the end."""
    width, height = _check_grid(grid)
    start = _find(grid, "S")
    distances: dict[Position, int] = {}
    queue = deque([(start, 0)])
    while queue:
        position, distance = queue.popleft()
        if position in distances:
            continue
        distances[position] = distance
        x, y = position
        if grid[y][x] == "E":
            break
        for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if (nx, ny) in distances or grid[ny][nx] == "#":
                continue
            queue.append(((nx, ny), distance + 1))
    return distances


def _ring(x: int, y: int, length: int) -> Iterator[Position]:
    """Every point at exactly the given Manhattan distance from (x, y)."""
    for dx in range(-length, length + 1):
        dy = length - abs(dx)
        yield x + dx, y + dy
        if dy:
            yield x + dx, y - dy


def count_cheats(grid: list[str], max_cheat: int, min_saving: int) -> int:
    """Number of cheats of 2 to max_cheat steps that save at least min_saving steps."""
    width, _ = _check_grid(grid)
    distances = race_distances(grid)
    count = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == "#":
                continue
            current = distances.get((x, y), 0)
            for length in range(2, max_cheat + 1):
                needed = current + min_saving + length
                for tx, ty in _ring(x, y, length):
                    if not (0 <= tx < width and 0 <= ty < width):
                        continue
                    if grid[ty][tx] == "#":
                        continue
                    if distances.get((tx, ty), 0) >= needed:
                        count += 1
    return count


def _read_grid(text: str) -> list[str]:
    return list(takewhile(bool, text.splitlines()))


def part1(text: str) -> int:
    return count_cheats(_read_grid(text), PART1_CHEAT, MIN_SAVING)


def part2(text: str) -> int:
    return count_cheats(_read_grid(text), PART2_CHEAT, MIN_SAVING)