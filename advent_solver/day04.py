"""Day 4: word search for XMAS and X-shaped MAS."""

from __future__ import annotations

from itertools import takewhile

_WORD = "XMAS"
_DIRECTIONS = ((-1, 0), (-1, -1), (0, -1), (1, -1), (1, 0), (1, 1), (0, 1), (-1, 1))


def _read_grid(text: str) -> list[str]:
    """Rows up to the first blank line."""
    return list(takewhile(bool, text.splitlines()))


def count_xmas(grid: list[str]) -> int:
    """Count XMAS in all eight directions, overlaps included."""
    if not grid:
        return 0
    width, height = len(grid[0]), len(grid)

    def spelled(x: int, y: int, dx: int, dy: int) -> bool:
        return all(
            0 <= x + dx * step < width
            and 0 <= y + dy * step < height
            and grid[y + dy * step][x + dx * step] == letter
            for step, letter in enumerate(_WORD)
        )

    return sum(
        spelled(x, y, dx, dy)
        for y in range(height)
        for x in range(width)
        if grid[y][x] == _WORD[0]
        for dx, dy in _DIRECTIONS
    )


def _is_mas(first: str, second: str) -> bool:
    return {first, second} == {"M", "S"}


def count_x_mas(grid: list[str]) -> int:
    """Count A cells whose both diagonals read MAS in either direction."""
    if not grid:
        return 0
    width, height = len(grid[0]), len(grid)
    return sum(
        grid[y][x] == "A"
        and _is_mas(grid[y - 1][x - 1], grid[y + 1][x + 1])
        and _is_mas(grid[y - 1][x + 1], grid[y + 1][x - 1])
        for y in range(1, height - 1)
        for x in range(1, width - 1)
    )


def part1(text: str) -> int:
    return count_xmas(_read_grid(text))


def part2(text: str) -> int:
    return count_x_mas(_read_grid(text))