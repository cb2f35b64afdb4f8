"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from collections import deque
from itertools import takewhile

Position = tuple[int, int]

_DIRECTIONS: dict[str, Position] = {
    "<": (-1, 0),
    ">": (1, 0),
    "^": (0, -1),
    "v": (0, 1),
}

_WIDE_TILES = {
    "#": "##",
    "O": "[]",
    ".": "..",
    "@": "@.",
}


def parse_warehouse(text: str) -> tuple[list[str], str]:
    """Read the map up to the first blank line, then the moves up to the next.

    Characters in the move lines other than the four arrows are dropped.
    """
    lines = iter(text.splitlines())
    grid = list(takewhile(bool, lines))
    moves = "".join(
        char for line in takewhile(bool, lines) for char in line if char in _DIRECTIONS
    )
    return grid, moves


def widen(grid: list[str]) -> list[str]:
    """Double every tile horizontally; boxes become '[]' and the robot '@.'."""
    try:
        return ["".join(_WIDE_TILES[tile] for tile in row) for row in grid]
    except KeyError as error:
        raise ValueError(f"unknown warehouse tile {error.args[0]!r}") from None


def _find_robot(cells: list[list[str]]) -> Position:
    for y, row in enumerate(cells):
        for x, tile in enumerate(row):
            if tile == "@":
                return x, y
    raise ValueError("no robot in the warehouse")


def _pushed_cells(
    cells: list[list[str]], robot: Position, dx: int, dy: int
) -> list[Position] | None:
    """Cells that move when the robot steps by (dx, dy), or None if a wall blocks."""
    height = len(cells)
    queue = deque([robot])
    seen: set[Position] = set()
    pushed: list[Position] = []
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen:
            continue
        seen.add((x, y))
        if not (0 <= y < height and 0 <= x < len(cells[y])):
            return None
        tile = cells[y][x]
        if tile == "#":
            return None
        if tile == ".":
            continue
        if tile in "@O":
            pushed.append((x, y))
            queue.append((x + dx, y + dy))
        elif tile in "[]":
            other = x + 1 if tile == "[" else x - 1
            pushed.extend(((x, y), (other, y)))
            seen.add((other, y))
            if dx:
                queue.append((other + dx, y))
            else:
                queue.extend(((x, y + dy), (other, y + dy)))
        else:
            raise ValueError(f"unknown warehouse tile {tile!r} at ({x}, {y})")
    return pushed


def simulate(grid: list[str], moves: str) -> list[str]:
    """Return the warehouse map after the robot has made every move."""
    cells = [list(row) for row in grid]
    robot = _find_robot(cells)
    for move in moves:
        try:
            dx, dy = _DIRECTIONS[move]
        except KeyError:
            raise ValueError(f"unknown move {move!r}") from None
        pushed = _pushed_cells(cells, robot, dx, dy)
        if pushed is None:
            continue
        moved = {(x, y): cells[y][x] for x, y in pushed}
        for x, y in moved:
            cells[y][x] = "."
        for (x, y), tile in moved.items():
            cells[y + dy][x + dx] = tile
        robot = (robot[0] + dx, robot[1] + dy)
    return ["".join(row) for row in cells]


def gps_sum(grid: list[str], box: str) -> int:
    """Sum of x + 100 * y over every cell holding the given box character."""
    return sum(
        x + 100 * y
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile == box
    )


def part1(text: str) -> int:
    grid, moves = parse_warehouse(text)
    return gps_sum(simulate(grid, moves), "O")


def part2(text: str) -> int:
    grid, moves = parse_warehouse(text)
    return gps_sum(simulate(widen(grid), moves), "[")