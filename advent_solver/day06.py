"""Day 6: following a patrolling guard around a lab."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import takewhile

State = tuple[int, int, "Direction"]


class Direction(Enum):
    """A heading on the grid, valued by its (dx, dy) step."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        return _TURNS[self]


_TURNS = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}


@dataclass(frozen=True)
class _Lab:
    grid: list[str]
    width: int
    height: int
    obstacles: frozenset[tuple[int, int]]
    start: tuple[int, int]

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def _read_lab(grid: list[str]) -> _Lab:
    if not grid:
        raise ValueError("empty map")
    obstacles = frozenset(
        (x, y) for y, row in enumerate(grid) for x, cell in enumerate(row) if cell == "#"
    )
    start = next(
        ((x, y) for y, row in enumerate(grid) for x, cell in enumerate(row) if cell == "^"),
        None,
    )
    if start is None:
        raise ValueError("no guard on the map")
    return _Lab(grid, len(grid[0]), len(grid), obstacles, start)


def _advance(
    lab: _Lab, x: int, y: int, heading: Direction, obstacles: frozenset[tuple[int, int]]
) -> State | None:
    """Turn at obstacles, then step; None once the guard would leave the map."""
    while True:
        nx, ny = x + heading.dx, y + heading.dy
        if not lab.contains(nx, ny):
            return None
        if (nx, ny) not in obstacles:
            return nx, ny, heading
        heading = heading.turn_right()


def count_visited(grid: list[str]) -> int:
    """Number of distinct open cells the guard walks on before leaving."""
    lab = _read_lab(grid)
    x, y = lab.start
    heading = Direction.UP
    visited = {(x, y)}
    while (state := _advance(lab, x, y, heading, lab.obstacles)) is not None:
        x, y, heading = state
        if lab.grid[y][x] == ".":
            visited.add((x, y))
    return len(visited)


def _loops(
    lab: _Lab, state: State, seen: set[State], blocker: tuple[int, int]
) -> bool:
    obstacles = lab.obstacles | {blocker}
    seen = set(seen)
    x, y, heading = state
    while True:
        seen.add((x, y, heading))
        following = _advance(lab, x, y, heading, obstacles)
        if following is None:
            return False
        x, y, heading = following
        if (x, y, heading) in seen:
            return True


def count_loop_obstructions(grid: list[str]) -> int:
    """Count cells on the guard's path where one new obstacle causes a loop."""
    lab = _read_lab(grid)
    x, y = lab.start
    heading = Direction.UP
    seen_states: set[State] = set()
    seen_cells: set[tuple[int, int]] = set()
    count = 0
    while True:
        seen_states.add((x, y, heading))
        seen_cells.add((x, y))
        following = _advance(lab, x, y, heading, lab.obstacles)
        if following is None:
            break
        nx, ny, heading = following
        if (nx, ny) not in seen_cells and _loops(
            lab, (x, y, heading), seen_states, (nx, ny)
        ):
            count += 1
        x, y = nx, ny
    return count


def _read_grid(text: str) -> list[str]:
    return list(takewhile(bool, text.splitlines()))


def part1(text: str) -> int:
    return count_visited(_read_grid(text))


def part2(text: str) -> int:
    return count_loop_obstructions(_read_grid(text))