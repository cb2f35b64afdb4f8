"""Day 18: escaping a memory grid while bytes fall into it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

MAP_SIZE = 71
MAX_DROPS = 1024

Position = tuple[int, int]


def parse_bytes(text: str) -> list[Position]:
    """Read whitespace-separated 'x,y' coordinates."""
    positions: list[Position] = []
    for token in text.split():
        x, separator, y = token.partition(",")
        if not separator:
            raise ValueError(f"not a coordinate pair: {token!r}")
        positions.append((int(x), int(y)))
    return positions


def shortest_path(blocked: Iterable[Position], size: int = MAP_SIZE) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    if size < 1:
        raise ValueError("the grid size must be positive")
    walls = set(blocked)
    start = (0, 0)
    goal = (size - 1, size - 1)
    if start in walls:
        return None
    distances = {start: 0}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == goal:
            return distances[position]
        x, y = position
        for neighbour in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
            nx, ny = neighbour
            if not (0 <= nx < size and 0 <= ny < size):
                continue
            if neighbour in distances or neighbour in walls:
                continue
            distances[neighbour] = distances[position] + 1
            queue.append(neighbour)
    return None


def first_blocking_byte(falling: Iterable[Position], size: int = MAP_SIZE) -> Position:
    """The first byte after whose fall the exit can no longer be reached."""
    falling = list(falling)
    if shortest_path(falling, size) is not None:
        raise ValueError("the exit stays reachable after every byte has fallen")
    reachable, blocked = 0, len(falling)
    while blocked - reachable > 1:
        middle = (reachable + blocked) // 2
        if shortest_path(falling[:middle], size) is None:
            blocked = middle
        else:
            reachable = middle
    return falling[blocked - 1]


def part1(text: str) -> int:
    distance = shortest_path(parse_bytes(text)[:MAX_DROPS], MAP_SIZE)
    if distance is None:
        raise ValueError("the exit cannot be reached")
    return distance


def part2(text: str) -> str:
    x, y = first_blocking_byte(parse_bytes(text), MAP_SIZE)
    return f"{x},{y}"