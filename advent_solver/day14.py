"""Day 14: robots patrolling a wrapping bathroom floor."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from itertools import takewhile
from math import lcm, prod

WIDTH = 101
HEIGHT = 103
PART1_SECONDS = 1

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")


@dataclass(frozen=True)
class Robot:
    x: int
    y: int
    vx: int
    vy: int


def parse_robots(text: str) -> list[Robot]:
    """Read 'p=x,y v=dx,dy' lines up to the first line that is not one."""
    robots: list[Robot] = []
    for line in takewhile(bool, text.splitlines()):
        match = _ROBOT.fullmatch(line.strip())
        if match is None:
            break
        robots.append(Robot(*(int(value) for value in match.groups())))
    return robots


def _position(robot: Robot, seconds: int, width: int, height: int) -> tuple[int, int]:
    return (robot.x + robot.vx * seconds) % width, (robot.y + robot.vy * seconds) % height


def safety_factor(
    robots: list[Robot], seconds: int, width: int = WIDTH, height: int = HEIGHT
) -> int:
    """Product of robot counts in the four quadrants after the given time."""
    mid_x, mid_y = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in robots:
        x, y = _position(robot, seconds, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x < mid_x, y < mid_y)] += 1
    return prod(quadrants[(left, top)] for left in (True, False) for top in (True, False))


def find_tree(
    robots: list[Robot], width: int = WIDTH, height: int = HEIGHT
) -> tuple[int, list[str]]:
    """First second at which no two robots share a tile, with the floor drawn then."""
    for seconds in range(1, lcm(width, height) + 1):
        positions = [_position(robot, seconds, width, height) for robot in robots]
        occupied = set(positions)
        if len(occupied) == len(positions):
            picture = [
                "".join("#" if (x, y) in occupied else " " for x in range(width))
                for y in range(height)
            ]
            return seconds, picture
    raise ValueError("the robots never all stand on distinct tiles")


def part1(text: str) -> int:
    return safety_factor(parse_robots(text), PART1_SECONDS)


def part2(text: str) -> str:
    seconds, picture = find_tree(parse_robots(text))
    return "\n".join([*picture, str(seconds)])