import pytest

from advent_solver.day14 import (
    HEIGHT,
    PART1_SECONDS,
    WIDTH,
    Robot,
    find_tree,
    parse_robots,
    part1,
    part2,
    safety_factor,
    )

EXAMPLE = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_parse_robots():
    robots = parse_robots("p=0,4 v=3,-3\np=6,3 v=-1,-3\n")
    assert robots == [Robot(0, 4, 3, -3), Robot(6, 3, -1, -3)]


def test_parse_counts_every_line():
    assert len(parse_robots(EXAMPLE)) == len(EXAMPLE.splitlines())


def test_example_safety_factor():
    assert safety_factor(parse_robots(EXAMPLE), 100, 11, 7) == 12


def test_safety_factor_is_periodic():
    robots = parse_robots(EXAMPLE)
    assert safety_factor(robots, 100, 11, 7) == safety_factor(robots, 100 + 77, 11, 7)


def test_robot_on_middle_line_is_ignored():
    robots = parse_robots(EXAMPLE)
    on_middle = Robot(5, 0, 0, 1)
    assert safety_factor(robots + [on_middle], 100, 11, 7) == safety_factor(
        robots, 100, 11, 7
    )


def test_part1_uses_configured_time():
    assert part1(EXAMPLE) == safety_factor(parse_robots(EXAMPLE), PART1_SECONDS, WIDTH, HEIGHT)


def test_find_tree_immediately_distinct():
    robots = [Robot(0, 0, 1, 0), Robot(5, 5, 0, 1)]
    seconds, picture = find_tree(robots, 11, 7)
    assert seconds == 1
    assert len(picture) == 7
    assert all(len(row) == 11 for row in picture)
    assert sum(row.count("#") for row in picture) == len(robots)


def test_find_tree_skips_collisions():
    robots = [Robot(0, 0, 1, 0), Robot(2, 0, -1, 0)]
    seconds, picture = find_tree(robots, 11, 7)
    assert seconds == 2
    assert sum(row.count("#") for row in picture) == len(robots)


def test_find_tree_never_distinct():
    robots = [Robot(1, 1, 2, 3), Robot(1, 1, 2, 3)]
    with pytest.raises(ValueError):
        find_tree(robots, 11, 7)


def test_part2_output_layout():
    text = "p=0,0 v=1,0\np=5,5 v=0,1\n"
    lines = part2(text).split("\n")
    seconds, picture = find_tree(parse_robots(text))
    assert lines[-1] == str(seconds)
    assert lines[:-1] == picture
    assert len(picture) == HEIGHT
    assert all(len(row) == WIDTH for row in picture)