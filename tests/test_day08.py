import pytest

from advent_solver.day08 import (
    count_antinodes,
    count_harmonic_antinodes,
    part1,
    part2,
)

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def _grid(text):
    return text.splitlines()


def _mirror(grid):
    return [row[::-1] for row in grid]


def _flip(grid):
    return grid[::-1]


def test_example_part1():
    assert part1(EXAMPLE) == 14


def test_example_part2():
    assert part2(EXAMPLE) == 34


def test_single_antenna_has_no_antinodes():
    grid = ["....", ".a..", "....", "...."]
    assert count_antinodes(grid) == 0
    assert count_harmonic_antinodes(grid) == count_antinodes(grid)


@pytest.mark.parametrize("size", [2, 5, 9])
def test_harmonics_cover_whole_diagonal(size):
    rows = [["."] * size for _ in range(size)]
    rows[0][0] = "a"
    rows[size - 1][size - 1] = "a"
    grid = ["".join(row) for row in rows]
    assert count_harmonic_antinodes(grid) == size


def test_part1_never_exceeds_part2():
    for grid in (_grid(EXAMPLE), ["a..a..", "......", "..a...", "......"]):
        assert count_antinodes(grid) <= count_harmonic_antinodes(grid)


def test_mirroring_preserves_counts():
    grid = _grid(EXAMPLE)
    assert count_antinodes(_mirror(grid)) == count_antinodes(grid)
    assert count_antinodes(_flip(grid)) == count_antinodes(grid)
    assert count_harmonic_antinodes(_mirror(grid)) == count_harmonic_antinodes(grid)


def test_different_frequencies_do_not_pair():
    with_pair = ["a.....", "......", "..a...", "......", "......", "......"]
    mixed = ["a.....", "......", "..b...", "......", "......", "......"]
    lone = ["a.....", "......", "......", "......", "......", "......"]
    assert count_antinodes(mixed) == count_antinodes(lone)
    assert count_harmonic_antinodes(mixed) == count_harmonic_antinodes(lone)
    assert count_antinodes(with_pair) > count_antinodes(mixed)


def test_reading_stops_at_blank_line():
    assert part1(EXAMPLE + "\n0..0\n") == part1(EXAMPLE)


def test_unknown_character_rejected():
    with pytest.raises(ValueError):
        count_antinodes(["a.#.", "...."])


def test_empty_input():
    assert part1("") == part2("")
    assert count_antinodes([]) == count_harmonic_antinodes([])