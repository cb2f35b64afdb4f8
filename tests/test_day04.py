from advent_solver.day04 import count_x_mas, count_xmas, part1, part2

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def _rotate(grid):
    return ["".join(column) for column in zip(*reversed(grid))]


def test_part1_example():
    assert part1(EXAMPLE) == 18


def test_part2_example():
    assert part2(EXAMPLE) == 9


def test_xmas_found_in_any_direction():
    forward = count_xmas(["XMAS"])
    assert count_xmas(["SAMX"]) == forward
    assert count_xmas(["X", "M", "A", "S"]) == forward
    assert count_xmas(["X...", ".M..", "..A.", "...S"]) == forward


def test_xmas_count_survives_transposition():
    grid = EXAMPLE.splitlines()
    assert count_xmas(_transpose(grid)) == count_xmas(grid)


def test_grid_stops_at_blank_line():
    assert part1(EXAMPLE + "\nXMAS\n") == part1(EXAMPLE)
    assert part2(EXAMPLE + "\nM.S\n.A.\nM.S\n") == part2(EXAMPLE)


def test_x_mas_count_survives_rotation():
    grid = EXAMPLE.splitlines()
    assert count_x_mas(_rotate(grid)) == count_x_mas(grid)


def test_x_mas_orientations_agree():
    assert count_x_mas(["M.S", ".A.", "M.S"]) == count_x_mas(["S.S", ".A.", "M.M"])


def test_x_mas_needs_both_letters_on_each_diagonal():
    assert count_x_mas(["M.M", ".A.", "M.M"]) == count_x_mas(["...", "...", "..."])