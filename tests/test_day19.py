import pytest

from advent_solver.day19 import (
    count_arrangements,
    is_possible,
    parse_towels,
    part1,
    part2,
)

PATTERNS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
DESIGNS = ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]
EXAMPLE = ", ".join(PATTERNS) + "\n\n" + "\n".join(DESIGNS) + "\n"


def test_parse_round_trip():
    assert parse_towels(EXAMPLE) == (PATTERNS, DESIGNS)


def test_parse_stops_at_blank_line():
    text = "a, b\n\nab\n\nba\n"
    assert parse_towels(text) == (["a", "b"], ["ab"])


def test_parse_without_patterns_rejected():
    with pytest.raises(ValueError):
        parse_towels("")


def test_example_part1():
    assert part1(EXAMPLE) == 6


def test_example_part2():
    assert part2(EXAMPLE) == 16


@pytest.mark.parametrize("design", DESIGNS)
def test_possible_matches_nonzero_count(design):
    assert is_possible(design, PATTERNS) == (count_arrangements(design, PATTERNS) > 0)


def test_overlapping_patterns_counted_separately():
    assert count_arrangements("ab", ["a", "b", "ab"]) == 2


def test_design_using_unknown_stripe_is_impossible():
    assert not is_possible("ubwu", PATTERNS)
    assert count_arrangements("ubwu", PATTERNS) == 0


def test_empty_design_cannot_be_built():
    assert not is_possible("", PATTERNS)
    assert count_arrangements("", PATTERNS) == 0


def test_single_pattern_design():
    assert is_possible("bwu", PATTERNS)


def test_long_repeating_design_counts_doubling_choices():
    patterns = ["a", "aa"]
    counts = [count_arrangements("a" * n, patterns) for n in range(1, 8)]
    for index in range(2, len(counts)):
        assert counts[index] == counts[index - 1] + counts[index - 2]