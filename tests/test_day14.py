import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day14

EXAMPLE = """
    498,4 -> 498,6 -> 496,6
    503,4 -> 502,4 -> 502,9 -> 494,9
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day14.part1(path) == 24
    assert day14.part2(path) == 93


def test_rock_points_include_both_ends():
    points = list(day14.rock_points([(498, 4), (498, 6), (496, 6)]))
    assert points == [(498, 4), (498, 5), (498, 6), (496, 6), (497, 6), (498, 6)]


@pytest.mark.parametrize("line", ["498,4 -> 498", "a,4 -> 498,6"])
def test_bad_paths(line):
    with pytest.raises(InputFormatError):
        day14.parse_path(line)


def test_diagonal_segment():
    with pytest.raises(InputFormatError):
        list(day14.rock_points([(0, 0), (1, 1)]))
