import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day09

EXAMPLE = """
    R 4
    U 4
    L 3
    D 1
    R 4
    D 1
    L 5
    R 2
"""

LARGER_EXAMPLE = """
    R 5
    U 8
    L 8
    D 3
    R 17
    D 10
    L 25
    U 20
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day09.part1(path) == 13
    assert day09.part2(path) == 1


def test_larger_example(example_file):
    assert day09.part2(example_file(LARGER_EXAMPLE)) == 36


@pytest.mark.parametrize("head, tail, expected", [
    ((1, 1), (0, 0), (0, 0)),
    ((2, 0), (0, 0), (1, 0)),
    ((2, 1), (0, 0), (1, 1)),
    ((-1, -2), (0, 0), (-1, -1)),
])
def test_follow(head, tail, expected):
    assert day09.follow(head, tail) == expected


@pytest.mark.parametrize("line", ["X 3", "R", "R three"])
def test_bad_motion(line):
    with pytest.raises(InputFormatError):
        day09.parse_motion(line)
