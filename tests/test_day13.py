import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day13

EXAMPLE = """
    [1,1,3,1,1]
    [1,1,5,1,1]

    [[1],[2,3,4]]
    [[1],4]

    [9]
    [[8,7,6]]

    [[4,4],4,4]
    [[4,4],4,4,4]

    [7,7,7,7]
    [7,7,7]

    []
    [3]

    [[[]]]
    [[]]

    [1,[2,[3,[4,[5,6,7]]]],8,9]
    [1,[2,[3,[4,[5,6,0]]]],8,9]
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day13.part1(path) == 13
    assert day13.part2(path) == 140


@pytest.mark.parametrize("left, right, expected", [
    ([1, 1, 3], [1, 1, 5], -1),
    ([[1], 4], [[1], [2, 3, 4]], 1),
    ([9], [[8, 7, 6]], 1),
    ([[]], [[]], 0),
    ([], [3], -1),
])
def test_compare(left, right, expected):
    assert day13.compare(left, right) == expected


@pytest.mark.parametrize("line", ["1,2", "[1,2", "[1.5]", "[true]", '["a"]'])
def test_bad_packets(line):
    with pytest.raises(InputFormatError):
        day13.parse_packet(line)
