import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day18

EXAMPLE = """
    2,2,2
    1,2,2
    3,2,2
    2,1,2
    2,3,2
    2,2,1
    2,2,3
    2,2,4
    2,2,6
    1,2,5
    3,2,5
    2,1,5
    2,3,5
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day18.part1(path) == 64
    assert day18.part2(path) == 58


def test_two_adjacent_cubes(example_file):
    path = example_file("1,1,1\n2,1,1\n", dedent=False)
    assert day18.part1(path) == 10
    assert day18.part2(path) == 10


def test_hollow_shell_hides_inner_faces():
    shell = {(x, y, z) for x in range(3) for y in range(3) for z in range(3)} - {(1, 1, 1)}
    air = day18.outside_air(shell)
    assert (1, 1, 1) not in air
    assert (-1, -1, -1) in air


@pytest.mark.parametrize("line", ["1,2", "1,2,3,4", "1,b,3"])
def test_bad_voxels(line):
    with pytest.raises(InputFormatError):
        day18.parse_voxel(line)
