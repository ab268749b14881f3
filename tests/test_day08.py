import pytest

from aoc2022.core.errors import InputFormatError, RaggedRowsError
from aoc2022.days import day08

EXAMPLE = """
    30373
    25512
    65332
    33549
    35390
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day08.part1(path) == 21
    assert day08.part2(path) == 8


def test_scenic_score_of_middle_tree(example_file):
    trees = day08.parse_trees(example_file(EXAMPLE))
    assert day08.scenic_score(trees, (2, 1)) == 4
    assert day08.scenic_score(trees, (2, 3)) == 8
    assert day08.scenic_score(trees, (0, 0)) == 0


def test_edge_trees_are_visible(example_file):
    trees = day08.parse_trees(example_file(EXAMPLE))
    assert day08.is_visible(trees, (0, 2))
    assert not day08.is_visible(trees, (3, 1))


def test_bad_rows(example_file):
    with pytest.raises(InputFormatError):
        day08.parse_trees(example_file("123\n4x6\n"))
    with pytest.raises(RaggedRowsError):
        day08.parse_trees(example_file("123\n45\n"))
