import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day03

EXAMPLE = """
    vJrwpWtwJgWrhcsFMMfFFhFp
    jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL
    PmmdzqPrVvPwwTWBwg
    wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn
    ttgJtRGJQctTZtZT
    CrZsJsPPZsGzwwsLwLmpwMDw
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day03.part1(path) == 157
    assert day03.part2(path) == 70


def test_priority():
    assert day03.priority("a") == 1
    assert day03.priority("z") == 26
    assert day03.priority("A") == 27
    assert day03.priority("Z") == 52


@pytest.mark.parametrize("line", ["abc", "ab1c", "aé"])
def test_bad_rucksack(line):
    with pytest.raises(InputFormatError):
        day03.parse_rucksack(line)
