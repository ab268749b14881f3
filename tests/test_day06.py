import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.days import day06


def test_examples(example_file):
    path = example_file("mjqjpqmgbljsphdztnvjfqwrcgsmlb\n")
    assert day06.part1(path) == 7
    assert day06.part2(path) == 19


@pytest.mark.parametrize("stream, start_of_packet, start_of_message", [
    ("bvwbjplbgvbhsrlpgdmjqwftvncz", 5, 23),
    ("nppdvjthqldpwncqszvftbrmjlhg", 6, 23),
    ("nznrnfrfntjfmvfwmzdfjlvtqnbhcprsg", 10, 29),
    ("zcfzfwzzqfrljwzlrfnpqdbhtmscgvjw", 11, 26),
])
def test_find_marker(stream, start_of_packet, start_of_message):
    assert day06.find_marker(stream, 4) == start_of_packet
    assert day06.find_marker(stream, 14) == start_of_message


def test_no_marker(example_file):
    path = example_file("aabbaabb")
    with pytest.raises(InputFormatError):
        day06.part1(path)
