import pytest

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import read_lines
from aoc2022.days import day07

EXAMPLE = """
    $ cd /
    $ ls
    dir a
    14848514 b.txt
    8504156 c.dat
    dir d
    $ cd a
    $ ls
    dir e
    29116 f
    2557 g
    62596 h.lst
    $ cd e
    $ ls
    584 i
    $ cd ..
    $ cd ..
    $ cd d
    $ ls
    4060174 j
    8033020 d.log
    5626152 d.ext
    7214296 k
"""


def test_examples(example_file):
    path = example_file(EXAMPLE)
    assert day07.part1(path) == 95437
    assert day07.part2(path) == 24933642


def test_directory_sizes(example_file):
    root = day07.replay(read_lines(example_file(EXAMPLE)))
    sizes = {d.name: d.size for d in root.walk()}
    assert sizes == {"/": 48381165, "a": 94853, "e": 584, "d": 24933642}


@pytest.mark.parametrize("line", ["$ rm -rf", "$ cd", "junk", "big file.txt"])
def test_bad_transcript(line):
    with pytest.raises(InputFormatError):
        day07.replay(["$ cd /", line])


def test_cd_above_root():
    with pytest.raises(InputFormatError):
        day07.replay(["$ cd /", "$ cd .."])
