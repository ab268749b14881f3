# aoc2022/days/day01.py
"""Day 1: Calorie Counting."""

import heapq
from pathlib import Path
from typing import Iterator

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_file_blocks

DAY = 1


def elf_calories(path: Path) -> Iterator[int]:
    for block in stream_file_blocks(path):
        try:
            yield sum(int(line) for line in block)
        except ValueError as e:
            raise InputFormatError("Invalid calorie count in block", " ".join(block)) from e


def part1(path: Path) -> int:
    return max(elf_calories(path), default=0)


def part2(path: Path) -> int:
    return sum(heapq.nlargest(3, elf_calories(path)))


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
