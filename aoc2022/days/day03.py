# aoc2022/days/day03.py
"""Day 3: Rucksack Reorganization."""

from pathlib import Path
from typing import FrozenSet, Iterator, List, Tuple

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items

DAY = 3

Rucksack = Tuple[FrozenSet[str], FrozenSet[str]]


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise InputFormatError("Invalid item", item)


def parse_rucksack(line: str) -> Rucksack:
    if len(line) % 2:
        raise InputFormatError("Invalid rucksack length", line)
    bad = [c for c in line if not c.isascii() or not c.isalpha()]
    if bad:
        raise InputFormatError("Invalid item", bad[0])
    half = len(line) // 2
    return frozenset(line[:half]), frozenset(line[half:])


def _rucksacks(path: Path) -> Iterator[Rucksack]:
    return stream_items(path, parse_rucksack, strict=True)


def part1(path: Path) -> int:
    return sum(priority(item) for first, second in _rucksacks(path) for item in first & second)


def part2(path: Path) -> int:
    total = 0
    group: List[FrozenSet[str]] = []
    for first, second in _rucksacks(path):
        group.append(first | second)
        if len(group) == 3:
            badge = group[0] & group[1] & group[2]
            if len(badge) != 1:
                raise InputFormatError("Group does not share exactly one badge", "".join(sorted(badge)))
            total += priority(next(iter(badge)))
            group = []
    return total


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
