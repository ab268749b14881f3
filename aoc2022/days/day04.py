# aoc2022/days/day04.py
"""Day 4: Camp Cleanup. Section ranges are inclusive on both ends."""

from pathlib import Path
from typing import Iterator, NamedTuple, Tuple

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items

DAY = 4


class Sections(NamedTuple):
    first: int
    last: int

    def fully_contains(self, other: "Sections") -> bool:
        return self.first <= other.first and self.last >= other.last

    def overlaps(self, other: "Sections") -> bool:
        return self.first <= other.last and other.first <= self.last


def parse_sections(text: str) -> Sections:
    lo, sep, hi = text.partition("-")
    if not sep:
        raise InputFormatError("Invalid range", text)
    try:
        return Sections(int(lo), int(hi))
    except ValueError as e:
        raise InputFormatError("Invalid range limit", text) from e


def parse_pair(line: str) -> Tuple[Sections, Sections]:
    a, sep, b = line.partition(",")
    if not sep:
        raise InputFormatError("Invalid pair", line)
    return parse_sections(a), parse_sections(b)


def _pairs(path: Path) -> Iterator[Tuple[Sections, Sections]]:
    return stream_items(path, parse_pair, strict=True)


def part1(path: Path) -> int:
    return sum(1 for a, b in _pairs(path) if a.fully_contains(b) or b.fully_contains(a))


def part2(path: Path) -> int:
    return sum(1 for a, b in _pairs(path) if a.overlaps(b))


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
