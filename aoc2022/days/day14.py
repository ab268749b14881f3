# aoc2022/days/day14.py
"""Day 14: Regolith Reservoir."""

from pathlib import Path
from typing import Iterator, List, Optional, Set

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items
from aoc2022.core.types import Cell

DAY = 14

SAND_SOURCE: Cell = (500, 0)
FALL_ORDER = ((0, 1), (-1, 1), (1, 1))  # down, down-left, down-right


def parse_path(line: str) -> List[Cell]:
    points = []
    for part in line.split("->"):
        x, sep, y = part.strip().partition(",")
        if not sep:
            raise InputFormatError("Invalid pair", line)
        try:
            points.append((int(x), int(y)))
        except ValueError as e:
            raise InputFormatError("Invalid number", line) from e
    return points


def rock_points(points: List[Cell]) -> Iterator[Cell]:
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        if y0 == y1:
            for x in range(min(x0, x1), max(x0, x1) + 1):
                yield (x, y0)
        elif x0 == x1:
            for y in range(min(y0, y1), max(y0, y1) + 1):
                yield (x0, y)
        else:
            raise InputFormatError(f"Diagonal rock segment {(x0, y0)} -> {(x1, y1)}")


def parse_cave(path: Path) -> Set[Cell]:
    cave: Set[Cell] = set()
    for points in stream_items(path, parse_path, strict=True):
        cave.update(rock_points(points))
    if not cave:
        raise InputFormatError("Cave scan has no rock")
    return cave


def drop_sand(blocked: Set[Cell], lowest: int, floor: Optional[int] = None) -> Optional[Cell]:
    """Resting place of one unit of sand, None if it falls below `lowest` (no floor)."""
    x, y = SAND_SOURCE
    while True:
        if floor is None and y > lowest:
            return None
        if floor is not None and y + 1 == floor:
            return (x, y)
        for dx, dy in FALL_ORDER:
            if (x + dx, y + dy) not in blocked:
                x, y = x + dx, y + dy
                break
        else:
            return (x, y)


def part1(path: Path) -> int:
    cave = parse_cave(path)
    lowest = max(y for _, y in cave)
    dropped = 0
    while True:
        rest = drop_sand(cave, lowest)
        if rest is None:
            return dropped
        cave.add(rest)
        dropped += 1


def part2(path: Path) -> int:
    cave = parse_cave(path)
    floor = max(y for _, y in cave) + 2
    dropped = 0
    while True:
        rest = drop_sand(cave, floor, floor)
        dropped += 1
        if rest == SAND_SOURCE:
            return dropped
        cave.add(rest)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
