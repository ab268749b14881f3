# aoc2022/days/day09.py
"""Day 9: Rope Bridge."""

from pathlib import Path
from typing import Iterator, List, Set

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items
from aoc2022.core.types import Cell

DAY = 9

DIRECTIONS = {"U": (0, 1), "D": (0, -1), "L": (-1, 0), "R": (1, 0)}


def parse_motion(line: str) -> Iterator[Cell]:
    d, sep, dist = line.partition(" ")
    if not sep or d not in DIRECTIONS:
        raise InputFormatError("Invalid movement", line)
    try:
        n = int(dist)
    except ValueError as e:
        raise InputFormatError("Could not parse distance", line) from e
    return iter([DIRECTIONS[d]] * n)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def follow(head: Cell, tail: Cell) -> Cell:
    dx, dy = head[0] - tail[0], head[1] - tail[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return (tail[0] + _sign(dx), tail[1] + _sign(dy))


def tail_visits(path: Path, knots: int) -> int:
    rope: List[Cell] = [(0, 0)] * knots
    visited: Set[Cell] = {rope[-1]}
    for steps in stream_items(path, parse_motion, strict=True):
        for dx, dy in steps:
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
            for i in range(1, knots):
                moved = follow(rope[i - 1], rope[i])
                if moved == rope[i]:
                    break
                rope[i] = moved
            visited.add(rope[-1])
    return len(visited)


def part1(path: Path) -> int:
    return tail_visits(path, 2)


def part2(path: Path) -> int:
    return tail_visits(path, 10)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
