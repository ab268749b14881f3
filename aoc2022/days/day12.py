#!/usr/bin/env python3
"""
Day 12: Hill Climbing Algorithm.

Elevations: 'a'..'z' -> 0..25, 'S' is the start at elevation 0 and 'E' the
goal at elevation 25. A step may climb at most one level.

- part 1: shortest climb S -> E
- part 2: shortest climb from any elevation-0 cell to E, found with a single
  backwards search from E
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from aoc2022.core.dijkstra import (UNREACHED, climbable, descendable, search_all_distances,
                                   search_single_target)
from aoc2022.core.errors import InputFormatError
from aoc2022.core.field2d import Field2D
from aoc2022.core.inputs import input_path, read_lines
from aoc2022.core.types import Cell

DAY = 12

START_MARK = "S"
GOAL_MARK = "E"
LOWEST = 0
HIGHEST = 25

EXAMPLE = [
    "Sabqponm",
    "abcryxxl",
    "accszExk",
    "acctuvwj",
    "abdefghi",
]


def elevation(c: str) -> int:
    if c == START_MARK:
        return LOWEST
    if c == GOAL_MARK:
        return HIGHEST
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    raise InputFormatError("Invalid elevation marker", c)


@dataclass
class Heightmap:
    start: Cell
    goal: Cell
    map: Field2D[int]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Heightmap":
        rows: List[str] = [line.strip() for line in lines if line.strip()]
        start = goal = None
        for y, row in enumerate(rows):
            if START_MARK in row:
                start = (row.index(START_MARK), y)
            if GOAL_MARK in row:
                goal = (row.index(GOAL_MARK), y)
        if start is None:
            raise InputFormatError(f"Heightmap has no start marker '{START_MARK}'")
        if goal is None:
            raise InputFormatError(f"Heightmap has no goal marker '{GOAL_MARK}'")
        field = Field2D.parse(rows, lambda row: [elevation(c) for c in row])
        return cls(start, goal, field)

    @classmethod
    def from_file(cls, path: Path) -> "Heightmap":
        return cls.from_lines(read_lines(path))

    def path_search(self) -> Optional[int]:
        return search_single_target(self.map, self.start, self.goal, climbable)

    def distances_to_goal(self) -> Field2D:
        return search_all_distances(self.map, self.goal, descendable)

    def best_trailhead(self) -> Optional[int]:
        distances = self.distances_to_goal()
        best = min((distances[c] for c, h in self.map.iter_with_position() if h == LOWEST),
                   default=UNREACHED)
        if best == UNREACHED:
            logger.warning(f"No elevation-{LOWEST} cell can reach the goal {self.goal}")
            return None
        return best


def part1(path: Path) -> Optional[int]:
    return Heightmap.from_file(path).path_search()


def part2(path: Path) -> Optional[int]:
    return Heightmap.from_file(path).best_trailhead()


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
