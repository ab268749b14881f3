# aoc2022/days/day15.py
"""Day 15: Beacon Exclusion Zone.

Part 1 merges the x-intervals each sensor covers on the row. Part 2 only
checks the ring just outside every sensor's range: a single uncovered cell
must touch the edge of some sensor's diamond.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from loguru import logger

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items
from aoc2022.core.types import Cell

DAY = 15

PART1_ROW = 2_000_000
PART2_LIMIT = 4_000_000
TUNING_FACTOR = 4_000_000

NUMBER_RE = re.compile(r"-?\d+")


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass(frozen=True)
class Sensor:
    location: Cell
    closest_beacon: Cell

    @property
    def range(self) -> int:
        return manhattan(self.location, self.closest_beacon)

    def covers(self, c: Cell) -> bool:
        return manhattan(self.location, c) <= self.range

    def row_interval(self, row: int) -> Optional[Tuple[int, int]]:
        half = self.range - abs(self.location[1] - row)
        if half < 0:
            return None
        return (self.location[0] - half, self.location[0] + half)

    def ring(self) -> Iterator[Cell]:
        """Cells at distance range + 1."""
        sx, sy = self.location
        r = self.range + 1
        for i in range(r):
            yield (sx + r - i, sy + i)
            yield (sx - i, sy + r - i)
            yield (sx - r + i, sy - i)
            yield (sx + i, sy - r + i)


def parse_sensor(line: str) -> Sensor:
    nums = [int(n) for n in NUMBER_RE.findall(line)]
    if len(nums) != 4:
        raise InputFormatError("Invalid descriptor", line)
    return Sensor((nums[0], nums[1]), (nums[2], nums[3]))


def _sensors(path: Path) -> List[Sensor]:
    return list(stream_items(path, parse_sensor, strict=True))


def merge_intervals(intervals: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    merged: List[Tuple[int, int]] = []
    for lo, hi in sorted(intervals):
        if merged and lo <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], hi))
        else:
            merged.append((lo, hi))
    return merged


def part1(path: Path, row: int = PART1_ROW) -> int:
    sensors = _sensors(path)
    covered = merge_intervals([iv for iv in (s.row_interval(row) for s in sensors) if iv])
    beacons = {s.closest_beacon for s in sensors if s.closest_beacon[1] == row}
    total = sum(hi - lo + 1 for lo, hi in covered)
    total -= sum(1 for bx, _ in beacons if any(lo <= bx <= hi for lo, hi in covered))
    return total


def part2(path: Path, xlim: int = PART2_LIMIT, ylim: int = PART2_LIMIT) -> int:
    sensors = _sensors(path)
    for sensor in sensors:
        for x, y in sensor.ring():
            if 0 <= x <= xlim and 0 <= y <= ylim and not any(s.covers((x, y)) for s in sensors):
                logger.debug(f"Distress beacon at {(x, y)}")
                return x * TUNING_FACTOR + y
    raise InputFormatError("No uncovered position within the search area")


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
