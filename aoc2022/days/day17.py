# aoc2022/days/day17.py
"""
Day 17: Pyroclastic Flow.

Rocks fall into a 7-wide chamber while jets push them sideways. For the huge
rock count of part 2 the simulation looks for a repeated state (same rock
shape, same jet index, same shape of the top rows) and skips whole cycles.
"""

from pathlib import Path
from typing import Dict, FrozenSet, List, Set, Tuple

from loguru import logger

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path
from aoc2022.core.types import Cell

DAY = 17

CHAMBER_WIDTH = 7
SPAWN_X = 2
SPAWN_GAP = 3
FINGERPRINT_ROWS = 30

# (x, y) offsets from the bottom-left corner, y pointing up
ROCKS: Tuple[Tuple[Cell, ...], ...] = (
    ((0, 0), (1, 0), (2, 0), (3, 0)),          # -
    ((1, 0), (0, 1), (1, 1), (2, 1), (1, 2)),  # +
    ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)),  # mirrored L
    ((0, 0), (0, 1), (0, 2), (0, 3)),          # |
    ((0, 0), (1, 0), (0, 1), (1, 1)),          # square
)

StateKey = Tuple[int, int, FrozenSet[Cell]]


def parse_jets(text: str) -> List[int]:
    text = text.strip()
    if not text:
        raise InputFormatError("Empty jet pattern")
    jets = []
    for c in text:
        if c == "<":
            jets.append(-1)
        elif c == ">":
            jets.append(1)
        else:
            raise InputFormatError("Unexpected jet direction", c)
    return jets


class Chamber:
    def __init__(self, jets: List[int]):
        self.jets = jets
        self.jet_idx = 0
        self.cells: Set[Cell] = set()
        self.height = 0

    def _fits(self, rock, x: int, y: int) -> bool:
        for dx, dy in rock:
            cx, cy = x + dx, y + dy
            if cx < 0 or cx >= CHAMBER_WIDTH or cy < 0 or (cx, cy) in self.cells:
                return False
        return True

    def drop(self, rock) -> None:
        x, y = SPAWN_X, self.height + SPAWN_GAP
        while True:
            push = self.jets[self.jet_idx]
            self.jet_idx = (self.jet_idx + 1) % len(self.jets)
            if self._fits(rock, x + push, y):
                x += push
            if self._fits(rock, x, y - 1):
                y -= 1
                continue
            for dx, dy in rock:
                self.cells.add((x + dx, y + dy))
                self.height = max(self.height, y + dy + 1)
            return

    def fingerprint(self) -> FrozenSet[Cell]:
        """Occupied cells of the top rows, relative to the current height."""
        top = self.height
        return frozenset((x, top - y)
                         for y in range(max(0, top - FINGERPRINT_ROWS), top)
                         for x in range(CHAMBER_WIDTH)
                         if (x, y) in self.cells)


def tower_height(jets: List[int], rocks: int) -> int:
    chamber = Chamber(jets)
    seen: Dict[StateKey, Tuple[int, int]] = {}
    skipped_height = 0
    cycle_skipped = False
    fallen = 0
    while fallen < rocks:
        rock_idx = fallen % len(ROCKS)
        chamber.drop(ROCKS[rock_idx])
        fallen += 1
        if cycle_skipped or fallen < FINGERPRINT_ROWS:
            continue
        key = (rock_idx, chamber.jet_idx, chamber.fingerprint())
        if key not in seen:
            seen[key] = (fallen, chamber.height)
            continue
        prev_fallen, prev_height = seen[key]
        cycle_rocks = fallen - prev_fallen
        cycle_height = chamber.height - prev_height
        repeats = (rocks - fallen) // cycle_rocks
        logger.info(f"Loop identified (from rock {prev_fallen} to rock {fallen}), "
                    f"skipping {repeats} repeats")
        fallen += repeats * cycle_rocks
        skipped_height = repeats * cycle_height
        cycle_skipped = True
    return chamber.height + skipped_height


def _jets(path: Path) -> List[int]:
    return parse_jets(Path(path).read_text(encoding="utf-8"))


def part1(path: Path) -> int:
    return tower_height(_jets(path), 2022)


def part2(path: Path) -> int:
    return tower_height(_jets(path), 1_000_000_000_000)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
