# aoc2022/days/day08.py
"""Day 8: Treetop Tree House."""

from pathlib import Path
from typing import Iterator

from aoc2022.core.errors import InputFormatError
from aoc2022.core.field2d import ORTHOGONAL, Field2D
from aoc2022.core.inputs import input_path, read_lines
from aoc2022.core.types import Cell

DAY = 8


def _digits(line: str):
    if not line.isdigit():
        raise InputFormatError("Tree row must be digits only", line)
    return [int(c) for c in line]


def parse_trees(path: Path) -> Field2D[int]:
    return Field2D.parse((line for line in read_lines(path) if line), _digits)


def ray(trees: Field2D, start: Cell, step: Cell) -> Iterator[int]:
    """Tree heights from `start` (exclusive) towards the edge."""
    x, y = start
    dx, dy = step
    x, y = x + dx, y + dy
    while trees.in_bounds((x, y)):
        yield trees[x, y]
        x, y = x + dx, y + dy


def is_visible(trees: Field2D, c: Cell) -> bool:
    h = trees[c]
    return any(all(t < h for t in ray(trees, c, d)) for d in ORTHOGONAL)


def viewing_distance(trees: Field2D, c: Cell, step: Cell) -> int:
    h = trees[c]
    seen = 0
    for t in ray(trees, c, step):
        seen += 1
        if t >= h:
            break
    return seen


def scenic_score(trees: Field2D, c: Cell) -> int:
    score = 1
    for d in ORTHOGONAL:
        score *= viewing_distance(trees, c, d)
    return score


def part1(path: Path) -> int:
    trees = parse_trees(path)
    return sum(1 for c, _ in trees.iter_with_position() if is_visible(trees, c))


def part2(path: Path) -> int:
    trees = parse_trees(path)
    return max(scenic_score(trees, c) for c, _ in trees.iter_with_position())


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
