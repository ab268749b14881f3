# aoc2022/days/day18.py
"""Day 18: Boiling Boulders."""

from collections import deque
from pathlib import Path
from typing import Iterator, Set, Tuple

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items

DAY = 18

Voxel = Tuple[int, int, int]

FACES: Tuple[Voxel, ...] = (
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
)


def parse_voxel(line: str) -> Voxel:
    parts = line.split(",")
    if len(parts) != 3:
        raise InputFormatError("Not enough coordinates", line)
    try:
        x, y, z = (int(p) for p in parts)
    except ValueError as e:
        raise InputFormatError("Could not parse number", line) from e
    return (x, y, z)


def adjacent(v: Voxel) -> Iterator[Voxel]:
    x, y, z = v
    for dx, dy, dz in FACES:
        yield (x + dx, y + dy, z + dz)


def _droplet(path: Path) -> Set[Voxel]:
    return set(stream_items(path, parse_voxel, strict=True))


def outside_air(droplet: Set[Voxel]) -> Set[Voxel]:
    """Flood fill of the air in a box one voxel larger than the droplet."""
    lo = tuple(min(v[i] for v in droplet) - 1 for i in range(3))
    hi = tuple(max(v[i] for v in droplet) + 1 for i in range(3))
    seen = {lo}
    queue = deque([lo])
    while queue:
        for n in adjacent(queue.popleft()):
            if n in seen or n in droplet:
                continue
            if all(lo[i] <= n[i] <= hi[i] for i in range(3)):
                seen.add(n)
                queue.append(n)
    return seen


def part1(path: Path) -> int:
    droplet = _droplet(path)
    return sum(1 for v in droplet for n in adjacent(v) if n not in droplet)


def part2(path: Path) -> int:
    droplet = _droplet(path)
    if not droplet:
        return 0
    air = outside_air(droplet)
    return sum(1 for v in droplet for n in adjacent(v) if n in air)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
