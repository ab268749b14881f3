# aoc2022/days/day06.py
"""Day 6: Tuning Trouble."""

from collections import Counter
from pathlib import Path
from typing import Optional

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path

DAY = 6


def find_marker(stream: str, marker_len: int) -> Optional[int]:
    """Number of characters read when the last `marker_len` are all distinct."""
    window: Counter = Counter()
    for i, c in enumerate(stream):
        window[c] += 1
        if i >= marker_len:
            old = stream[i - marker_len]
            window[old] -= 1
            if not window[old]:
                del window[old]
        if len(window) == marker_len:
            return i + 1
    return None


def _run(path: Path, marker_len: int) -> int:
    stream = Path(path).read_text(encoding="utf-8").strip()
    idx = find_marker(stream, marker_len)
    if idx is None:
        raise InputFormatError(f"No marker of length {marker_len} in datastream")
    return idx


def part1(path: Path) -> int:
    return _run(path, 4)


def part2(path: Path) -> int:
    return _run(path, 14)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
