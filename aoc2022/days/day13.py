# aoc2022/days/day13.py
"""Day 13: Distress Signal."""

import json
from functools import cmp_to_key
from pathlib import Path
from typing import List, Union

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_file_blocks

DAY = 13

Packet = Union[int, List["Packet"]]

DIVIDERS: List[Packet] = [[[2]], [[6]]]


def _check(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, list)):
        raise TypeError(value)
    if isinstance(value, list):
        for v in value:
            _check(v)


def parse_packet(line: str) -> Packet:
    if not line.startswith("["):
        raise InputFormatError("Invalid starting character", line)
    try:
        packet = json.loads(line)
        _check(packet)
    except (json.JSONDecodeError, TypeError) as e:
        raise InputFormatError("Invalid packet", line) from e
    return packet


def compare(left: Packet, right: Packet) -> int:
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        c = compare(a, b)
        if c:
            return c
    return (len(left) > len(right)) - (len(left) < len(right))


def _pairs(path: Path) -> List[List[Packet]]:
    pairs = [[parse_packet(line) for line in block] for block in stream_file_blocks(path)]
    for pair in pairs:
        if len(pair) != 2:
            raise InputFormatError(f"Expected a pair of packets, got {len(pair)}")
    return pairs


def part1(path: Path) -> int:
    return sum(i for i, (left, right) in enumerate(_pairs(path), start=1)
               if compare(left, right) < 0)


def part2(path: Path) -> int:
    packets = [p for pair in _pairs(path) for p in pair] + DIVIDERS
    packets.sort(key=cmp_to_key(compare))
    key = 1
    for i, p in enumerate(packets, start=1):
        if p in DIVIDERS:
            key *= i
    return key


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
