# aoc2022/days/day05.py
"""Day 5: Supply Stacks."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, read_lines

DAY = 5

MOVE_RE = re.compile(r"move (\d+) from (\d+) to (\d+)")


@dataclass
class Move:
    count: int
    src: int
    dst: int


def parse_stacks(drawing: List[str]) -> List[List[str]]:
    """drawing: crate rows top to bottom, followed by the stack number row."""
    if not drawing:
        raise InputFormatError("Missing stack drawing")
    number_row = drawing[-1]
    stacks: List[List[str]] = [[] for _ in number_row.split()]
    for line in reversed(drawing[:-1]):
        for i, c in enumerate(line):
            if c == "[":
                stack_idx = i // 4
                if stack_idx >= len(stacks) or i + 1 >= len(line):
                    raise InputFormatError("Crate outside the numbered stacks", line)
                stacks[stack_idx].append(line[i + 1])
    return stacks


def parse_move(line: str) -> Move:
    m = MOVE_RE.fullmatch(line.strip())
    if not m:
        raise InputFormatError("Invalid move instruction", line)
    count, src, dst = (int(g) for g in m.groups())
    return Move(count, src - 1, dst - 1)


def parse_input(path: Path) -> Tuple[List[List[str]], List[Move]]:
    lines = list(read_lines(path))
    try:
        split = lines.index("")
    except ValueError:
        raise InputFormatError("Missing blank line between drawing and moves") from None
    stacks = parse_stacks(lines[:split])
    moves = [parse_move(line) for line in lines[split + 1:] if line]
    return stacks, moves


def _tops(stacks: List[List[str]]) -> str:
    return "".join(s[-1] for s in stacks if s)


def _take(stacks: List[List[str]], move: Move) -> List[str]:
    src = stacks[move.src]
    if move.count > len(src):
        raise InputFormatError(f"Stack {move.src + 1} holds only {len(src)} crates, cannot move {move.count}")
    taken = src[len(src) - move.count:]
    del src[len(src) - move.count:]
    return taken


def part1(path: Path) -> str:
    stacks, moves = parse_input(path)
    for move in moves:
        # one crate at a time reverses the moved block
        stacks[move.dst].extend(reversed(_take(stacks, move)))
    return _tops(stacks)


def part2(path: Path) -> str:
    stacks, moves = parse_input(path)
    for move in moves:
        stacks[move.dst].extend(_take(stacks, move))
    return _tops(stacks)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
