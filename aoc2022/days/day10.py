# aoc2022/days/day10.py
"""Day 10: Cathode-Ray Tube."""

from pathlib import Path
from typing import Iterable, Iterator, Optional

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items

DAY = 10

CRT_WIDTH = 40


def parse_instruction(line: str) -> Optional[int]:
    """None for noop, the operand for addx."""
    if line == "noop":
        return None
    op, sep, arg = line.partition(" ")
    if op != "addx":
        raise InputFormatError("Invalid OpCode in this line", line)
    if not sep:
        raise InputFormatError("Missing parameter in this line", line)
    try:
        return int(arg)
    except ValueError as e:
        raise InputFormatError("Invalid parameter value", line) from e


def run_program(program: Iterable[Optional[int]]) -> Iterator[int]:
    """Value of X during each cycle."""
    x = 1
    for operand in program:
        if operand is None:
            yield x
        else:
            yield x
            yield x
            x += operand


def _register_states(path: Path) -> Iterator[int]:
    return run_program(stream_items(path, parse_instruction, strict=True))


def draw_crt(states: Iterable[int]) -> str:
    out = []
    for cycle, x in enumerate(states):
        col = cycle % CRT_WIDTH
        out.append("#" if x - 1 <= col <= x + 1 else ".")
        if col == CRT_WIDTH - 1:
            out.append("\n")
    return "".join(out)


def part1(path: Path) -> int:
    return sum(cycle * x for cycle, x in enumerate(_register_states(path), start=1)
               if cycle % CRT_WIDTH == 20)


def part2(path: Path) -> str:
    return draw_crt(_register_states(path))


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2:\n{part2(path)}")


if __name__ == "__main__":
    main()
