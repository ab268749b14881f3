# aoc2022/days/day11.py
"""Day 11: Monkey in the Middle.

Part 2 keeps worry levels modulo the lcm of every divisibility test so the
numbers stay small while every test still gives the same answer.
"""

import heapq
import math
import operator
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_file_blocks

DAY = 11


@dataclass
class Monkey:
    items: List[int]
    operation: Callable[[int], int]
    divisor: int
    if_true: int
    if_false: int
    inspected: int = 0

    def target(self, worry: int) -> int:
        return self.if_true if worry % self.divisor == 0 else self.if_false


def _last_int(line: str, what: str) -> int:
    try:
        return int(line.rsplit(" ", 1)[-1])
    except ValueError as e:
        raise InputFormatError(f"Could not find {what}", line) from e


def parse_operation(line: str) -> Callable[[int], int]:
    _, sep, expr = line.partition("new = ")
    parts = expr.split()
    if not sep or len(parts) != 3 or parts[0] != "old" or parts[1] not in ("+", "*"):
        raise InputFormatError("No operator in operation descriptor", line)
    op = operator.add if parts[1] == "+" else operator.mul
    if parts[2] == "old":
        return lambda old: op(old, old)
    try:
        operand = int(parts[2])
    except ValueError as e:
        raise InputFormatError("Invalid operand", line) from e
    return lambda old: op(old, operand)


def parse_monkey(block: List[str]) -> Monkey:
    if len(block) != 6:
        raise InputFormatError("Not enough lines in monkey descriptor", " / ".join(block))
    _, sep, items = block[1].partition(":")
    if not sep:
        raise InputFormatError("Invalid item descriptor line", block[1])
    try:
        starting = [int(i) for i in items.split(",") if i.strip()]
    except ValueError as e:
        raise InputFormatError("Invalid item number", block[1]) from e
    return Monkey(
        items=starting,
        operation=parse_operation(block[2]),
        divisor=_last_int(block[3], "a divisor"),
        if_true=_last_int(block[4], "the true case"),
        if_false=_last_int(block[5], "the false case"),
    )


def play(monkeys: List[Monkey], rounds: int, relief: Callable[[int], int]) -> int:
    for _ in range(rounds):
        for monkey in monkeys:
            for item in monkey.items:
                worry = relief(monkey.operation(item))
                monkeys[monkey.target(worry)].items.append(worry)
            monkey.inspected += len(monkey.items)
            monkey.items = []
    first, second = heapq.nlargest(2, (m.inspected for m in monkeys))
    return first * second


def _monkeys(path: Path) -> List[Monkey]:
    return [parse_monkey(block) for block in stream_file_blocks(path)]


def part1(path: Path) -> int:
    return play(_monkeys(path), 20, lambda w: w // 3)


def part2(path: Path) -> int:
    monkeys = _monkeys(path)
    ring = math.lcm(*(m.divisor for m in monkeys))
    return play(monkeys, 10_000, lambda w: w % ring)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
