# aoc2022/days/day02.py
"""Day 2: Rock Paper Scissors."""

from enum import Enum
from pathlib import Path
from typing import Tuple

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, stream_items

DAY = 2


class Shape(Enum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def base_score(self) -> int:
        return self.value

    def beats(self) -> "Shape":
        return _BEATS[self]

    def beaten_by(self) -> "Shape":
        return _BEATEN_BY[self]

    def can_beat(self, other: "Shape") -> bool:
        return _BEATS[self] is other


_BEATS = {Shape.ROCK: Shape.SCISSORS, Shape.PAPER: Shape.ROCK, Shape.SCISSORS: Shape.PAPER}
_BEATEN_BY = {v: k for k, v in _BEATS.items()}

SHAPE_SYMBOLS = {
    "A": Shape.ROCK, "X": Shape.ROCK,
    "B": Shape.PAPER, "Y": Shape.PAPER,
    "C": Shape.SCISSORS, "Z": Shape.SCISSORS,
}


class GameGoal(Enum):
    LOSE = "X"
    DRAW = "Y"
    WIN = "Z"


def parse_shape(symbol: str) -> Shape:
    try:
        return SHAPE_SYMBOLS[symbol]
    except KeyError:
        raise InputFormatError("Invalid shape symbol", symbol) from None


def parse_goal(symbol: str) -> GameGoal:
    try:
        return GameGoal(symbol)
    except ValueError:
        raise InputFormatError("Invalid game goal symbol", symbol) from None


def _split(line: str) -> Tuple[str, str]:
    parts = line.split(" ")
    if len(parts) != 2:
        raise InputFormatError("Invalid strategy descriptor", line)
    return parts[0], parts[1]


def parse_prediction(line: str) -> Tuple[Shape, Shape]:
    opponent, me = _split(line)
    return parse_shape(opponent), parse_shape(me)


def parse_strategy(line: str) -> Tuple[Shape, GameGoal]:
    opponent, goal = _split(line)
    return parse_shape(opponent), parse_goal(goal)


def outcome_score(opponent: Shape, me: Shape) -> int:
    if opponent is me:
        return 3
    return 6 if me.can_beat(opponent) else 0


def score(opponent: Shape, me: Shape) -> int:
    return me.base_score + outcome_score(opponent, me)


def choose_shape(opponent: Shape, goal: GameGoal) -> Shape:
    if goal is GameGoal.LOSE:
        return opponent.beats()
    if goal is GameGoal.WIN:
        return opponent.beaten_by()
    return opponent


def part1(path: Path) -> int:
    return sum(score(*game) for game in stream_items(path, parse_prediction, strict=True))


def part2(path: Path) -> int:
    return sum(score(opponent, choose_shape(opponent, goal))
               for opponent, goal in stream_items(path, parse_strategy, strict=True))


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
