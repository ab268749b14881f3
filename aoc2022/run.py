# aoc2022/run.py
#!/usr/bin/env python3
"""
Run one or more puzzle days and print both answers.

    python -m aoc2022.run 1 12 --input-dir=input
    python -m aoc2022.run --all --log-level DEBUG
"""

import argparse
import importlib
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from aoc2022.core import inputs
from aoc2022.core.errors import FieldError, InputFormatError
from aoc2022.core.log import setup_logger

DAYS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 17, 18]


def load_day(day: int):
    return importlib.import_module(f"aoc2022.days.day{day:02d}")


def solve(day: int) -> None:
    module = load_day(day)
    path = inputs.input_path(day)
    logger.info(f"Day {day:02d}: reading {path}")
    print(f"Day {day:02d}")
    print(f"Answer for part 1: {module.part1(path)}")
    print(f"Answer for part 2: {module.part2(path)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Advent of Code 2022 solutions")
    parser.add_argument("days", nargs="*", type=int, metavar="DAY",
                        help=f"days to run, any of {DAYS}")
    parser.add_argument("--all", action="store_true", help="run every implemented day")
    parser.add_argument("--input-dir", type=str, default=None,
                        help="directory holding dayNN.txt files (default: $AOC_INPUT_DIR or ./input)")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.days and not args.all:
        parser.error("give at least one DAY or --all")
    unknown = [d for d in args.days if d not in DAYS]
    if unknown:
        parser.error(f"no solution for day(s) {unknown}, pick from {DAYS}")

    setup_logger(args.log_level)
    if args.input_dir:
        inputs.INPUT_DIR = Path(args.input_dir)

    status = 0
    for day in (DAYS if args.all else args.days):
        try:
            solve(day)
        except FileNotFoundError as e:
            logger.error(f"Day {day:02d}: missing input {e.filename}")
            status = 1
        except (InputFormatError, FieldError) as e:
            logger.error(f"Day {day:02d}: bad input: {e}")
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
