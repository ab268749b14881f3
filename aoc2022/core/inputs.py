# aoc2022/core/inputs.py
"""
Puzzle input location and line/block streaming.

Input directory:
- ENV: AOC_INPUT_DIR=<dir>
- CLI: --input-dir=<dir>
- default: ./input
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterator, List, TypeVar, Union

from loguru import logger

T = TypeVar("T")
PathLike = Union[str, Path]


def resolve_input_dir() -> Path:
    input_dir = os.getenv("AOC_INPUT_DIR", "input")
    for arg in sys.argv:
        if arg.startswith("--input-dir="):
            input_dir = arg.split("=", 1)[1]
    return Path(input_dir)


INPUT_DIR = resolve_input_dir()


def input_path(day: int) -> Path:
    return INPUT_DIR / f"day{day:02d}.txt"


def read_lines(path: PathLike) -> Iterator[str]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")


def stream_items(path: PathLike, parse: Callable[[str], T], strict: bool = False) -> Iterator[T]:
    """Parse every line of `path`; unparseable lines are skipped unless strict."""
    for lineno, line in enumerate(read_lines(path), start=1):
        try:
            yield parse(line)
        except ValueError as e:
            if strict:
                raise
            logger.debug(f"{path}:{lineno}: skipping line ({e})")


def stream_blocks(lines: Iterator[str]) -> Iterator[List[str]]:
    """Group lines into blocks separated by empty lines."""
    group: List[str] = []
    for line in lines:
        if line == "":
            yield group
            group = []
        else:
            group.append(line)
    if group:
        yield group


def stream_file_blocks(path: PathLike) -> Iterator[List[str]]:
    return stream_blocks(read_lines(path))
