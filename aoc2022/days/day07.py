# aoc2022/days/day07.py
"""Day 7: No Space Left On Device.

The terminal transcript is replayed into a directory tree; sizes are then
computed bottom-up.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List

from aoc2022.core.errors import InputFormatError
from aoc2022.core.inputs import input_path, read_lines

DAY = 7

SMALL_DIR_LIMIT = 100_000
DISK_SIZE = 70_000_000
REQUIRED_FREE = 30_000_000


@dataclass
class Directory:
    name: str
    dirs: Dict[str, "Directory"] = field(default_factory=dict)
    files: Dict[str, int] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return sum(self.files.values()) + sum(d.size for d in self.dirs.values())

    def walk(self) -> Iterator["Directory"]:
        yield self
        for d in self.dirs.values():
            yield from d.walk()


def replay(lines: Iterable[str]) -> Directory:
    root = Directory("/")
    cwd: List[Directory] = [root]
    for line in lines:
        if not line:
            continue
        if line.startswith("$ "):
            cmd = line[2:]
            if cmd == "ls":
                continue
            if not cmd.startswith("cd "):
                raise InputFormatError("Unknown command", line)
            arg = cmd[3:].strip()
            if not arg:
                raise InputFormatError("Missing command argument", line)
            if arg == "/":
                del cwd[1:]
            elif arg == "..":
                if len(cwd) == 1:
                    raise InputFormatError("Can not navigate above root", line)
                cwd.pop()
            else:
                cwd.append(cwd[-1].dirs.setdefault(arg, Directory(arg)))
            continue

        prefix, sep, name = line.partition(" ")
        if not sep:
            raise InputFormatError("Input was not a listing tuple", line)
        if prefix == "dir":
            cwd[-1].dirs.setdefault(name, Directory(name))
        else:
            try:
                cwd[-1].files[name] = int(prefix)
            except ValueError as e:
                raise InputFormatError("Listing entry has invalid size", line) from e
    return root


def dir_sizes(path: Path) -> List[int]:
    return [d.size for d in replay(read_lines(path)).walk()]


def part1(path: Path) -> int:
    return sum(s for s in dir_sizes(path) if s <= SMALL_DIR_LIMIT)


def part2(path: Path) -> int:
    sizes = dir_sizes(path)
    used = sizes[0]  # root comes first in walk order
    need = REQUIRED_FREE - (DISK_SIZE - used)
    if need <= 0:
        return 0
    return min(s for s in sizes if s >= need)


def main():
    path = input_path(DAY)
    print(f"Answer for part 1: {part1(path)}")
    print(f"Answer for part 2: {part2(path)}")


if __name__ == "__main__":
    main()
