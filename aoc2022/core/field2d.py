#!/usr/bin/env python3
"""
Field2D: flat, row-major 2D storage shared by the grid puzzles.

- Cell (x, y) lives at values[y * width + x].
- height is derived from len(values) // width and never stored.
- Neighbour enumeration is clipped at the edges (no wraparound):
    orthogonal: right, down, left, up
    diagonal:   up-left, up-right, down-right, down-left (after the orthogonal ones)
"""

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from aoc2022.core.errors import EmptyFieldError, FieldError, OutOfBoundsError, RaggedRowsError
from aoc2022.core.types import Cell

T = TypeVar("T")
R = TypeVar("R")

ORTHOGONAL: Tuple[Cell, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
DIAGONAL: Tuple[Cell, ...] = ((-1, -1), (1, -1), (1, 1), (-1, 1))


def iter_neighbors(width: int, height: int, x: int, y: int, diagonal: bool = False) -> Iterator[Cell]:
    """Yield the in-bounds neighbours of (x, y) for a field of the given size."""
    offsets = ORTHOGONAL + DIAGONAL if diagonal else ORTHOGONAL
    for dx, dy in offsets:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            yield (nx, ny)


@dataclass
class Field2D(Generic[T]):
    values: List[T]
    width: int
    default_factory: Optional[Callable[[], T]] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.width <= 0:
            raise FieldError(f"Field width must be positive, got {self.width}")
        if len(self.values) % self.width != 0:
            raise FieldError(
                f"{len(self.values)} values do not fill rows of width {self.width}"
            )

    # -------------------- construction --------------------

    @classmethod
    def parse(cls, rows: Iterable[R], parser: Callable[[R], Iterable[T]] = list) -> "Field2D[T]":
        """Build a field from rows; the first row fixes the width for good."""
        values: List[T] = []
        width = None
        for idx, row in enumerate(rows):
            cells = list(parser(row))
            if width is None:
                width = len(cells)
                if width == 0:
                    raise EmptyFieldError()
            elif len(cells) != width:
                raise RaggedRowsError(idx, width, len(cells))
            values.extend(cells)
        if width is None:
            raise EmptyFieldError()
        return cls(values, width)

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> "Field2D[T]":
        return cls([value] * (width * height), width)

    @classmethod
    def empty(cls, width: int, height: int, default_factory: Callable[[], T] = int) -> "Field2D[T]":
        res = cls([], width, default_factory)
        for _ in range(height):
            res.add_row()
        return res

    def add_row(self) -> None:
        if self.default_factory is None:
            raise FieldError("Field has no default_factory to build a new row from")
        self.values.extend(self.default_factory() for _ in range(self.width))

    # -------------------- shape --------------------

    @property
    def height(self) -> int:
        return len(self.values) // self.width

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def __len__(self) -> int:
        return len(self.values)

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    # -------------------- access --------------------

    def _index(self, c: Cell) -> int:
        if not self.in_bounds(c):
            raise OutOfBoundsError(c, self.size)
        x, y = c
        return y * self.width + x

    def __getitem__(self, c: Cell) -> T:
        return self.values[self._index(c)]

    def __setitem__(self, c: Cell, value: T) -> None:
        self.values[self._index(c)] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def iter_with_position(self) -> Iterator[Tuple[Cell, T]]:
        w = self.width
        for idx, v in enumerate(self.values):
            yield (idx % w, idx // w), v

    def rows(self) -> Iterator[List[T]]:
        w = self.width
        for start in range(0, len(self.values), w):
            yield self.values[start:start + w]

    # -------------------- neighbours --------------------

    def neighbors(self, x: int, y: int, diagonal: bool = False) -> Iterator[Cell]:
        return iter_neighbors(self.width, self.height, x, y, diagonal)

    def neighbors_diag(self, x: int, y: int) -> Iterator[Cell]:
        return iter_neighbors(self.width, self.height, x, y, True)
