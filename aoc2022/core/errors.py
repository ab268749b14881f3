# aoc2022/core/errors.py
"""Exceptions shared by the field, the search and the day solvers."""


class FieldError(ValueError):
    """A Field2D could not be built or extended consistently."""


class EmptyFieldError(FieldError):
    def __init__(self):
        super().__init__("Cannot build a field from empty input")


class RaggedRowsError(FieldError):
    def __init__(self, row: int, expected: int, got: int):
        self.row = row
        self.expected = expected
        self.got = got
        super().__init__(f"Row {row} has {got} cells, expected {expected}")


class OutOfBoundsError(IndexError):
    def __init__(self, cell, size):
        self.cell = cell
        self.size = size
        super().__init__(f"Cell {cell} outside field of size {size[0]}x{size[1]}")


class InputFormatError(ValueError):
    """A puzzle input line or block does not match the expected grammar."""

    def __init__(self, message: str, text: str = ""):
        self.text = text
        super().__init__(f"{message} '{text}'" if text else message)
