"""
Core data structures for 9x9 Sudoku grid representation
"""
import numbers
from typing import Iterable, List, Sequence, Union
from dataclasses import dataclass

import numpy as np


# sizes in each dimension
BLOCK_WIDTH = 3
NUM_BLOCKS_1D = 3
GRID_WIDTH = BLOCK_WIDTH * NUM_BLOCKS_1D
GRID_SIZE = GRID_WIDTH * GRID_WIDTH


# -----------------------------------------------------------------------------
# Errors
# -----------------------------------------------------------------------------
class GridError(ValueError):
    """Base class for grid construction failures"""

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((type(self), self.args))


class IncorrectSize(GridError):
    def __init__(self, expected: int, actual: int):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return f"incorrect grid size: expected {self.expected} cells, got {self.actual}"


class InvalidDigit(GridError):
    def __init__(self, value: int):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return f"invalid digit {self.value!r}: cell values must be in 0..9"


class InvalidCharacter(GridError):
    def __init__(self, char: str):
        super().__init__(char)
        self.char = char

    def __str__(self):
        return f"invalid character {self.char!r} in grid text"


# -----------------------------------------------------------------------------
# Cells
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Known:
    """A cell holding a digit 1-9"""
    digit: int

    def __str__(self):
        return str(self.digit)


@dataclass(frozen=True)
class Unknown:
    """An empty cell"""

    def __str__(self):
        return "."


UNKNOWN = Unknown()
Cell = Union[Known, Unknown]


# -----------------------------------------------------------------------------
# Grid
# -----------------------------------------------------------------------------
class Grid:
    """Fixed-size 9x9 grid of cells, stored row-major"""

    def __init__(self, cells: List[Cell]):
        if len(cells) != GRID_SIZE:
            raise IncorrectSize(GRID_SIZE, len(cells))
        self.cells: List[Cell] = cells

    @classmethod
    def from_digits(cls, values: Sequence[int]) -> "Grid":
        """
        Build a grid from 81 integers in row-major order.

        0 marks an unknown cell, 1-9 a known digit. Non-integral values
        (floats, bools) are rejected rather than truncated.
        """
        if len(values) != GRID_SIZE:
            raise IncorrectSize(GRID_SIZE, len(values))

        cells: List[Cell] = []
        for value in values:
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidDigit(value)
            if value == 0:
                cells.append(UNKNOWN)
            elif 1 <= value <= GRID_WIDTH:
                cells.append(Known(int(value)))
            else:
                raise InvalidDigit(value)

        return cls(cells)

    @classmethod
    def from_text(cls, text: Iterable[str]) -> "Grid":
        """
        Parse a grid from text.

        Whitespace is skipped, ASCII digits give their value and '.' marks an
        unknown cell. Anything else raises InvalidCharacter.
        """
        digits: List[int] = []
        for char in text:
            if char.isspace():
                continue
            if char in "0123456789":
                digits.append(ord(char) - ord("0"))
            elif char == ".":
                digits.append(0)
            else:
                raise InvalidCharacter(char)

        return cls.from_digits(digits)

    @classmethod
    def from_array(cls, array) -> "Grid":
        """Build a grid from a 9x9 array-like of ints (0 = unknown)"""
        flat = np.asarray(array).ravel()
        if flat.size != GRID_SIZE:
            raise IncorrectSize(GRID_SIZE, int(flat.size))
        return cls.from_digits(flat.tolist())

    # ---------- access ----------

    def cell(self, i: int, j: int) -> Cell:
        return self.cells[i * GRID_WIDTH + j]

    def set_cell(self, i: int, j: int, value: Cell) -> None:
        self.cells[i * GRID_WIDTH + j] = value

    def row(self, i: int) -> List[Cell]:
        return [self.cell(i, j) for j in range(GRID_WIDTH)]

    def column(self, j: int) -> List[Cell]:
        return [self.cell(i, j) for i in range(GRID_WIDTH)]

    def block(self, bi: int, bj: int) -> List[Cell]:
        """Cells of block (bi, bj), row-major within the block"""
        return [
            self.cell(k, l)
            for k in range(bi * BLOCK_WIDTH, (bi + 1) * BLOCK_WIDTH)
            for l in range(bj * BLOCK_WIDTH, (bj + 1) * BLOCK_WIDTH)
        ]

    def copy(self) -> "Grid":
        return Grid(list(self.cells))

    # ---------- progress ----------

    def unknown_count(self) -> int:
        return sum(1 for c in self.cells if isinstance(c, Unknown))

    def is_complete(self) -> bool:
        """Check if every cell holds a digit"""
        return self.unknown_count() == 0

    def completion_percentage(self) -> float:
        """Get fraction of cells filled"""
        return (GRID_SIZE - self.unknown_count()) / GRID_SIZE

    # ---------- export ----------

    def to_digits(self) -> List[int]:
        return [c.digit if isinstance(c, Known) else 0 for c in self.cells]

    def to_array(self) -> np.ndarray:
        """9x9 int matrix, 0 for unknown cells"""
        return np.array(self.to_digits(), dtype=np.int64).reshape(GRID_WIDTH, GRID_WIDTH)

    def __eq__(self, other):
        return isinstance(other, Grid) and self.cells == other.cells

    def __str__(self):
        lines = []
        for i in range(GRID_WIDTH):
            parts = []
            for j in range(GRID_WIDTH):
                parts.append(str(self.cell(i, j)))
                if j in (2, 5):
                    parts.append("|")
            lines.append(" ".join(parts))
            if i in (2, 5):
                lines.append("-" * 21)
        return "\n".join(lines)

    def __repr__(self):
        return f"Grid(givens={GRID_SIZE - self.unknown_count()}, unknown={self.unknown_count()})"
