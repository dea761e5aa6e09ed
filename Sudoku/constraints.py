"""
Constraint checking for the Sudoku solver

Key points:
 - is_valid certifies a COMPLETE grid: any unknown cell fails it
 - is_safe tolerates unknown cells and is what the search prunes with
 - givens_consistent looks only at known cells, so a partial puzzle with a
   clashing pair of clues can be rejected before searching
"""

from typing import List, Tuple

from .grid import Grid, Cell, Known, Unknown, BLOCK_WIDTH, GRID_WIDTH, NUM_BLOCKS_1D


Conflict = Tuple[str, int, int]


# -----------------------------------------------------------------------------
# Constraint Checking
# -----------------------------------------------------------------------------
class ConstraintChecker:
    """Validates grids and candidate placements against Sudoku rules."""

    # ---------- complete-grid validation ----------

    @staticmethod
    def _unit_complete_and_distinct(cells: List[Cell]) -> bool:
        seen = set()
        for cell in cells:
            if isinstance(cell, Unknown):
                return False
            if cell.digit in seen:
                return False
            seen.add(cell.digit)
        return True

    @staticmethod
    def check_rows(grid: Grid) -> bool:
        return all(
            ConstraintChecker._unit_complete_and_distinct(grid.row(i))
            for i in range(GRID_WIDTH)
        )

    @staticmethod
    def check_columns(grid: Grid) -> bool:
        return all(
            ConstraintChecker._unit_complete_and_distinct(grid.column(j))
            for j in range(GRID_WIDTH)
        )

    @staticmethod
    def check_blocks(grid: Grid) -> bool:
        for bi in range(NUM_BLOCKS_1D):
            for bj in range(NUM_BLOCKS_1D):
                if not ConstraintChecker._unit_complete_and_distinct(grid.block(bi, bj)):
                    return False
        return True

    @staticmethod
    def is_valid(grid: Grid) -> bool:
        """True iff every row, column and block holds nine distinct digits."""
        return (
            ConstraintChecker.check_rows(grid)
            and ConstraintChecker.check_columns(grid)
            and ConstraintChecker.check_blocks(grid)
        )

    # ---------- candidate checks (used during search) ----------

    @staticmethod
    def value_in_row(grid: Grid, i: int, x: int) -> bool:
        return any(isinstance(c, Known) and c.digit == x for c in grid.row(i))

    @staticmethod
    def value_in_column(grid: Grid, j: int, x: int) -> bool:
        return any(isinstance(c, Known) and c.digit == x for c in grid.column(j))

    @staticmethod
    def value_in_block(grid: Grid, bi: int, bj: int, x: int) -> bool:
        return any(isinstance(c, Known) and c.digit == x for c in grid.block(bi, bj))

    @staticmethod
    def is_safe(grid: Grid, i: int, j: int, x: int) -> bool:
        """Can digit x go at (i, j) without repeating in its row, column or block?"""
        return (
            not ConstraintChecker.value_in_row(grid, i, x)
            and not ConstraintChecker.value_in_column(grid, j, x)
            and not ConstraintChecker.value_in_block(grid, i // BLOCK_WIDTH, j // BLOCK_WIDTH, x)
        )

    # ---------- partial-grid consistency ----------

    @staticmethod
    def _duplicate_digits(cells: List[Cell]) -> List[int]:
        seen = set()
        dupes: List[int] = []
        for cell in cells:
            if isinstance(cell, Known):
                if cell.digit in seen and cell.digit not in dupes:
                    dupes.append(cell.digit)
                seen.add(cell.digit)
        return dupes

    @staticmethod
    def find_conflicts(grid: Grid) -> List[Conflict]:
        """
        List every unit holding the same known digit twice.

        Returns (kind, index, digit) tuples where kind is 'row', 'column' or
        'block' and blocks are numbered 0..8 row-major. Unknown cells are
        ignored.
        """
        conflicts: List[Conflict] = []
        for i in range(GRID_WIDTH):
            for d in ConstraintChecker._duplicate_digits(grid.row(i)):
                conflicts.append(("row", i, d))
        for j in range(GRID_WIDTH):
            for d in ConstraintChecker._duplicate_digits(grid.column(j)):
                conflicts.append(("column", j, d))
        for bi in range(NUM_BLOCKS_1D):
            for bj in range(NUM_BLOCKS_1D):
                for d in ConstraintChecker._duplicate_digits(grid.block(bi, bj)):
                    conflicts.append(("block", bi * NUM_BLOCKS_1D + bj, d))
        return conflicts

    @staticmethod
    def givens_consistent(grid: Grid) -> bool:
        return not ConstraintChecker.find_conflicts(grid)


def is_valid(grid: Grid) -> bool:
    return ConstraintChecker.is_valid(grid)
