"""
Backtracking solver for 9x9 Sudoku

Strategy:
1. Reject grids whose givens already clash (no completion can exist)
2. Pick the first unknown cell in row-major order
3. Try digits 1..9 in ascending order, skipping any already in the
   cell's row, column or block
4. Commit, recurse, and put the cell back to unknown if the branch fails

No propagation and no variable ordering beyond row-major, so the result is
deterministic: the first completion in scan order.
"""

from typing import Dict, Optional, Tuple

from .grid import Grid, Known, Unknown, UNKNOWN, GRID_WIDTH
from .constraints import ConstraintChecker


Position = Tuple[int, int]


class BacktrackingSolver:
    def __init__(self, grid: Grid, verbose: bool = False):
        self.grid = grid
        self.verbose = verbose
        self.stats: Dict[str, int] = {
            'search_moves': 0,
            'backtracks': 0,
            'total_attempts': 0,
            'dead_ends': 0,
            'max_depth': 0,
        }

    # -------------------------------------------------------------------------
    # Main solving driver
    # -------------------------------------------------------------------------
    def solve(self) -> bool:
        if self.verbose:
            print(f"Starting backtracking solver: {self.grid!r}")

        if not ConstraintChecker.givens_consistent(self.grid):
            if self.verbose:
                for kind, index, digit in ConstraintChecker.find_conflicts(self.grid):
                    print(f"  Clashing givens: digit {digit} repeated in {kind} {index}")
                print("\n✗ No solution found")
            return False

        result = self._backtrack(0)

        if self.verbose:
            print("\n✓ Puzzle solved!" if result else "\n✗ No solution found")
            self.print_stats()

        return result

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------
    def _find_unassigned(self) -> Optional[Position]:
        """First unknown cell in row-major order, or None if the grid is full."""
        for i in range(GRID_WIDTH):
            for j in range(GRID_WIDTH):
                if isinstance(self.grid.cell(i, j), Unknown):
                    return (i, j)
        return None

    def _backtrack(self, depth: int) -> bool:
        self.stats['max_depth'] = max(self.stats['max_depth'], depth)

        position = self._find_unassigned()
        if position is None:
            return ConstraintChecker.is_valid(self.grid)

        i, j = position
        if self.verbose:
            print(f"{'  ' * depth}Trying cell ({i},{j})")

        for x in range(1, GRID_WIDTH + 1):
            self.stats['total_attempts'] += 1
            if not ConstraintChecker.is_safe(self.grid, i, j, x):
                continue

            self.grid.set_cell(i, j, Known(x))
            self.stats['search_moves'] += 1
            if self.verbose:
                print(f"{'  ' * depth}  Placing {x}")

            try:
                if self._backtrack(depth + 1):
                    return True
            except BaseException:
                self.grid.set_cell(i, j, UNKNOWN)
                raise

            # this frame only undoes its own cell; deeper frames undid theirs
            self.grid.set_cell(i, j, UNKNOWN)
            self.stats['backtracks'] += 1
            if self.verbose:
                print(f"{'  ' * depth}  Backtrack")

        self.stats['dead_ends'] += 1
        return False

    # -------------------------------------------------------------------------
    # Stats
    # -------------------------------------------------------------------------
    def print_stats(self) -> None:
        """Print solving statistics."""
        print("\nSolving Statistics:")
        print(f"  Search moves: {self.stats['search_moves']}")
        print(f"  Backtracks: {self.stats['backtracks']}")
        print(f"  Dead ends: {self.stats['dead_ends']}")
        print(f"  Total attempts: {self.stats['total_attempts']}")
        print(f"  Max depth: {self.stats['max_depth']}")
        print(f"  Completion: {self.grid.completion_percentage():.1%}")


def solve(grid: Grid) -> bool:
    """
    Solve grid in place.

    Returns True and leaves the completion in grid, or returns False and
    leaves grid as it was.
    """
    return BacktrackingSolver(grid).solve()
