"""
Sudoku Solver Package

Grid parsing, rule validation and plain backtracking search for 9x9 Sudoku.
"""

from .grid import (
    Grid, Known, Unknown, UNKNOWN, Cell,
    GridError, IncorrectSize, InvalidDigit, InvalidCharacter,
)
from .constraints import ConstraintChecker, is_valid
from .solver import BacktrackingSolver, solve
from .output import SolutionFormatter

__version__ = "1.0.0"
__all__ = [
    'Grid',
    'Known',
    'Unknown',
    'UNKNOWN',
    'Cell',
    'GridError',
    'IncorrectSize',
    'InvalidDigit',
    'InvalidCharacter',
    'ConstraintChecker',
    'is_valid',
    'BacktrackingSolver',
    'solve',
    'SolutionFormatter'
]
