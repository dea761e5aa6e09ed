import json
from typing import Dict, Optional
from datetime import datetime

from .grid import Grid, GRID_SIZE
from .constraints import ConstraintChecker


class SolutionFormatter:
    """Formats puzzle solutions for output"""

    @staticmethod
    def format_solution_json(puzzle: Grid, solution: Grid, stats: Optional[Dict] = None) -> Dict:
        """
        Format solution as JSON

        `puzzle` is the grid as given, `solution` the grid after solving.
        Both are written as 9x9 nested lists with 0 for unknown cells.
        """
        return {
            'puzzle_info': {
                'total_cells': GRID_SIZE,
                'givens': GRID_SIZE - puzzle.unknown_count(),
                'solved': ConstraintChecker.is_valid(solution),
                'completion': solution.completion_percentage(),
                'timestamp': datetime.now().isoformat()
            },
            'solving_stats': dict(stats or {}),
            'puzzle': puzzle.to_array().tolist(),
            'solution': solution.to_array().tolist(),
        }

    @staticmethod
    def format_solution_human_readable(puzzle: Grid, solution: Grid, solved: bool) -> str:
        """
        Format solution as human-readable text
        """
        lines = []
        lines.append("=" * 40)
        lines.append("SUDOKU SOLUTION")
        lines.append("=" * 40)
        lines.append(f"\nPuzzle has {GRID_SIZE - puzzle.unknown_count()} givens, "
                     f"{puzzle.unknown_count()} unknown cells\n")

        lines.append("PUZZLE:")
        lines.append(str(puzzle))
        lines.append("")

        if solved:
            lines.append("SOLUTION:")
            lines.append(str(solution))
        else:
            lines.append("NO SOLUTION FOUND")
            for kind, index, digit in ConstraintChecker.find_conflicts(puzzle):
                lines.append(f"  digit {digit} repeated in {kind} {index}")

        lines.append("=" * 40)

        return "\n".join(lines)

    @staticmethod
    def save_solution(puzzle: Grid, solution: Grid, stats: Dict, output_path: str):
        """
        Save solution to JSON file
        """
        document = SolutionFormatter.format_solution_json(puzzle, solution, stats)

        with open(output_path, 'w') as f:
            json.dump(document, f, indent=2)

        print(f"\n✓ Solution saved to: {output_path}")

    @staticmethod
    def save_human_readable(puzzle: Grid, solution: Grid, solved: bool, output_path: str):
        """
        Save human-readable solution to text file
        """
        text = SolutionFormatter.format_solution_human_readable(puzzle, solution, solved)

        with open(output_path, 'w') as f:
            f.write(text)

        print(f"✓ Human-readable solution saved to: {output_path}")
