#!/usr/bin/env python3
"""
Sudoku Solver - Main Entry Point

Usage:
    python -m Sudoku.main "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
    python -m Sudoku.main data/puzzles/wikipedia.txt --output data/debug
    python -m Sudoku.main --all data/puzzles
"""

import argparse
import sys
import traceback
from pathlib import Path
from typing import List, Optional, Tuple

from .grid import Grid, GridError
from .constraints import ConstraintChecker
from .solver import BacktrackingSolver
from .output import SolutionFormatter

# ============================================================================
# CONFIGURATION
# ============================================================================
PUZZLE_DIR = "data/puzzles"   # Directory scanned by --all
OUTPUT_DIR = None             # Where solution.json / solution.txt go (None = don't write)
VERBOSE = False               # Print the search trace and statistics
# ============================================================================


def load_grid(source: str) -> Grid:
    """
    Read a puzzle from a text file path, or parse `source` itself as puzzle text.
    """
    path = Path(source)
    if path.suffix == ".txt" and path.is_file():
        return Grid.from_text(path.read_text())
    return Grid.from_text(source)


def solve_puzzle(source: str, output_dir: Optional[str] = OUTPUT_DIR, verbose: bool = VERBOSE,
                 name: str = "puzzle") -> Tuple[bool, Optional[Grid], Optional[BacktrackingSolver]]:
    """
    Solve a single puzzle and optionally save results.

    Args:
        source: Puzzle text or path to a .txt file holding it
        output_dir: Directory for solution files; each puzzle gets a <name>/ subfolder
        verbose: Print search trace and statistics
        name: Subfolder name under output_dir

    Returns:
        (solved, grid, solver). grid and solver are None when the input is malformed.
    """
    try:
        grid = load_grid(source)
    except GridError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False, None, None

    puzzle = grid.copy()
    print(grid)
    print(f"valid: {ConstraintChecker.is_valid(grid)}")

    solver = BacktrackingSolver(grid, verbose=verbose)
    try:
        solved = solver.solve()
    except KeyboardInterrupt:
        print(f"\n\n{'='*40}")
        print("⚠ Solving interrupted by user (Ctrl+C)")
        print(f"{'='*40}")
        solver.print_stats()
        return False, grid, solver

    print(f"solved: {solved}")
    print(grid)

    if output_dir is not None:
        out = Path(output_dir) / name
        out.mkdir(parents=True, exist_ok=True)
        SolutionFormatter.save_solution(puzzle, grid, solver.stats, str(out / "solution.json"))
        SolutionFormatter.save_human_readable(puzzle, grid, solved, str(out / "solution.txt"))

    return solved, grid, solver


def solve_all_puzzles(data_dir: str = PUZZLE_DIR, output_dir: Optional[str] = OUTPUT_DIR,
                      verbose: bool = VERBOSE) -> List[dict]:
    """
    Solve every *.txt puzzle in data_dir and print a summary.
    """
    data_path = Path(data_dir)
    if not data_path.exists():
        print(f"Error: Directory not found: {data_dir}", file=sys.stderr)
        return []

    puzzle_files = sorted(data_path.glob("*.txt"))
    if not puzzle_files:
        print(f"No puzzles found in {data_dir}")
        return []

    print(f"\nFound {len(puzzle_files)} puzzle(s) to solve")

    results = []
    for i, puzzle_file in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Solving {puzzle_file.name}...")

        try:
            solved, grid, solver = solve_puzzle(str(puzzle_file), output_dir=output_dir,
                                                verbose=verbose, name=puzzle_file.stem)
        except Exception as e:
            print(f"\nError while solving {puzzle_file}: {e}")
            traceback.print_exc()
            solved, grid, solver = False, None, None

        results.append({
            'file': puzzle_file.name,
            'solved': bool(solved),
            'malformed': grid is None,
            'backtracks': solver.stats['backtracks'] if solver else None,
            'search_moves': solver.stats['search_moves'] if solver else None,
        })

        status = "✓ SOLVED" if solved else "✗ FAILED"
        print(f"  {status}")

    # ---------------------------
    # Print summary
    # ---------------------------
    solved_count = sum(1 for r in results if r['solved'])
    total_count = len(results)
    solve_rate = (solved_count / total_count * 100) if total_count > 0 else 0

    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"Solved: {solved_count}/{total_count} puzzles ({solve_rate:.1f}%)")

    for r in results:
        status = "✓" if r['solved'] else "✗"
        print(f"{status} {r['file']:30s}", end="")
        if r['solved']:
            print(f" - {r['search_moves']} moves, {r['backtracks']} backtracks")
        elif r['malformed']:
            print(" - Malformed")
        else:
            print(" - No solution")

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        description="Validate and solve 9x9 Sudoku puzzles by backtracking.")
    parser.add_argument("puzzle", nargs="?",
                        help="81-cell puzzle text ('.' or 0 for blanks) or path to a .txt file")
    parser.add_argument("--all", nargs="?", const=PUZZLE_DIR, default=None, metavar="DIR",
                        help=f"solve every .txt puzzle in DIR (default: {PUZZLE_DIR})")
    parser.add_argument("--output", default=OUTPUT_DIR, metavar="DIR",
                        help="write solution.json and solution.txt under DIR")
    parser.add_argument("--verbose", "-v", action="store_true", default=VERBOSE,
                        help="print the search trace and statistics")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.all is not None and args.puzzle is not None:
        parser.error("give either a puzzle or --all, not both")

    if args.all is not None:
        results = solve_all_puzzles(args.all, output_dir=args.output, verbose=args.verbose)
        return 0 if results and all(r['solved'] for r in results) else 1

    if args.puzzle is None:
        print("Error: no sudoku provided on the command line", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    source = Path(args.puzzle)
    name = source.stem if source.suffix == ".txt" else "puzzle"
    solved, _, _ = solve_puzzle(args.puzzle, output_dir=args.output, verbose=args.verbose, name=name)
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
