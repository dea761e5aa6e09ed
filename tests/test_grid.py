import unittest

import numpy as np

from Sudoku.grid import (
    Grid, Known, UNKNOWN, IncorrectSize, InvalidDigit, InvalidCharacter,
)
from fixtures import WIKI_PUZZLE, WIKI_SOLUTION, digits


CYCLING = [0, 2, 3, 4, 5, 6, 7, 8, 9] + [1, 2, 3, 4, 5, 6, 7, 8, 9] * 8


class FromDigitsTests(unittest.TestCase):
    def test_maps_zero_to_unknown_and_keeps_order(self):
        grid = Grid.from_digits(CYCLING)

        self.assertEqual(grid.cells[0], UNKNOWN)
        for index, cell in enumerate(grid.cells[1:], 1):
            self.assertEqual(cell, Known(index % 9 + 1))

    def test_wrong_size(self):
        with self.assertRaises(IncorrectSize) as ctx:
            Grid.from_digits(CYCLING[:80])
        self.assertEqual(ctx.exception, IncorrectSize(81, 80))
        self.assertEqual(ctx.exception.expected, 81)
        self.assertEqual(ctx.exception.actual, 80)

    def test_too_long(self):
        with self.assertRaises(IncorrectSize) as ctx:
            Grid.from_digits(CYCLING + [1])
        self.assertEqual(ctx.exception.actual, 82)

    def test_digit_out_of_range(self):
        for bad in (10, -1):
            values = list(CYCLING)
            values[40] = bad
            with self.assertRaises(InvalidDigit) as ctx:
                Grid.from_digits(values)
            self.assertEqual(ctx.exception.value, bad)

    def test_non_integer_digit_is_rejected(self):
        for bad in (2.7, 3.0, True):
            values = [0] * 81
            values[0] = bad
            with self.assertRaises(InvalidDigit) as ctx:
                Grid.from_digits(values)
            self.assertIs(ctx.exception.value, bad)

    def test_numpy_integers_are_accepted(self):
        values = [np.int32(v) for v in CYCLING]
        self.assertEqual(Grid.from_digits(values), Grid.from_digits(CYCLING))

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            Grid.from_digits([])


class FromTextTests(unittest.TestCase):
    def test_dot_is_unknown(self):
        grid = Grid.from_text(".23456789" + "123456789" * 8)
        self.assertEqual(grid, Grid.from_digits(CYCLING))

    def test_whitespace_is_skipped(self):
        text = (". 2 3 4    56789\n"
                "             123456789"
                "123456789\n"
                "             123456789"
                "123456789\n"
                "             123456 \t  \n789"
                "12345678\t 9"
                "12345 6 7 89"
                "12     345678 9")
        self.assertEqual(Grid.from_text(text), Grid.from_digits(CYCLING))

    def test_zero_character_is_unknown(self):
        self.assertEqual(Grid.from_text("0" * 81), Grid.from_text("." * 81))

    def test_invalid_character(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            Grid.from_text(".23r56789" + "123456789" * 8)
        self.assertEqual(ctx.exception, InvalidCharacter("r"))

    def test_first_bad_character_wins_over_size(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            Grid.from_text("12x45y")
        self.assertEqual(ctx.exception.char, "x")

    def test_non_ascii_digits_are_rejected(self):
        with self.assertRaises(InvalidCharacter):
            Grid.from_text("١" + "." * 80)

    def test_size_checked_after_filtering(self):
        with self.assertRaises(IncorrectSize) as ctx:
            Grid.from_text(" . " * 30)
        self.assertEqual(ctx.exception, IncorrectSize(81, 30))


class AccessTests(unittest.TestCase):
    def test_cell_addressing_is_row_major(self):
        grid = Grid.from_text(WIKI_PUZZLE)
        self.assertEqual(grid.cell(0, 0), Known(5))
        self.assertEqual(grid.cell(0, 2), UNKNOWN)
        self.assertEqual(grid.cell(1, 3), Known(1))
        self.assertEqual(grid.cell(8, 8), Known(9))

    def test_set_cell(self):
        grid = Grid.from_text(WIKI_PUZZLE)
        grid.set_cell(0, 2, Known(4))
        self.assertEqual(grid.cells[2], Known(4))
        grid.set_cell(0, 2, UNKNOWN)
        self.assertEqual(grid, Grid.from_text(WIKI_PUZZLE))

    def test_units(self):
        grid = Grid.from_text(WIKI_SOLUTION)
        self.assertEqual([c.digit for c in grid.row(1)], [6, 7, 2, 1, 9, 5, 3, 4, 8])
        self.assertEqual([c.digit for c in grid.column(0)], [5, 6, 1, 8, 4, 7, 9, 2, 3])
        self.assertEqual([c.digit for c in grid.block(1, 1)], [7, 6, 1, 8, 5, 3, 9, 2, 4])

    def test_copy_is_independent(self):
        grid = Grid.from_text(WIKI_PUZZLE)
        clone = grid.copy()
        clone.set_cell(0, 2, Known(4))
        self.assertEqual(grid.cell(0, 2), UNKNOWN)
        self.assertNotEqual(grid, clone)

    def test_progress(self):
        grid = Grid.from_text(WIKI_PUZZLE)
        self.assertEqual(grid.unknown_count(), 51)
        self.assertFalse(grid.is_complete())
        self.assertAlmostEqual(grid.completion_percentage(), 30 / 81)
        self.assertTrue(Grid.from_text(WIKI_SOLUTION).is_complete())


class RenderTests(unittest.TestCase):
    def test_layout(self):
        lines = str(Grid.from_text(WIKI_PUZZLE)).split("\n")

        self.assertEqual(len(lines), 11)
        self.assertEqual(lines[0], "5 3 . | . 7 . | . . .")
        self.assertEqual(lines[2], ". 9 8 | . . . | . 6 .")
        self.assertEqual(lines[3], "-" * 21)
        self.assertEqual(lines[7], "-" * 21)
        self.assertEqual(lines[10], ". . . | . 8 . | . 7 9")

    def test_round_trip_through_text(self):
        grid = Grid.from_text(WIKI_SOLUTION)
        rendered = str(grid).replace("|", " ").replace("-", " ")
        self.assertEqual(Grid.from_text(rendered), grid)


class ArrayTests(unittest.TestCase):
    def test_to_array(self):
        array = Grid.from_text(WIKI_PUZZLE).to_array()
        self.assertEqual(array.shape, (9, 9))
        self.assertEqual(array[0].tolist(), [5, 3, 0, 0, 7, 0, 0, 0, 0])

    def test_from_array(self):
        array = np.array(digits(WIKI_PUZZLE)).reshape(9, 9)
        self.assertEqual(Grid.from_array(array), Grid.from_text(WIKI_PUZZLE))

    def test_from_nested_list(self):
        rows = [digits(WIKI_SOLUTION)[r * 9:(r + 1) * 9] for r in range(9)]
        self.assertEqual(Grid.from_array(rows), Grid.from_text(WIKI_SOLUTION))

    def test_from_array_wrong_shape(self):
        with self.assertRaises(IncorrectSize) as ctx:
            Grid.from_array(np.zeros((8, 9), dtype=int))
        self.assertEqual(ctx.exception, IncorrectSize(81, 72))

    def test_from_float_array_is_rejected(self):
        array = np.zeros((9, 9))
        array[0, 0] = 2.7
        with self.assertRaises(InvalidDigit) as ctx:
            Grid.from_array(array)
        self.assertEqual(ctx.exception.value, 2.7)

    def test_from_nested_list_with_float(self):
        rows = [[0] * 9 for _ in range(9)]
        rows[4][4] = 5.5
        with self.assertRaises(InvalidDigit):
            Grid.from_array(rows)

    def test_from_array_bad_digit(self):
        array = np.zeros((9, 9), dtype=int)
        array[4, 4] = 12
        with self.assertRaises(InvalidDigit):
            Grid.from_array(array)


if __name__ == "__main__":
    unittest.main()
