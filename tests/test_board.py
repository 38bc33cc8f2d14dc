import unittest

from game import SubBoard, WIN_LINES, check_win, other_mark


def make_board(rows):
    flat = []
    for r in rows:
        assert len(r) == 3
        flat.extend(None if c == '.' else c for c in r)
    return SubBoard(cells=tuple(flat))


class TestSubBoard(unittest.TestCase):
    def test_given_new_board_when_inspected_then_empty_and_open(self):
        b = SubBoard()
        self.assertEqual(len(b.cells), 9)
        self.assertFalse(b.completed)
        self.assertIsNone(b.winner)
        self.assertEqual(len(list(b.empty_cells())), 9)
        self.assertEqual(b.index(1, 2), 5)

    def test_given_every_line_when_filled_with_one_mark_then_detected(self):
        self.assertEqual(len(WIN_LINES), 8)
        for line in WIN_LINES:
            cells = [None] * 9
            for i in line:
                cells[i] = 'O'
            winner, found = check_win(tuple(cells))
            self.assertEqual(winner, 'O')
            self.assertEqual(found, line)

    def test_given_mixed_line_when_checked_then_no_winner(self):
        b = make_board(['XXO', '...', '...'])
        self.assertEqual(check_win(b.cells), (None, None))

    def test_given_two_in_row_when_third_placed_then_board_completed_with_winner(self):
        b = make_board(['XX.', 'OO.', '...'])
        after = b.place(0, 2, 'X')
        self.assertTrue(after.completed)
        self.assertEqual(after.winner, 'X')
        self.assertEqual(after.win_line, (0, 1, 2))
        # Original snapshot is untouched
        self.assertIsNone(b.at(0, 2))
        self.assertFalse(b.completed)

    def test_given_last_cell_without_line_when_placed_then_completed_as_draw(self):
        b = make_board(['XOX', 'XOO', 'OX.'])
        after = b.place(2, 2, 'X')
        self.assertTrue(after.completed)
        self.assertIsNone(after.winner)
        self.assertIsNone(after.win_line)
        self.assertTrue(after.is_full())

    def test_given_board_when_pretty_then_marks_and_dots_rendered(self):
        b = make_board(['X..', '.O.', '...'])
        self.assertEqual(b.pretty(), "X . .\n. O .\n. . .")

    def test_given_mark_when_flipped_then_opponent(self):
        self.assertEqual(other_mark('X'), 'O')
        self.assertEqual(other_mark('O'), 'X')


if __name__ == '__main__':
    unittest.main(verbosity=2)
