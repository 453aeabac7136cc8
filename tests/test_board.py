import random
import unittest
from unittest.mock import patch

from game.board import Board
from game.errors import LengthMismatch, UnknownColor
from game.ruleset import make_rules


def _board(secret, max_attempts=10, locale="en"):
    board = Board(rules=make_rules(len(secret), max_attempts, locale),
                  rng=random.Random(0))
    board.initialize_game()
    board.secret_code.sequence = [board.generator.resolve(c) for c in secret]
    return board


class TestBoard(unittest.TestCase):
    def test_initialize_draws_distinct_secret(self):
        board = Board(rules=make_rules(code_length=7), rng=random.Random(5))
        board.initialize_game()
        secret = board.secret_code.sequence
        self.assertEqual(len(secret), 7)
        self.assertEqual(len(set(secret)), 7)
        self.assertTrue(set(secret) <= set(board.rules["colors"]))

    def test_win(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        self.assertEqual(board.make_guess("Blue,Red,Yellow,Purple"), (0, 3))
        self.assertFalse(board.is_over)
        self.assertEqual(board.make_guess(["red", "blue", "green", "yellow"]), (4, 0))
        self.assertTrue(board.is_won)
        self.assertTrue(board.is_over)
        self.assertEqual(board.current_attempt, 2)

    def test_win_on_last_attempt(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        for _ in range(9):
            board.make_guess("Pink,Pink,Pink,Pink")
        self.assertFalse(board.is_over)
        board.make_guess("Red,Blue,Green,Yellow")
        self.assertTrue(board.is_won)

    def test_loss_after_all_attempts(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        for _ in range(10):
            board.make_guess("Pink,White,Black,Brown")
        self.assertTrue(board.is_over)
        self.assertFalse(board.is_won)
        self.assertEqual(board.remaining_attempts(), 0)
        self.assertEqual(board.reveal_code(), "Red, Blue, Green, Yellow")

    def test_rejected_guess_does_not_use_attempt(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        with self.assertRaises(LengthMismatch):
            board.make_guess("Red,Blue")
        with self.assertRaises(UnknownColor):
            board.make_guess("Red,Blue,Green,Cyan")
        self.assertEqual(board.current_attempt, 0)
        self.assertEqual(board.get_feedback_history(), [])

    def test_french_board_accepts_french_names(self):
        board = _board(["Rouge", "Bleu", "Vert", "Jaune"], locale="fr")
        self.assertEqual(board.make_guess("rouge,vert,bleu,noir"), (1, 2))
        with self.assertRaises(UnknownColor):
            board.make_guess("Red,Blue,Green,Yellow")

    def test_secret_kept_as_canonical_ids(self):
        board = Board(rules=make_rules(locale="fr"), rng=random.Random(8))
        board.initialize_game()
        ids = board.secret_code.sequence
        self.assertTrue(set(ids) <= set(board.rules["colors"]))
        names = board.secret_code.display_names()
        self.assertEqual(board.reveal_code(), ", ".join(names))
        self.assertTrue(set(names) <= set(board.palette()))
        self.assertEqual(board.make_guess([n.upper() for n in names]), (4, 0))

    def test_history(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        board.make_guess("Red,Red,Red,Red")
        self.assertEqual(board.get_feedback_history(),
                         [(["Red", "Red", "Red", "Red"], (1, 0))])

    def test_format_feedback_bucket_order(self):
        board = _board(["Red", "Blue", "Green", "Yellow", "Pink"])
        self.assertEqual(board.format_feedback(2, 1, colored=False), "■ ■ ■ ■ ■")
        colored = board.format_feedback(2, 1)
        green = board.rules["display"]["bucket_colors"]["well_placed"]
        yellow = board.rules["display"]["bucket_colors"]["misplaced"]
        red = board.rules["display"]["bucket_colors"]["absent"]
        self.assertEqual(colored.count(green), 2)
        self.assertEqual(colored.count(yellow), 1)
        self.assertEqual(colored.count(red), 2)
        self.assertLess(colored.rindex(green), colored.index(yellow))
        self.assertLess(colored.index(yellow), colored.index(red))

    def test_render_prints_each_attempt(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        board.make_guess("Red,Blue,Pink,Pink")
        board.make_guess("Red,Blue,Green,Pink")
        with patch("builtins.print") as mock_print:
            board.render()
        lines = [call.args[0] for call in mock_print.call_args_list]
        self.assertTrue(any("Red, Blue, Pink, Pink" in l for l in lines))
        self.assertTrue(any("Red, Blue, Green, Pink" in l for l in lines))

    def test_reset(self):
        board = _board(["Red", "Blue", "Green", "Yellow"])
        board.make_guess("Red,Blue,Green,Yellow")
        board.reset()
        self.assertFalse(board.is_over)
        self.assertEqual(board.current_attempt, 0)
        self.assertEqual(len(board.secret_code.sequence), 4)


if __name__ == '__main__':
    unittest.main()
