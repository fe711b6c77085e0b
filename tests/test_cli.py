import io
import random
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from game import Board, GameSettings, GameState, Tile, new_game
from tripuzzle_core import cli


def _live_state():
    colors = {'r': 'red', 'g': 'green', 'b': 'blue', 'y': 'yellow'}
    rows = ['r', 'rb', 'gry']
    out = []
    for r, text in enumerate(rows):
        out.append([Tile(id=f't{r}{c}', color=colors[ch], row=r, col=c) for c, ch in enumerate(text)])
    return GameState(board=Board.from_rows(out))


class TestCli(unittest.TestCase):
    def test_given_move_text_when_parsing_then_row_and_direction(self):
        self.assertEqual(cli.parse_move('2 l'), (2, 'left'))
        self.assertEqual(cli.parse_move(' 3,right '), (3, 'right'))
        self.assertEqual(cli.parse_move('4  R'), (4, 'right'))
        self.assertIsNone(cli.parse_move('abc'))
        self.assertIsNone(cli.parse_move('1 x'))
        self.assertIsNone(cli.parse_move('x l'))

    def test_given_seed_when_auto_play_then_moves_bounded_and_score_multiple_of_tile_points(self):
        settings = GameSettings(num_rows=5)
        rng = random.Random(21)
        state = cli.auto_play(new_game(settings, rng), 10, rng, settings, verbose=False)
        self.assertLessEqual(state.moves, 10)
        self.assertEqual(state.score % settings.score_per_tile, 0)
        self.assertTrue(state.board.is_full())

    def test_given_auto_flag_when_running_main_then_prints_boards(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            cli.main(['--rows', '4', '--seed', '1', '--auto', '3'])
        out = buf.getvalue()
        self.assertIn('Initial board:', out)
        self.assertIn('Score:', out)

    def test_given_interactive_inputs_when_running_main_then_errors_reported_and_move_applied(self):
        buf = io.StringIO()
        inputs = ['x', '9 l', 'h', '2 l', 'q', 'q']
        with patch.object(cli, 'new_game', return_value=_live_state()), \
                patch('builtins.input', side_effect=inputs), redirect_stdout(buf):
            cli.main(['--rows', '3', '--seed', '2'])
        out = buf.getvalue()
        self.assertIn('Could not parse', out)
        self.assertIn('Illegal move', out)
        self.assertIn("Matching slides: [(2, 'left')]", out)
        self.assertRegex(out, r'\+\d+ \(\d+ cascades\)')


if __name__ == '__main__':
    unittest.main(verbosity=2)
