import random
import unittest

from game import GameSettings, GameState, InvalidDimension, new_game
from tripuzzle_core.codec import board_to_json, json_to_board, json_to_state, state_to_json


class TestJsonCodec(unittest.TestCase):
    def test_given_state_when_roundtrip_json_then_equal(self):
        state = new_game(GameSettings(num_rows=4), random.Random(6))
        state = GameState(board=state.board, score=120, is_game_over=False, moves=3)
        sj = state_to_json(state)
        self.assertEqual(sj["score"], 120)
        self.assertEqual(sj["moves"], 3)
        self.assertEqual([len(r) for r in sj["board"]], [1, 2, 3, 4])
        self.assertEqual(set(sj["board"][3][0]), {"id", "color", "row", "col", "isNew", "isMatched"})
        self.assertEqual(json_to_state(sj), state)

    def test_given_json_with_stale_positions_when_decoding_then_taken_from_slot(self):
        raw = [
            [{"id": "a", "color": "red", "row": 5, "col": 5}],
            [None, {"id": "b", "color": "blue", "row": 0, "col": 0, "isMatched": True}],
        ]
        board = json_to_board(raw)
        self.assertEqual((board.at(0, 0).row, board.at(0, 0).col), (0, 0))
        self.assertEqual((board.at(1, 1).row, board.at(1, 1).col), (1, 1))
        self.assertTrue(board.at(1, 1).is_matched)
        self.assertIsNone(board.at(1, 0))
        self.assertEqual(board_to_json(board)[1][1]["row"], 1)

    def test_given_malformed_json_when_decoding_then_raises(self):
        with self.assertRaises(InvalidDimension):
            json_to_board([[None], [None, None, None]])
        with self.assertRaises(ValueError):
            json_to_board("not a board")
        with self.assertRaises(ValueError):
            json_to_board([[{"id": "a", "color": "mauve"}]], colors=("red", "green", "blue"))
        with self.assertRaises(ValueError):
            json_to_board([[{"id": "a", "color": "red"}], [{"id": "a", "color": "red"}, None]])
        with self.assertRaises(KeyError):
            json_to_board([[{"color": "red"}]])

    def test_given_non_boolean_flags_when_decoding_then_raises(self):
        with self.assertRaises(ValueError):
            json_to_board([[{"id": "a", "color": "red", "isNew": "false"}]])
        with self.assertRaises(ValueError):
            json_to_board([[{"id": "a", "color": "red", "isMatched": 1}]])
        with self.assertRaises(ValueError):
            json_to_state({"board": [[None]], "isGameOver": "no"})
        board = json_to_board([[{"id": "a", "color": "red", "isNew": False, "isMatched": True}]])
        self.assertFalse(board.at(0, 0).is_new)
        self.assertTrue(board.at(0, 0).is_matched)


if __name__ == '__main__':
    unittest.main(verbosity=2)
