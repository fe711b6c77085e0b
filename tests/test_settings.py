import os
import unittest
from unittest.mock import patch

from game import GameSettings, InvalidDimension, load_settings


class TestSettings(unittest.TestCase):
    def test_given_clean_env_when_loading_then_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            s = load_settings()
        self.assertEqual(s, GameSettings())
        self.assertEqual(s.num_rows, 8)
        self.assertEqual(s.colors, ('red', 'green', 'blue', 'yellow'))
        self.assertEqual(s.min_match_length, 3)
        self.assertEqual(s.total_cells, 36)

    def test_given_env_vars_when_loading_then_applied(self):
        env = {
            'TRIPUZZLE_ROWS': '5',
            'TRIPUZZLE_COLORS': 'red, green ,blue,purple',
            'TRIPUZZLE_MIN_MATCH': '4',
            'TRIPUZZLE_SCORE_PER_TILE': '7',
        }
        with patch.dict(os.environ, env, clear=True):
            s = load_settings()
        self.assertEqual(s.num_rows, 5)
        self.assertEqual(s.colors, ('red', 'green', 'blue', 'purple'))
        self.assertEqual(s.min_match_length, 4)
        self.assertEqual(s.score_per_tile, 7)

    def test_given_override_when_loading_then_override_beats_env(self):
        with patch.dict(os.environ, {'TRIPUZZLE_ROWS': '5'}, clear=True):
            self.assertEqual(load_settings(num_rows=9).num_rows, 9)
            self.assertEqual(load_settings(num_rows=None).num_rows, 5)

    def test_given_bad_values_when_loading_then_raises(self):
        with patch.dict(os.environ, {'TRIPUZZLE_ROWS': 'lots'}, clear=True):
            with self.assertRaises(ValueError):
                load_settings()
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(InvalidDimension):
                load_settings(num_rows=0)
            with self.assertRaises(ValueError):
                load_settings(colors=['red', 'red', 'blue'])
            with self.assertRaises(ValueError):
                load_settings(min_match_length=1)
            with self.assertRaises(TypeError):
                load_settings(palette=['red'])

    def test_given_color_string_override_when_loading_then_split_on_commas(self):
        with patch.dict(os.environ, {}, clear=True):
            s = load_settings(colors='red, green,blue')
            self.assertEqual(s.colors, ('red', 'green', 'blue'))
            with self.assertRaises(ValueError):
                load_settings(colors='red')

    def test_given_settings_when_to_json_then_camel_case_keys(self):
        j = GameSettings(num_rows=4).to_json()
        self.assertEqual(j['rows'], 4)
        self.assertEqual(j['minMatchLength'], 3)
        self.assertEqual(j['colors'], ['red', 'green', 'blue', 'yellow'])


if __name__ == '__main__':
    unittest.main(verbosity=2)
