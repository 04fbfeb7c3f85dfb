"""
Unit tests for key mapping and the input reader.

Run:
  pytest src/tests/ -v
"""
import unittest

from button_system import InputEvent, InputKind, InputReader, ScriptedKeySampler
from button_system.key_mapping import key_to_event, key_to_symbol

from game_test_support import make_logger


class TestKeyMapping(unittest.TestCase):

    def test_digits(self):
        self.assertEqual(key_to_symbol("1", 4), 0)
        self.assertEqual(key_to_symbol("4", 4), 3)
        self.assertEqual(key_to_symbol("7", 7), 6)
        self.assertEqual(key_to_symbol("9", 10), 8)

    def test_zero_is_tenth_button(self):
        self.assertEqual(key_to_symbol("0", 10), 9)
        self.assertIsNone(key_to_symbol("0", 4))
        self.assertIsNone(key_to_symbol("0", 7))

    def test_digits_beyond_board_ignored(self):
        self.assertIsNone(key_to_symbol("5", 4))
        self.assertIsNone(key_to_symbol("8", 7))

    def test_directions_on_four_button_board(self):
        for keys, expected in ((("ArrowUp", "up", "w", "W"), 0),
                               (("ArrowRight", "right", "d"), 1),
                               (("ArrowDown", "down", "s"), 2),
                               (("ArrowLeft", "left", "a"), 3)):
            for key in keys:
                self.assertEqual(key_to_symbol(key, 4), expected, key)

    def test_directions_unbound_on_larger_boards(self):
        self.assertIsNone(key_to_symbol("up", 7))
        self.assertIsNone(key_to_symbol("a", 10))

    def test_commands(self):
        self.assertEqual(key_to_event("n", 4), InputEvent(InputKind.START, "n"))
        self.assertIs(key_to_event("enter", 10).kind, InputKind.START)
        self.assertIs(key_to_event("space", 7).kind, InputKind.START)
        self.assertIs(key_to_event("r", 4).kind, InputKind.RESET)
        self.assertIs(key_to_event("m", 4).kind, InputKind.TOGGLE_SOUND)
        self.assertIs(key_to_event("q", 4).kind, InputKind.QUIT)
        self.assertIs(key_to_event("ctrl+c", 4).kind, InputKind.QUIT)

    def test_symbol_events(self):
        event = key_to_event("3", 4)
        self.assertIs(event.kind, InputKind.SYMBOL)
        self.assertEqual(event.symbol_id, 2)
        self.assertIsNone(key_to_event("x", 4))

    def test_symbol_event_requires_id(self):
        with self.assertRaises(ValueError):
            InputEvent(InputKind.SYMBOL, "3")
        with self.assertRaises(ValueError):
            InputEvent(InputKind.START, "n", 1)


class TestInputReader(unittest.TestCase):

    def setUp(self):
        self.sampler = ScriptedKeySampler()
        self.reader = InputReader(self.sampler, 4, make_logger("InputReader"))

    def test_setup_and_cleanup(self):
        self.assertTrue(self.sampler.is_setup)
        self.reader.cleanup()
        self.assertFalse(self.sampler.is_setup)

    def test_one_batch_per_read(self):
        self.sampler.feed("1", "x", "left")
        self.sampler.feed("n")

        events = self.reader.read_events()
        self.assertEqual([(e.kind, e.symbol_id) for e in events],
                         [(InputKind.SYMBOL, 0), (InputKind.SYMBOL, 3)])
        self.assertEqual([e.kind for e in self.reader.read_events()], [InputKind.START])
        self.assertEqual(self.reader.read_events(), [])

    def test_board_size_bounds_digits(self):
        self.sampler.feed("5", "0")
        self.assertEqual(self.reader.read_events(), [])


if __name__ == "__main__":
    unittest.main()
