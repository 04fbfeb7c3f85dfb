"""
Unit tests for symbol sets and sequence generation.

Run:
  pytest src/tests/ -v
"""
import random
import unittest

from game_system import SUPPORTED_SIZES, get_symbol_set, next_symbol, seeded_generator


class TestSymbolSets(unittest.TestCase):

    def test_supported_sizes(self):
        self.assertEqual(SUPPORTED_SIZES, (4, 7, 10))
        for size in SUPPORTED_SIZES:
            symbols = get_symbol_set(size)
            self.assertEqual(len(symbols), size)
            self.assertEqual([s.id for s in symbols], list(range(size)))

    def test_smaller_sets_are_prefixes(self):
        full = get_symbol_set(10)
        self.assertEqual(get_symbol_set(4), full[:4])
        self.assertEqual(get_symbol_set(7), full[:7])

    def test_tones_and_bindings_are_distinct(self):
        symbols = get_symbol_set(10)
        self.assertEqual(len({s.tone for s in symbols}), 10)
        self.assertEqual([s.key_binding for s in symbols], list("1234567890"))
        self.assertEqual(symbols[0].label, "Red")
        self.assertAlmostEqual(symbols[0].tone, 261.63)

    def test_unsupported_size_rejected(self):
        for size in (0, 3, 5, 11):
            with self.assertRaises(ValueError):
                get_symbol_set(size)


class TestSequenceGenerator(unittest.TestCase):

    def test_draws_stay_in_range(self):
        rng = random.Random(7)
        for size in SUPPORTED_SIZES:
            draws = [next_symbol(size, rng) for _ in range(500)]
            self.assertTrue(all(0 <= d < size for d in draws))
            self.assertEqual(set(draws), set(range(size)))

    def test_non_positive_size_rejected(self):
        with self.assertRaises(ValueError):
            next_symbol(0)

    def test_seeded_generator_is_reproducible(self):
        first = seeded_generator(42)
        second = seeded_generator(42)
        self.assertEqual([first(10) for _ in range(20)], [second(10) for _ in range(20)])


if __name__ == "__main__":
    unittest.main()
