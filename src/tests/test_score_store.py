"""
Unit tests for best score persistence.

Run:
  pytest src/tests/ -v
"""
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from game_system import Difficulty
from score_system import CsvScoreStore, MemoryScoreStore, score_key

from game_test_support import make_logger


class TestMemoryScoreStore(unittest.TestCase):

    def test_score_key(self):
        self.assertEqual(score_key(7, Difficulty.STRICT), "simonSays-7-strict")
        self.assertEqual(score_key(10, Difficulty.NORMAL), "simonSays-10-normal")

    def test_upsert_max(self):
        store = MemoryScoreStore()
        self.assertIsNone(store.read(4, Difficulty.NORMAL))
        self.assertTrue(store.write(4, Difficulty.NORMAL, 5))
        self.assertFalse(store.write(4, Difficulty.NORMAL, 3))
        self.assertFalse(store.write(4, Difficulty.NORMAL, 5))
        self.assertEqual(store.read(4, Difficulty.NORMAL), 5)
        self.assertEqual(store.write_count, 3)

    def test_keys_are_independent(self):
        store = MemoryScoreStore({"simonSays-4-normal": 9})
        self.assertEqual(store.read(4, Difficulty.NORMAL), 9)
        self.assertIsNone(store.read(4, Difficulty.STRICT))
        self.assertIsNone(store.read(7, Difficulty.NORMAL))


class TestCsvScoreStore(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "scores" / "SimonSaysScores.csv"
        self.store = CsvScoreStore(str(self.path), make_logger("ScoreStore"))

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file_reads_none(self):
        self.assertIsNone(self.store.read(4, Difficulty.NORMAL))
        self.assertFalse(self.path.exists())

    def test_write_creates_file(self):
        self.assertTrue(self.store.write(7, Difficulty.STRICT, 5))
        self.assertTrue(self.path.exists())
        self.assertEqual(self.store.read(7, Difficulty.STRICT), 5)

        lines = self.path.read_text(encoding="utf-8").splitlines()
        self.assertEqual(lines, ["Key,BestScore", "simonSays-7-strict,5"])

    def test_high_water_mark(self):
        # A 5 followed by a 3 keeps the 5
        self.store.write(7, Difficulty.STRICT, 5)
        self.assertFalse(self.store.write(7, Difficulty.STRICT, 3))
        self.assertEqual(self.store.read(7, Difficulty.STRICT), 5)

        self.assertTrue(self.store.write(7, Difficulty.STRICT, 8))
        self.assertEqual(self.store.read(7, Difficulty.STRICT), 8)

    def test_persists_across_instances(self):
        self.store.write(4, Difficulty.NORMAL, 2)
        self.store.write(10, Difficulty.STRICT, 6)

        reopened = CsvScoreStore(str(self.path), make_logger("ScoreStore"))
        self.assertEqual(reopened.read(4, Difficulty.NORMAL), 2)
        self.assertEqual(reopened.read(10, Difficulty.STRICT), 6)
        self.assertIsNone(reopened.read(4, Difficulty.STRICT))

    def test_zero_score_is_stored(self):
        self.assertTrue(self.store.write(4, Difficulty.STRICT, 0))
        self.assertEqual(self.store.read(4, Difficulty.STRICT), 0)

    def test_corrupt_file_reads_none_and_is_kept(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("Key,BestScore\nsimonSays-4-normal,lots\n", encoding="utf-8")

        self.assertIsNone(self.store.read(4, Difficulty.NORMAL))
        self.assertFalse(self.store.write(4, Difficulty.NORMAL, 3))
        self.assertIn("lots", self.path.read_text(encoding="utf-8"))

    def test_unexpected_columns_are_unreadable(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("Buttons,Difficulty,BestScore\n4,normal,3\n", encoding="utf-8")
        self.assertIsNone(self.store.read(4, Difficulty.NORMAL))

    def test_unwritable_location_returns_false(self):
        blocker = Path(self.tmp.name) / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = CsvScoreStore(str(blocker / "scores.csv"), make_logger("ScoreStore"))

        self.assertFalse(store.write(4, Difficulty.NORMAL, 3))
        self.assertIsNone(store.read(4, Difficulty.NORMAL))

    def test_no_temp_file_left_behind(self):
        self.store.write(4, Difficulty.NORMAL, 1)
        self.assertEqual(os.listdir(self.path.parent), [self.path.name])

    def test_failed_replace_removes_temp_file(self):
        self.store.write(4, Difficulty.NORMAL, 1)
        with mock.patch("score_system.score_store.os.replace", side_effect=OSError("disk full")):
            self.assertFalse(self.store.write(4, Difficulty.NORMAL, 6))

        self.assertEqual(os.listdir(self.path.parent), [self.path.name])
        self.assertEqual(self.store.read(4, Difficulty.NORMAL), 1)


if __name__ == "__main__":
    unittest.main()
