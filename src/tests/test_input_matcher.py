"""
Unit tests for InputMatcher.

Run:
  pytest src/tests/ -v
"""
import unittest

from game_system import InputMatcher, Verdict


class TestInputMatcher(unittest.TestCase):

    def test_full_match(self):
        matcher = InputMatcher([2, 1, 3])
        self.assertIs(matcher.submit(2), Verdict.ACCEPTED_CONTINUE)
        self.assertIs(matcher.submit(1), Verdict.ACCEPTED_CONTINUE)
        self.assertIs(matcher.submit(3), Verdict.ACCEPTED_ROUND_COMPLETE)
        self.assertEqual(matcher.progress, [2, 1, 3])

    def test_mismatch_rejected_immediately(self):
        matcher = InputMatcher([2, 1, 3])
        matcher.submit(2)
        self.assertIs(matcher.submit(0), Verdict.REJECTED)
        self.assertTrue(matcher.is_locked)
        self.assertEqual(matcher.progress, [2])

    def test_locked_until_reset(self):
        matcher = InputMatcher([1])
        matcher.submit(0)
        with self.assertRaises(RuntimeError):
            matcher.submit(1)

        matcher.reset()
        self.assertFalse(matcher.is_locked)
        self.assertEqual(matcher.progress, [])
        self.assertIs(matcher.submit(1), Verdict.ACCEPTED_ROUND_COMPLETE)

    def test_input_past_end_rejected(self):
        matcher = InputMatcher([0])
        matcher.submit(0)
        self.assertIs(matcher.submit(0), Verdict.REJECTED)

    def test_progress_is_a_copy(self):
        matcher = InputMatcher([0, 1])
        matcher.submit(0)
        matcher.progress.append(9)
        self.assertEqual(matcher.progress, [0])

    def test_follows_growing_sequence(self):
        sequence = [3]
        matcher = InputMatcher(sequence)
        self.assertIs(matcher.submit(3), Verdict.ACCEPTED_ROUND_COMPLETE)

        sequence.append(0)
        matcher.reset()
        self.assertIs(matcher.submit(3), Verdict.ACCEPTED_CONTINUE)
        self.assertIs(matcher.submit(0), Verdict.ACCEPTED_ROUND_COMPLETE)

    def test_verdict_accepted(self):
        self.assertTrue(Verdict.ACCEPTED_CONTINUE.accepted)
        self.assertTrue(Verdict.ACCEPTED_ROUND_COMPLETE.accepted)
        self.assertFalse(Verdict.REJECTED.accepted)


if __name__ == "__main__":
    unittest.main()
