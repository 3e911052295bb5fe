import random

from django.test import SimpleTestCase

from api.jumble import Scrambler


class CountingRandom(random.Random):
    """Random whose shuffle leaves the sequence untouched, counting calls."""

    def __init__(self):
        super().__init__(0)
        self.shuffles = 0

    def shuffle(self, x):
        self.shuffles += 1


class ScriptedRandom(CountingRandom):
    """Reverses the sequence on the calls flagged True."""

    def __init__(self, script):
        super().__init__()
        self.script = list(script)

    def shuffle(self, x):
        if self.script[self.shuffles]:
            x.reverse()
        self.shuffles += 1


class ScramblerTests(SimpleTestCase):
    def test_scramble_is_a_permutation_and_differs(self):
        scrambler = Scrambler(rng=random.Random(1))
        for word in ("elephant", "yellow", "jumble"):
            for _ in range(25):
                result = scrambler.scramble(word)
                self.assertEqual(sorted(result), sorted(word))
                self.assertNotEqual(result, word)

    def test_avoids_previous_scramble(self):
        rng = ScriptedRandom([True, False])
        scrambler = Scrambler(rng=rng)
        self.assertEqual(scrambler.scramble("ab", previous="ba"), "ab")
        self.assertEqual(rng.shuffles, 2)

    def test_single_letter_and_identical_letters(self):
        scrambler = Scrambler(rng=random.Random(5))
        self.assertEqual(scrambler.scramble("a"), "a")
        self.assertEqual(scrambler.scramble("zzzz"), "zzzz")
        self.assertEqual(scrambler.scramble(""), "")
        self.assertEqual(scrambler.scramble(None), "")

    def test_retries_are_bounded(self):
        rng = CountingRandom()
        scrambler = Scrambler(rng=rng, max_retries=10)
        self.assertEqual(scrambler.scramble("word"), "word")
        self.assertEqual(rng.shuffles, 11)

    def test_no_retry_when_first_shuffle_differs(self):
        rng = CountingRandom()
        scrambler = Scrambler(rng=rng)
        self.assertEqual(scrambler.scramble("word", previous="drow"), "word")
        self.assertEqual(rng.shuffles, 1)

    def test_uniform_letters_skip_retries(self):
        rng = CountingRandom()
        Scrambler(rng=rng).scramble("aaa")
        self.assertEqual(rng.shuffles, 1)

    def test_negative_retries_rejected(self):
        with self.assertRaises(ValueError):
            Scrambler(max_retries=-1)
