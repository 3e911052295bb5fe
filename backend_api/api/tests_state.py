import random
import threading
from concurrent.futures import ThreadPoolExecutor

from django.test import SimpleTestCase

from api.jumble import GameState, Scrambler


def _make_state(sub_words=("low", "owl", "yell")):
    return GameState.create(
        game_id="51eb70da-7e19-46eb-b45e-ab25e9b6c444",
        original="yellow",
        scramble="wolley",
        sub_words=sub_words,
        min_length=3,
    )


class GameStateTests(SimpleTestCase):
    def test_initial_state(self):
        state = _make_state()
        self.assertEqual(state.total_words, 3)
        self.assertEqual(state.remaining_words, 3)
        self.assertFalse(state.is_complete)
        snap = state.snapshot()
        self.assertEqual(snap.status, "ACTIVE")
        self.assertEqual(snap.guessed_words, ())

    def test_correct_guess_is_case_insensitive_and_trimmed(self):
        state = _make_state()
        outcome = state.apply_guess("  OWL ")
        self.assertTrue(outcome.correct)
        self.assertFalse(outcome.completed)
        self.assertEqual(state.remaining_words, 2)
        self.assertEqual(state.snapshot().guessed_words, ("owl",))

    def test_incorrect_guesses(self):
        state = _make_state()
        for bad in (None, "", "   ", "yellow", "cat"):
            self.assertFalse(state.apply_guess(bad).correct, bad)
        self.assertEqual(state.remaining_words, 3)

    def test_repeat_guess_counts_once(self):
        state = _make_state()
        self.assertTrue(state.apply_guess("low").correct)
        self.assertFalse(state.apply_guess("low").correct)
        self.assertFalse(state.apply_guess("LOW").correct)
        self.assertEqual(state.snapshot().guessed_words, ("low",))
        self.assertEqual(state.remaining_words, 2)

    def test_guessed_words_follow_sub_word_order(self):
        state = _make_state()
        state.apply_guess("yell")
        state.apply_guess("low")
        self.assertEqual(state.snapshot().guessed_words, ("low", "yell"))

    def test_completion_happens_exactly_once(self):
        state = _make_state()
        outcomes = [state.apply_guess(w) for w in ("low", "owl", "yell")]
        self.assertEqual([o.completed for o in outcomes], [False, False, True])
        self.assertTrue(state.is_complete)
        self.assertEqual(state.snapshot().status, "COMPLETE")

        after = state.apply_guess("low")
        self.assertFalse(after.correct)
        self.assertFalse(after.completed)
        self.assertEqual(state.remaining_words, 0)

    def test_outcome_carries_snapshot_taken_with_the_guess(self):
        state = _make_state()
        outcome = state.apply_guess("owl")
        state.apply_guess("low")
        self.assertEqual(outcome.snapshot.guessed_words, ("owl",))
        self.assertEqual(outcome.snapshot.remaining_words, 2)
        self.assertEqual(state.snapshot().guessed_words, ("low", "owl"))

        missed = state.apply_guess("   ")
        self.assertFalse(missed.correct)
        self.assertEqual(missed.snapshot.remaining_words, 1)

    def test_game_without_sub_words_starts_complete(self):
        state = _make_state(sub_words=())
        self.assertTrue(state.is_complete)
        self.assertFalse(state.apply_guess("low").correct)

    def test_rescramble_keeps_letters_and_progress(self):
        state = _make_state()
        state.apply_guess("low")
        scrambler = Scrambler(rng=random.Random(11))
        for _ in range(10):
            previous = state.scramble
            new = state.rescramble(scrambler)
            self.assertEqual(sorted(new), sorted("yellow"))
            self.assertNotEqual(new, previous)
            self.assertEqual(state.scramble, new)
        self.assertEqual(state.remaining_words, 2)
        self.assertEqual(state.snapshot().guessed_words, ("low",))


class GameStateConcurrencyTests(SimpleTestCase):
    def test_duplicate_submission_accepted_once(self):
        for _ in range(20):
            state = _make_state()
            barrier = threading.Barrier(8)

            def submit():
                barrier.wait()
                return state.apply_guess("owl").correct

            with ThreadPoolExecutor(max_workers=8) as pool:
                results = list(pool.map(lambda _: submit(), range(8)))
            self.assertEqual(results.count(True), 1)
            self.assertEqual(state.remaining_words, 2)

    def test_distinct_guesses_all_recorded(self):
        words = [f"w{i:03d}" for i in range(200)]
        state = _make_state(sub_words=words)
        with ThreadPoolExecutor(max_workers=16) as pool:
            outcomes = list(pool.map(state.apply_guess, words))
        self.assertTrue(all(o.correct for o in outcomes))
        self.assertEqual(sum(o.completed for o in outcomes), 1)
        self.assertEqual(state.remaining_words, 0)
        self.assertEqual(len(state.snapshot().guessed_words), 200)
