import random
import uuid
from concurrent.futures import ThreadPoolExecutor

from django.test import SimpleTestCase

from api.jumble import (
    GameNotFoundError,
    GameSessionRegistry,
    GameValidationError,
    InvalidGameIdError,
    JumbleEngine,
    NoWordAvailableError,
    Scrambler,
    WordDictionary,
)

WORDS = ["low", "lowly", "owl", "yell", "yellow", "yew", "cat", "act", "we"]


def _registry(words=WORDS, seed=3):
    rng = random.Random(seed)
    engine = JumbleEngine(WordDictionary(words, rng=rng), scrambler=Scrambler(rng=rng))
    return GameSessionRegistry(engine.dictionary, engine.matcher, engine.scrambler)


class CreateGameTests(SimpleTestCase):
    def test_create_game(self):
        registry = _registry()
        state = registry.create_game(6, 3)
        self.assertEqual(state.original, "yellow")
        self.assertEqual(sorted(state.scramble), sorted("yellow"))
        self.assertNotEqual(state.scramble, "yellow")
        self.assertEqual(list(state.sub_words), ["low", "lowly", "owl", "yell", "yew"])
        self.assertEqual(state.total_words, 5)
        self.assertEqual(state.remaining_words, 5)
        self.assertEqual(str(uuid.UUID(state.id)), state.id)
        self.assertIn(state.id, registry)
        self.assertEqual(len(registry), 1)

    def test_total_matches_sub_words(self):
        registry = _registry()
        state = registry.create_game(6)
        self.assertEqual(state.total_words, len(registry.matcher.sub_words(state.original, 3)))
        self.assertEqual(state.min_length, 3)

    def test_min_length_limits_sub_words(self):
        state = _registry().create_game(6, 4)
        self.assertEqual(list(state.sub_words), ["lowly", "yell"])

    def test_ids_are_unique(self):
        registry = _registry()
        ids = {registry.create_game(3).id for _ in range(50)}
        self.assertEqual(len(ids), 50)
        self.assertEqual(len(registry), 50)

    def test_invalid_parameters(self):
        registry = _registry()
        for length, min_length in ((2, None), (None, 3), (6, 0), (6, -1), (3, 4)):
            with self.assertRaises(GameValidationError):
                registry.create_game(length, min_length)
        self.assertEqual(len(registry), 0)

    def test_no_word_available(self):
        registry = _registry()
        with self.assertRaises(NoWordAvailableError):
            registry.create_game(9)
        self.assertEqual(len(registry), 0)

    def test_concurrent_creation(self):
        registry = _registry()
        with ThreadPoolExecutor(max_workers=8) as pool:
            states = list(pool.map(lambda _: registry.create_game(6), range(100)))
        self.assertEqual(len(registry), 100)
        for state in states:
            self.assertIs(registry.get(state.id), state)


class LookupTests(SimpleTestCase):
    def setUp(self):
        self.registry = _registry()
        self.state = self.registry.create_game(6)

    def test_get_accepts_canonical_and_uppercase_ids(self):
        self.assertIs(self.registry.get(self.state.id), self.state)
        self.assertIs(self.registry.get(f"  {self.state.id.upper()} "), self.state)

    def test_blank_or_malformed_id_is_invalid(self):
        for bad in (None, "", "   ", "not-a-uuid", "1234"):
            with self.assertRaises(InvalidGameIdError):
                self.registry.get(bad)

    def test_unknown_id_is_not_found(self):
        with self.assertRaises(GameNotFoundError):
            self.registry.get("51eb70da-7e19-46eb-b45e-ab25e9b6c444")

    def test_invalid_id_is_a_validation_error(self):
        with self.assertRaises(GameValidationError):
            self.registry.apply_guess("  ", "low")

    def test_failed_lookups_leave_games_untouched(self):
        for bad in ("", str(uuid.uuid4())):
            with self.assertRaises((InvalidGameIdError, GameNotFoundError)):
                self.registry.apply_guess(bad, "low")
        self.assertEqual(self.state.remaining_words, self.state.total_words)

    def test_apply_guess_until_complete(self):
        words = list(self.state.sub_words)
        completed = []
        for word in words:
            state, outcome = self.registry.apply_guess(self.state.id, word)
            self.assertIs(state, self.state)
            self.assertTrue(outcome.correct)
            completed.append(outcome.completed)
        self.assertEqual(completed.count(True), 1)
        self.assertTrue(completed[-1])
        _, outcome = self.registry.apply_guess(self.state.id, words[0])
        self.assertFalse(outcome.correct)

    def test_rescramble(self):
        before = self.state.scramble
        after = self.registry.rescramble(self.state.id)
        self.assertNotEqual(before, after)
        self.assertEqual(self.state.scramble, after)

    def test_discard(self):
        self.assertTrue(self.registry.discard(self.state.id))
        self.assertFalse(self.registry.discard(self.state.id))
        with self.assertRaises(GameNotFoundError):
            self.registry.get(self.state.id)
        with self.assertRaises(InvalidGameIdError):
            self.registry.discard("")
