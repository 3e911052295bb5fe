from collections import Counter

from django.conf import settings
from django.test import SimpleTestCase

from api.jumble import GameState, SubwordMatcher, WordDictionary

YELLOW_SUB_WORDS = [
    "low", "lowly", "lye", "ole", "owe", "owl", "well",
    "welly", "woe", "yell", "yeow", "yew", "yowl",
]


class SubwordMatcherTests(SimpleTestCase):
    def setUp(self):
        self.words = ["yellow", "low", "lolly", "owl", "we", "yell", "yells", "wool", "ow", "Yellow", "ell"]
        self.matcher = SubwordMatcher(WordDictionary(self.words))

    def test_multiset_containment(self):
        # "lolly" needs three l's and "wool" two o's; "yellow" only has two l's and one o.
        self.assertEqual(self.matcher.sub_words("yellow", 3), ["low", "owl", "yell", "ell"])

    def test_seed_itself_is_excluded_ignoring_case(self):
        result = self.matcher.sub_words("YELLOW", 3)
        self.assertNotIn("yellow", result)
        self.assertIn("yell", result)

    def test_min_length_default_is_three(self):
        self.assertEqual(self.matcher.sub_words("yellow"), self.matcher.sub_words("yellow", 3))
        self.assertNotIn("we", self.matcher.sub_words("yellow"))
        self.assertEqual(self.matcher.sub_words("yellow", 2), ["low", "owl", "we", "yell", "ow", "ell"])

    def test_invalid_inputs_return_empty(self):
        self.assertEqual(self.matcher.sub_words(None), [])
        self.assertEqual(self.matcher.sub_words("   "), [])
        self.assertEqual(self.matcher.sub_words("yellow", 0), [])
        self.assertEqual(self.matcher.sub_words("yellow", -1), [])
        self.assertEqual(self.matcher.sub_words("ow", 3), [])

    def test_every_result_is_a_sub_multiset(self):
        seed = "yellow"
        for word in self.matcher.sub_words(seed, 1):
            self.assertFalse(Counter(word) - Counter(seed), word)

    def test_repeated_corpus_lines_yield_each_sub_word_once(self):
        matcher = SubwordMatcher(WordDictionary(["yellow", "low", "owl", "LOW", "low", "yell"]))
        result = matcher.sub_words("yellow")
        self.assertEqual(result, ["low", "owl", "yell"])
        state = GameState.create("51eb70da-7e19-46eb-b45e-ab25e9b6c444", "yellow", "wolley", result, 3)
        self.assertEqual(state.total_words, len(result))


class BundledCorpusSubwordTests(SimpleTestCase):
    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.matcher = SubwordMatcher(WordDictionary.from_file(settings.JUMBLE_WORDS_FILE))

    def test_yellow(self):
        self.assertEqual(self.matcher.sub_words("yellow", 3), YELLOW_SUB_WORDS)

    def test_longer_min_length(self):
        self.assertEqual(self.matcher.sub_words("yellow", 4), ["lowly", "well", "welly", "yell", "yeow", "yowl"])
        self.assertEqual(self.matcher.sub_words("yellow", 6), [])
