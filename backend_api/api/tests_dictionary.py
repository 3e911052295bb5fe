import random
import tempfile
from pathlib import Path

from django.conf import settings
from django.test import SimpleTestCase

from api.jumble import WordDictionary

WORDS = ["apple", "Ant", "bob", "deed", "a", "level", "lever", "eye", "zebra", "cat", "coat", "act"]


class WordDictionaryTests(SimpleTestCase):
    def setUp(self):
        self.dictionary = WordDictionary(WORDS, rng=random.Random(7))

    def test_corpus_is_lowercased_and_ordered(self):
        self.assertEqual(self.dictionary.words[:3], ("apple", "ant", "bob"))
        self.assertEqual(len(self.dictionary), len(WORDS))

    def test_exists_is_case_insensitive(self):
        self.assertTrue(self.dictionary.exists("APPLE"))
        self.assertTrue(self.dictionary.exists("ant"))
        self.assertFalse(self.dictionary.exists("apples"))

    def test_exists_blank_or_none(self):
        self.assertFalse(self.dictionary.exists(None))
        self.assertFalse(self.dictionary.exists(""))
        self.assertFalse(self.dictionary.exists("   "))

    def test_prefix_returns_corpus_order(self):
        self.assertEqual(self.dictionary.words_with_prefix("A"), ["apple", "ant", "a", "act"])
        self.assertEqual(self.dictionary.words_with_prefix("lev"), ["level", "lever"])
        self.assertEqual(self.dictionary.words_with_prefix("xyz"), [])

    def test_prefix_rejects_blank_and_non_letters(self):
        for bad in (None, "", "  ", "a1", "le-", " a", "\u00e9", "a\u00e9"):
            self.assertEqual(self.dictionary.words_with_prefix(bad), [], bad)

    def test_search_requires_a_filter(self):
        self.assertEqual(self.dictionary.search(), [])
        self.assertEqual(self.dictionary.search(None, None, None), [])

    def test_search_rejects_invalid_filters(self):
        self.assertEqual(self.dictionary.search(length=0), [])
        self.assertEqual(self.dictionary.search(length=-3), [])
        self.assertEqual(self.dictionary.search(start_char="ab"), [])
        self.assertEqual(self.dictionary.search(start_char="1"), [])
        self.assertEqual(self.dictionary.search(start_char="\u00e9"), [])
        self.assertEqual(self.dictionary.search(end_char=""), [])
        self.assertEqual(self.dictionary.search(start_char="a", length=0), [])

    def test_search_filters_are_a_conjunction(self):
        self.assertEqual(self.dictionary.search(start_char="a"), ["apple", "ant", "a", "act"])
        self.assertEqual(self.dictionary.search(end_char="T"), ["ant", "cat", "coat", "act"])
        self.assertEqual(self.dictionary.search(length=3), ["ant", "bob", "eye", "cat", "act"])
        self.assertEqual(self.dictionary.search(start_char="A", end_char="t", length=3), ["ant", "act"])
        self.assertEqual(self.dictionary.search(start_char="c", length=4), ["coat"])

    def test_palindromes_need_two_letters(self):
        palindromes = self.dictionary.palindrome_words()
        self.assertEqual(palindromes, ["bob", "deed", "level", "eye"])
        self.assertNotIn("a", palindromes)

    def test_random_word_uses_length_bucket(self):
        for _ in range(20):
            self.assertIn(self.dictionary.random_word(3), {"ant", "bob", "eye", "cat", "act"})
        self.assertEqual(self.dictionary.random_word(1), "a")
        self.assertIsNone(self.dictionary.random_word(9))
        self.assertIsNone(self.dictionary.random_word(None))

    def test_random_word_is_reproducible_with_seeded_rng(self):
        first = WordDictionary(WORDS, rng=random.Random(42))
        second = WordDictionary(WORDS, rng=random.Random(42))
        picks_a = [first.random_word(3) for _ in range(10)]
        picks_b = [second.random_word(3) for _ in range(10)]
        self.assertEqual(picks_a, picks_b)

    def test_length_counts(self):
        self.assertEqual(self.dictionary.length_counts(), {1: 1, 3: 5, 4: 2, 5: 4})


class WordDictionaryLoadingTests(SimpleTestCase):
    def test_from_file_skips_blank_lines(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "words.txt"
            path.write_text("Alpha\n\n  beta  \ngamma\n", encoding="utf-8")
            dictionary = WordDictionary.from_file(path)
        self.assertEqual(dictionary.words, ("alpha", "beta", "gamma"))

    def test_duplicate_lines_keep_first_position(self):
        dictionary = WordDictionary(["low", "yellow", "Low", "owl", "low", "yellow"])
        self.assertEqual(dictionary.words, ("low", "yellow", "owl"))
        self.assertEqual(len(dictionary), 3)
        self.assertEqual(dictionary.words_with_prefix("lo"), ["low"])
        self.assertEqual(dictionary.search(length=3), ["low", "owl"])
        self.assertEqual(dictionary.length_counts(), {3: 2, 6: 1})

    def test_non_ascii_letters_are_not_prefixes(self):
        dictionary = WordDictionary(["\u00e9clair", "eclat"])
        self.assertEqual(dictionary.words_with_prefix("\u00e9"), [])
        self.assertEqual(dictionary.words_with_prefix("ec"), ["eclat"])
        self.assertTrue(dictionary.exists("\u00c9clair"))

    def test_missing_file_degrades_to_empty(self):
        with self.assertLogs("api.jumble.dictionary", level="ERROR"):
            dictionary = WordDictionary.from_file("/nonexistent/words.txt")
        self.assertEqual(len(dictionary), 0)
        self.assertFalse(dictionary.exists("apple"))
        self.assertEqual(dictionary.words_with_prefix("a"), [])
        self.assertEqual(dictionary.search(length=3), [])
        self.assertEqual(dictionary.palindrome_words(), [])
        self.assertIsNone(dictionary.random_word(5))

    def test_bundled_corpus(self):
        dictionary = WordDictionary.from_file(settings.JUMBLE_WORDS_FILE)
        self.assertGreater(len(dictionary), 1000)
        palindromes = dictionary.palindrome_words()
        for word in ("deed", "level", "eye", "radar"):
            self.assertIn(word, palindromes)
        self.assertNotIn("a", palindromes)
        self.assertTrue(dictionary.exists("a"))
        self.assertEqual(dictionary.words_with_prefix("yel"), ["yell", "yellow"])
        self.assertEqual(dictionary.search(start_char="y", end_char="w"), ["yellow", "yeow", "yew"])
