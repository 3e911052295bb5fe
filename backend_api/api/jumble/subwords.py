from __future__ import annotations

from collections import Counter
from typing import List, Optional

from .dictionary import WordDictionary

DEFAULT_MIN_LENGTH = 3


def is_sub_multiset(candidate: str, available: Counter) -> bool:
    """True if every letter of `candidate`, repeats included, is in `available`."""
    needed = Counter(candidate)
    return all(available[ch] >= n for ch, n in needed.items())


# PUBLIC_INTERFACE
class SubwordMatcher:
    """Finds corpus words that can be spelled from the letters of a seed word."""

    def __init__(self, dictionary: WordDictionary):
        self.dictionary = dictionary

    # PUBLIC_INTERFACE
    def sub_words(self, seed: Optional[str], min_length: Optional[int] = None) -> List[str]:
        """Return corpus words buildable from `seed`'s letters.

        A word qualifies when it has at least `min_length` letters (default 3),
        is not the seed itself (ignoring case), and uses each letter no more
        often than the seed does. Results keep corpus order.

        Returns an empty list for a blank seed, a seed shorter than
        `min_length`, or `min_length < 1`.
        """
        min_len = DEFAULT_MIN_LENGTH if min_length is None else min_length
        if not seed or not seed.strip() or min_len < 1 or len(seed) < min_len:
            return []

        seed_n = seed.lower()
        available = Counter(seed_n)
        letters = set(available)
        max_len = len(seed_n)

        found: List[str] = []
        for word in self.dictionary:
            if len(word) < min_len or len(word) > max_len or word == seed_n:
                continue
            if not letters.issuperset(word):
                continue
            if is_sub_multiset(word, available):
                found.append(word)
        return found
