from __future__ import annotations

import random
from typing import Optional

DEFAULT_MAX_RETRIES = 10


# PUBLIC_INTERFACE
class Scrambler:
    """Shuffles the letters of a word.

    A shuffle equal to the previously shown form is re-rolled up to
    `max_retries` extra times. Once the retries run out the last shuffle is
    returned as-is, so single-letter words and words made of one repeated
    letter always come back unchanged.
    """

    def __init__(self, rng: Optional[random.Random] = None, max_retries: int = DEFAULT_MAX_RETRIES):
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._rng = rng or random.Random()
        self.max_retries = max_retries

    def _shuffle(self, word: str) -> str:
        letters = list(word)
        self._rng.shuffle(letters)
        return "".join(letters)

    # PUBLIC_INTERFACE
    def scramble(self, word: Optional[str], previous: Optional[str] = None) -> str:
        """Return a random permutation of `word`, avoiding `previous` when possible.

        Parameters:
            word: letters to shuffle.
            previous: the form currently on display; defaults to `word` itself.
        """
        if not word:
            return ""
        avoid = word if previous is None else previous
        result = self._shuffle(word)
        if len(set(word)) < 2:
            return result
        attempts = 0
        while result == avoid and attempts < self.max_retries:
            result = self._shuffle(word)
            attempts += 1
        return result
