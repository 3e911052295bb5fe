from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from .dictionary import WordDictionary
from .scrambler import DEFAULT_MAX_RETRIES, Scrambler
from .subwords import SubwordMatcher


# PUBLIC_INTERFACE
@dataclass
class JumbleEngine:
    """Stateless word queries over one dictionary.

    Bundles the dictionary, the sub-word matcher and the scrambler so that
    callers (views, management commands, the game registry) share a single
    corpus load and a single randomness source.
    """

    dictionary: WordDictionary
    scrambler: Scrambler = field(default_factory=Scrambler)
    matcher: SubwordMatcher = field(init=False)

    def __post_init__(self) -> None:
        self.matcher = SubwordMatcher(self.dictionary)

    @classmethod
    def from_file(cls, path, seed: Optional[int] = None, max_retries: int = DEFAULT_MAX_RETRIES) -> "JumbleEngine":
        """Build an engine from a word list, optionally with a seeded RNG."""
        rng = random.Random(seed)
        return cls(
            dictionary=WordDictionary.from_file(path, rng=rng),
            scrambler=Scrambler(rng=rng, max_retries=max_retries),
        )

    # PUBLIC_INTERFACE
    def scramble(self, word: str) -> str:
        return self.scrambler.scramble(word)

    # PUBLIC_INTERFACE
    def exists(self, word: Optional[str]) -> bool:
        return self.dictionary.exists(word)

    # PUBLIC_INTERFACE
    def words_with_prefix(self, prefix: Optional[str]) -> List[str]:
        return self.dictionary.words_with_prefix(prefix)

    # PUBLIC_INTERFACE
    def search(
        self,
        start_char: Optional[str] = None,
        end_char: Optional[str] = None,
        length: Optional[int] = None,
    ) -> List[str]:
        return self.dictionary.search(start_char=start_char, end_char=end_char, length=length)

    # PUBLIC_INTERFACE
    def palindromes(self) -> List[str]:
        return self.dictionary.palindrome_words()

    # PUBLIC_INTERFACE
    def sub_words(self, word: Optional[str], min_length: Optional[int] = None) -> List[str]:
        return self.matcher.sub_words(word, min_length)
