from __future__ import annotations

import logging
import random
from bisect import bisect_left
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)


def _is_palindrome(word: str) -> bool:
    return len(word) >= 2 and word == word[::-1]


def _is_letters(value: str) -> bool:
    return value.isascii() and value.isalpha()


def _valid_char(value: Optional[str]) -> bool:
    return value is not None and len(value) == 1 and _is_letters(value)


def _read_lines(path: Path) -> List[str]:
    """Read a UTF-8 word list and return stripped, lowercase, non-empty lines.

    Raises OSError if the file cannot be read; callers decide how to degrade.
    """
    raw = path.read_text(encoding="utf-8").splitlines()
    return [ln.strip().lower() for ln in raw if ln.strip()]


# PUBLIC_INTERFACE
class WordDictionary:
    """Read-only word corpus with lookup indices built once at construction.

    Indices:
    - exact-match set of lowercase words
    - sorted (word, position) pairs searched with bisect for prefix queries
    - length buckets for random picks and length searches
    - precomputed palindrome list

    Every list returned follows corpus (file) order; repeated lines are kept
    once, at their first position. Instances are never
    mutated after __init__, so they can be shared between threads freely.
    """

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        corpus = [w.strip().lower() for w in words if w and w.strip()]
        # first occurrence wins
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(corpus))
        self._rng = rng or random.Random()

        self._exact = frozenset(self._words)
        self._sorted: List[Tuple[str, int]] = sorted((w, i) for i, w in enumerate(self._words))
        self._sorted_keys: List[str] = [w for w, _ in self._sorted]

        by_length: Dict[int, List[str]] = {}
        for w in self._words:
            by_length.setdefault(len(w), []).append(w)
        self._by_length: Dict[int, Tuple[str, ...]] = {k: tuple(v) for k, v in by_length.items()}

        self._palindromes: Tuple[str, ...] = tuple(w for w in self._words if _is_palindrome(w))

    # PUBLIC_INTERFACE
    @classmethod
    def from_file(cls, path, rng: Optional[random.Random] = None) -> "WordDictionary":
        """Load a newline-delimited word list.

        A missing or unreadable file is logged once and yields an empty
        dictionary, so every query degrades to an empty result instead of
        failing the process.
        """
        path = Path(path)
        try:
            words = _read_lines(path)
        except OSError as exc:
            logger.error("Unable to read word list %s: %s", path, exc)
            return cls([], rng=rng)
        logger.info("Loaded %d words from %s", len(words), path)
        return cls(words, rng=rng)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def length_counts(self) -> Dict[int, int]:
        """Number of words per length, ordered by length."""
        return {k: len(self._by_length[k]) for k in sorted(self._by_length)}

    # PUBLIC_INTERFACE
    def exists(self, word: Optional[str]) -> bool:
        """True if `word` is in the corpus, ignoring case. Blank input is False."""
        if not word or not word.strip():
            return False
        return word.lower() in self._exact

    def _prefix_positions(self, prefix: str) -> List[int]:
        start = bisect_left(self._sorted_keys, prefix)
        positions = []
        for w, pos in self._sorted[start:]:
            if not w.startswith(prefix):
                break
            positions.append(pos)
        positions.sort()
        return positions

    # PUBLIC_INTERFACE
    def words_with_prefix(self, prefix: Optional[str]) -> List[str]:
        """Words beginning with `prefix` (case-insensitive).

        Returns an empty list for a blank prefix or one containing anything
        other than ASCII letters.
        """
        if not prefix or not prefix.strip() or not _is_letters(prefix):
            return []
        return [self._words[i] for i in self._prefix_positions(prefix.lower())]

    # PUBLIC_INTERFACE
    def search(
        self,
        start_char: Optional[str] = None,
        end_char: Optional[str] = None,
        length: Optional[int] = None,
    ) -> List[str]:
        """Words matching every given filter: first letter, last letter, length.

        At least one filter is required and each given filter must be valid
        (single letters, length >= 1); otherwise the result is empty.
        """
        if start_char is None and end_char is None and length is None:
            return []
        if start_char is not None and not _valid_char(start_char):
            return []
        if end_char is not None and not _valid_char(end_char):
            return []
        if length is not None and length < 1:
            return []

        if length is not None:
            candidates: Iterable[str] = self._by_length.get(length, ())
        elif start_char is not None:
            candidates = [self._words[i] for i in self._prefix_positions(start_char.lower())]
        else:
            candidates = self._words

        result = candidates
        if start_char is not None:
            first = start_char.lower()
            result = [w for w in result if w.startswith(first)]
        if end_char is not None:
            last = end_char.lower()
            result = [w for w in result if w.endswith(last)]
        return list(result)

    # PUBLIC_INTERFACE
    def palindrome_words(self) -> List[str]:
        """Words of two or more letters that read the same in both directions."""
        return list(self._palindromes)

    # PUBLIC_INTERFACE
    def random_word(self, length: Optional[int]) -> Optional[str]:
        """Uniformly pick a word of exactly `length` letters, or None."""
        if length is None:
            return None
        bucket = self._by_length.get(length)
        if not bucket:
            return None
        return self._rng.choice(bucket)
