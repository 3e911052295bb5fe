from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, Literal, Optional, Tuple

from .scrambler import Scrambler

GameStatus = Literal["ACTIVE", "COMPLETE"]


def normalize_guess(value: Optional[str]) -> str:
    """Trim and lowercase incoming guesses; sub-word keys are lowercase."""
    return (value or "").strip().lower()


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class GuessResult:
    """Outcome of one guess.

    - correct: the guess matched a sub-word that had not been found yet
    - completed: this guess found the last remaining sub-word
    - snapshot: the game as it stood right after this guess, taken under the
      same lock hold as the guess itself
    """

    correct: bool
    completed: bool = False
    snapshot: Optional[GameSnapshot] = field(default=None, compare=False)


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class GameSnapshot:
    """Consistent, immutable copy of a game taken under its lock."""

    id: str
    original: str
    scramble: str
    min_length: int
    sub_words: Tuple[str, ...]
    guessed_words: Tuple[str, ...]

    @property
    def total_words(self) -> int:
        return len(self.sub_words)

    @property
    def remaining_words(self) -> int:
        return len(self.sub_words) - len(self.guessed_words)

    @property
    def status(self) -> GameStatus:
        return "COMPLETE" if self.remaining_words == 0 else "ACTIVE"


# PUBLIC_INTERFACE
@dataclass(eq=False)
class GameState:
    """One puzzle: a seed word, its displayed scramble and the sub-words to find.

    Mutation goes through apply_guess() and rescramble() only, both guarded by
    a lock owned by this game, so concurrent guesses on the same game are
    serialized while other games proceed independently.

    Notes:
        Sub-word flags only ever move from False to True. A game with no
        sub-words at all starts out COMPLETE.
    """

    id: str
    original: str
    scramble: str
    min_length: int
    sub_words: Dict[str, bool] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @classmethod
    def create(cls, game_id: str, original: str, scramble: str, sub_words: Iterable[str], min_length: int) -> "GameState":
        return cls(
            id=game_id,
            original=original,
            scramble=scramble,
            min_length=min_length,
            sub_words={w: False for w in sub_words},
        )

    @property
    def total_words(self) -> int:
        return len(self.sub_words)

    @property
    def remaining_words(self) -> int:
        with self._lock:
            return self._remaining()

    @property
    def is_complete(self) -> bool:
        return self.remaining_words == 0

    def _remaining(self) -> int:
        return sum(1 for found in self.sub_words.values() if not found)

    # PUBLIC_INTERFACE
    def apply_guess(self, candidate: Optional[str]) -> GuessResult:
        """Mark `candidate` as found if it is a sub-word not guessed yet.

        Blank input, unknown words, repeats, and any guess made after the game
        is complete all report an incorrect guess; none of them raise.
        """
        word = normalize_guess(candidate)
        with self._lock:
            if not word or self.sub_words.get(word, True):
                return GuessResult(correct=False, snapshot=self._snapshot())
            self.sub_words[word] = True
            return GuessResult(correct=True, completed=self._remaining() == 0, snapshot=self._snapshot())

    # PUBLIC_INTERFACE
    def rescramble(self, scrambler: Scrambler) -> str:
        """Replace the displayed scramble, avoiding the current one if possible."""
        with self._lock:
            self.scramble = scrambler.scramble(self.original, previous=self.scramble)
            return self.scramble

    # PUBLIC_INTERFACE
    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self._snapshot()

    def _snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            id=self.id,
            original=self.original,
            scramble=self.scramble,
            min_length=self.min_length,
            sub_words=tuple(self.sub_words),
            guessed_words=tuple(w for w, found in self.sub_words.items() if found),
        )
