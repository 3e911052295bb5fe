from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional, Tuple

from .dictionary import WordDictionary
from .exceptions import (
    GameNotFoundError,
    GameValidationError,
    InvalidGameIdError,
    NoWordAvailableError,
)
from .scrambler import Scrambler
from .state import GameState, GuessResult
from .subwords import DEFAULT_MIN_LENGTH, SubwordMatcher

logger = logging.getLogger(__name__)

MIN_GAME_LENGTH = 3


def parse_game_id(game_id: Optional[str]) -> str:
    """Return the canonical form of a game id or raise InvalidGameIdError."""
    value = (game_id or "").strip()
    if not value:
        raise InvalidGameIdError("Game id must not be blank.")
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise InvalidGameIdError(f"Malformed game id: {game_id!r}") from None


def validate_game_params(length: Optional[int], min_length: Optional[int]) -> Tuple[int, int]:
    """Check length/min_length and apply the min_length default."""
    if length is None:
        raise GameValidationError("length is required")
    if min_length is None:
        min_length = DEFAULT_MIN_LENGTH
    if min_length <= 0:
        raise GameValidationError(f"Invalid min_length={min_length}, expect positive integer")
    if length < MIN_GAME_LENGTH:
        raise GameValidationError(f"Invalid length={length}, expect greater than or equal to {MIN_GAME_LENGTH}")
    if min_length > length:
        raise GameValidationError(f"Expect min_length={min_length} to be at most length={length}")
    return length, min_length


# PUBLIC_INTERFACE
class GameSessionRegistry:
    """Thread-safe registry mapping game ids to GameState.

    The registry lock only guards the id map itself; guesses and rescrambles
    run under the lock of the individual GameState.
    """

    def __init__(self, dictionary: WordDictionary, matcher: SubwordMatcher, scrambler: Scrambler):
        self.dictionary = dictionary
        self.matcher = matcher
        self.scrambler = scrambler
        self._games: Dict[str, GameState] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id) -> bool:
        try:
            key = parse_game_id(game_id)
        except InvalidGameIdError:
            return False
        with self._lock:
            return key in self._games

    # PUBLIC_INTERFACE
    def create_game(self, length: Optional[int], min_length: Optional[int] = None) -> GameState:
        """Create and register a new game.

        Raises:
            GameValidationError: length < 3, min_length < 1 or min_length > length.
            NoWordAvailableError: the corpus has no word of `length` letters.
        """
        length, min_length = validate_game_params(length, min_length)
        original = self.dictionary.random_word(length)
        if original is None:
            raise NoWordAvailableError(f"Cannot find a word of length {length} to create a game")

        state = GameState.create(
            game_id=str(uuid.uuid4()),
            original=original,
            scramble=self.scrambler.scramble(original),
            sub_words=self.matcher.sub_words(original, min_length),
            min_length=min_length,
        )
        with self._lock:
            self._games[state.id] = state
        logger.info("Created game %s with %d sub-words", state.id, state.total_words)
        return state

    # PUBLIC_INTERFACE
    def get(self, game_id: Optional[str]) -> GameState:
        """Look up a game.

        Raises:
            InvalidGameIdError: blank or non-UUID id.
            GameNotFoundError: no game registered under the id.
        """
        key = parse_game_id(game_id)
        with self._lock:
            state = self._games.get(key)
        if state is None:
            raise GameNotFoundError(f"Game {key} not found")
        return state

    # PUBLIC_INTERFACE
    def apply_guess(self, game_id: Optional[str], word: Optional[str]) -> Tuple[GameState, GuessResult]:
        state = self.get(game_id)
        result = state.apply_guess(word)
        if result.completed:
            logger.info("Game %s complete", state.id)
        return state, result

    # PUBLIC_INTERFACE
    def rescramble(self, game_id: Optional[str]) -> str:
        return self.get(game_id).rescramble(self.scrambler)

    # PUBLIC_INTERFACE
    def discard(self, game_id: Optional[str]) -> bool:
        """Drop a game. Returns False if nothing was registered under the id."""
        key = parse_game_id(game_id)
        with self._lock:
            return self._games.pop(key, None) is not None
