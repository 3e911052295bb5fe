"""
Jumble word-puzzle core.

Exports:
- WordDictionary for corpus queries (exists, prefix, search, palindromes, random pick)
- SubwordMatcher and Scrambler for sub-word enumeration and letter shuffling
- JumbleEngine bundling the above for stateless queries
- GameState and GameSessionRegistry for guessing games
- the JumbleError exception hierarchy

These modules are framework-agnostic and can be reused by views, management
commands or services without importing request objects.
"""

from .dictionary import WordDictionary
from .engine import JumbleEngine
from .exceptions import (
    GameNotFoundError,
    GameValidationError,
    InvalidGameIdError,
    JumbleError,
    NoWordAvailableError,
)
from .registry import GameSessionRegistry
from .scrambler import Scrambler
from .state import GameSnapshot, GameState, GuessResult
from .subwords import SubwordMatcher

__all__ = [
    "WordDictionary",
    "JumbleEngine",
    "SubwordMatcher",
    "Scrambler",
    "GameState",
    "GameSnapshot",
    "GuessResult",
    "GameSessionRegistry",
    "JumbleError",
    "GameValidationError",
    "InvalidGameIdError",
    "GameNotFoundError",
    "NoWordAvailableError",
]
