"""
API package initializer.

Re-exports the jumble core so callers can import from api directly, e.g.:

    from api import JumbleEngine, GameSessionRegistry

Importing this package does not touch Django settings; the shared engine and
registry instances are created in ApiConfig.ready().
"""

# PUBLIC_INTERFACE
from .jumble import (
    GameNotFoundError,
    GameSessionRegistry,
    GameState,
    GameValidationError,
    InvalidGameIdError,
    JumbleEngine,
    JumbleError,
    NoWordAvailableError,
    WordDictionary,
)

__all__ = [
    "JumbleEngine",
    "WordDictionary",
    "GameState",
    "GameSessionRegistry",
    "JumbleError",
    "GameValidationError",
    "InvalidGameIdError",
    "GameNotFoundError",
    "NoWordAvailableError",
]
