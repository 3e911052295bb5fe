from __future__ import annotations


class JumbleError(Exception):
    """Base class for failures raised by the jumble core."""


# PUBLIC_INTERFACE
class GameValidationError(JumbleError, ValueError):
    """Raised when game parameters (length, min_length) are out of range."""


# PUBLIC_INTERFACE
class InvalidGameIdError(GameValidationError):
    """Raised for a blank or malformed game identifier."""


# PUBLIC_INTERFACE
class GameNotFoundError(JumbleError, LookupError):
    """Raised when a well-formed identifier has no registered game."""


# PUBLIC_INTERFACE
class NoWordAvailableError(JumbleError, LookupError):
    """Raised when the corpus has no word of the requested length."""
