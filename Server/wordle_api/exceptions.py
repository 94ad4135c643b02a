"""
Wordle Error Types

Domain errors raised by the game engine and session manager. Each error carries
the HTTP status the API layer should answer with, so controllers never need to
map exception types by hand.
"""

from typing import Any, Dict


class WordleError(Exception):
    """Base class for all game and session errors."""

    error = "Bad Request"
    http_status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        """Render the error as the JSON body returned to API clients."""
        return {
            'success': False,
            'error': self.error,
            'message': self.message
        }


class InvalidGuess(WordleError):
    """Guess has the wrong length, non-letters, or is not in the word list."""
    error = "Invalid Guess"


class GameEnded(WordleError):
    """Guess submitted after the game was won or lost."""
    error = "Game Ended"


class SessionNotFound(WordleError):
    """Unknown or evicted session identifier."""
    error = "Not Found"
    http_status = 404

    def __init__(self, session_id: str):
        super().__init__("Game session not found")
        self.session_id = session_id


class ConfigurationError(WordleError):
    """Game configuration cannot produce a playable game."""
    error = "Configuration Error"
