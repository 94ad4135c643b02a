"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import CharResult, GameConfiguration, GameState, GuessOutcome, WordResult, WORD_LENGTH
from .session import Session

__all__ = [
    'CharResult', 'GameConfiguration', 'GameState', 'GuessOutcome', 'WordResult', 'WORD_LENGTH',
    'Session'
]
