"""
Services Package

Contains all business logic and service classes.
"""

from .game_engine import Game, evaluate_guess, letter_status, validate_guess
from .session_service import SessionManager

__all__ = [
    'Game', 'evaluate_guess', 'letter_status', 'validate_guess',
    'SessionManager'
]
