"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..exceptions import ConfigurationError

WORD_LENGTH = 5


class CharResult(Enum):
    """Per-letter verdict for a scored guess."""
    HIT = "hit"
    PRESENT = "present"
    MISS = "miss"


WordResult = Tuple[CharResult, ...]


@dataclass(frozen=True)
class GameConfiguration:
    """
    Immutable settings a game is created with.

    Words are normalized to uppercase on construction. An empty word list or a
    non-positive attempt limit raises ConfigurationError, so any instance that
    exists can be played.
    """
    max_attempts: int
    strict_mode: bool
    word_list: Tuple[str, ...] = field(repr=False)

    def __post_init__(self):
        # bool is an int subclass; True is not a valid attempt limit
        if (not isinstance(self.max_attempts, int) or isinstance(self.max_attempts, bool)
                or self.max_attempts < 1):
            raise ConfigurationError(
                f"max_attempts must be a positive integer, got {self.max_attempts!r}"
            )

        if not isinstance(self.strict_mode, bool):
            raise ConfigurationError(f"strict_mode must be a boolean, got {self.strict_mode!r}")

        words = tuple(str(word).upper() for word in (self.word_list or ()))
        if not words:
            raise ConfigurationError("Word list cannot be empty")

        object.__setattr__(self, 'word_list', words)

    def with_overrides(self, max_attempts: Optional[int] = None,
                       strict_mode: Optional[bool] = None) -> 'GameConfiguration':
        """Returns a copy with the given fields replaced."""
        return GameConfiguration(
            max_attempts=self.max_attempts if max_attempts is None else max_attempts,
            strict_mode=self.strict_mode if strict_mode is None else strict_mode,
            word_list=self.word_list
        )


@dataclass(frozen=True)
class GameState:
    """Snapshot of one game's progress. Never shares storage with the engine."""
    attempts: int
    max_attempts: int
    is_game_won: bool
    is_game_ended: bool
    guessed_words: Tuple[str, ...]
    guess_results: Tuple[WordResult, ...]

    @property
    def remaining_attempts(self) -> int:
        return max(0, self.max_attempts - self.attempts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attempts': self.attempts,
            'max_attempts': self.max_attempts,
            'remaining_attempts': self.remaining_attempts,
            'is_game_won': self.is_game_won,
            'is_game_ended': self.is_game_ended,
            'guessed_words': list(self.guessed_words),
            'guess_results': [[status.value for status in result] for result in self.guess_results]
        }


@dataclass(frozen=True)
class GuessOutcome:
    """Result of one accepted guess."""
    guessed_word: str
    result: WordResult
    state: GameState

    def to_dict(self) -> Dict[str, Any]:
        return {
            'guessed_word': self.guessed_word,
            'guess_result': [status.value for status in self.result],
            'state': self.state.to_dict()
        }
