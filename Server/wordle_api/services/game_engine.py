"""
Game Engine

Contains the core Wordle logic: guess validation, the two-pass letter
evaluation algorithm and the Game class that owns one game's secret word and
guess history.
"""

import random
import re
from typing import Dict, List, Optional

from ..exceptions import ConfigurationError, GameEnded, InvalidGuess
from ..models.game import (
    CharResult, GameConfiguration, GameState, GuessOutcome, WordResult, WORD_LENGTH
)

_LETTERS_ONLY = re.compile(r'[A-Za-z]+')

# Higher rank wins when merging verdicts across guesses
_STATUS_RANK = {CharResult.MISS: 0, CharResult.PRESENT: 1, CharResult.HIT: 2}


def validate_guess(raw, config: GameConfiguration) -> str:
    """
    Validates a raw guess against the game configuration.

    This is the single validation path for guesses; the session manager, the
    HTTP API and the console all reach it through Game.submit_guess.

    Args:
        raw: The guess as received from the caller
        config: Configuration of the game being played

    Returns:
        str: The guess normalized to uppercase

    Raises:
        InvalidGuess: If the guess is malformed or, in strict mode, unknown
    """
    if not isinstance(raw, str):
        raise InvalidGuess("Guess must be a string")

    if len(raw) != WORD_LENGTH:
        raise InvalidGuess(f"Guess must be a {WORD_LENGTH}-letter word")

    if not _LETTERS_ONLY.fullmatch(raw):
        raise InvalidGuess("Guess must contain only letters")

    normalized_guess = raw.upper()

    if config.strict_mode and normalized_guess not in config.word_list:
        raise InvalidGuess("Word is not included in list")

    return normalized_guess


def evaluate_guess(guess: str, secret: str) -> WordResult:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their secret position. Each
    remaining guess letter then takes the first unconsumed secret position
    holding the same letter, so a repeated letter is never credited more times
    than it occurs in the secret.
    """
    result: List[CharResult] = [CharResult.MISS] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # First pass: exact position matches
    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            result[i] = CharResult.HIT
            consumed[i] = True

    # Second pass: letters present elsewhere
    for i in range(WORD_LENGTH):
        if result[i] is CharResult.HIT:
            continue
        for j in range(WORD_LENGTH):
            if not consumed[j] and guess[i] == secret[j]:
                result[i] = CharResult.PRESENT
                consumed[j] = True
                break

    return tuple(result)


def letter_status(state: GameState) -> Dict[str, str]:
    """
    Best verdict seen so far for every guessed letter.

    Status can only progress in priority order: a letter once marked hit
    stays hit, and present is never downgraded to miss.
    """
    best: Dict[str, CharResult] = {}
    for word, result in zip(state.guessed_words, state.guess_results):
        for letter, status in zip(word, result):
            current = best.get(letter)
            if current is None or _STATUS_RANK[status] > _STATUS_RANK[current]:
                best[letter] = status
    return {letter: status.value for letter, status in sorted(best.items())}


class Game:
    """
    A single Wordle game.

    Owns the secret word and the guess history. The secret is chosen with the
    given random source so tests can pin it by passing a seeded
    random.Random.
    """

    def __init__(self, config: GameConfiguration, rng: Optional[random.Random] = None):
        if not isinstance(config, GameConfiguration):
            raise ConfigurationError("Game requires a GameConfiguration")
        if not config.word_list:
            raise ConfigurationError("Word list cannot be empty")

        self.config = config
        self._rng = rng or random.Random()

        # Select random word (kept secret until the game ends)
        self._secret_word = self._rng.choice(config.word_list)

        self.attempts = 0
        self.is_game_won = False
        self.is_game_ended = False
        self._guessed_words: List[str] = []
        self._guess_results: List[WordResult] = []

    def submit_guess(self, raw: str) -> GuessOutcome:
        """
        Processes a guess and updates game state.

        Args:
            raw: The 5-letter word guess, any case

        Returns:
            GuessOutcome with the normalized guess, its verdicts and a state snapshot

        Raises:
            GameEnded: If the game is already won or lost
            InvalidGuess: If the guess fails validation; state is left untouched
        """
        if self.is_game_ended:
            raise GameEnded("Game has ended")

        normalized_guess = validate_guess(raw, self.config)
        result = evaluate_guess(normalized_guess, self._secret_word)

        self.attempts += 1
        self._guessed_words.append(normalized_guess)
        self._guess_results.append(result)

        if all(status is CharResult.HIT for status in result):
            self.is_game_won = True
            self.is_game_ended = True
        elif self.attempts >= self.config.max_attempts:
            self.is_game_ended = True

        return GuessOutcome(
            guessed_word=normalized_guess,
            result=result,
            state=self.get_status()
        )

    def get_status(self) -> GameState:
        """Returns a read-only snapshot of the current game state."""
        return GameState(
            attempts=self.attempts,
            max_attempts=self.config.max_attempts,
            is_game_won=self.is_game_won,
            is_game_ended=self.is_game_ended,
            guessed_words=tuple(self._guessed_words),
            guess_results=tuple(self._guess_results)
        )

    def reveal_secret(self) -> Optional[str]:
        """Returns the secret word once the game has ended, otherwise None."""
        return self._secret_word if self.is_game_ended else None

    def letter_status(self) -> Dict[str, str]:
        return letter_status(self.get_status())
