"""
Game Console

Plays a single Wordle game in the terminal, driving the game engine directly
without the session manager.
"""

import random
from typing import Callable, Optional

from ..exceptions import WordleError
from ..models.game import CharResult, GameConfiguration, WordResult
from ..services.game_engine import Game
from ..utils.game_logger import game_logger

RESULT_SYMBOLS = {
    CharResult.HIT: '🟩',
    CharResult.PRESENT: '🟨',
    CharResult.MISS: '🟥',
}


def format_result(guess: str, result: WordResult) -> str:
    """Render a scored guess as letter/symbol pairs, e.g. 'C🟩 R🟨 ...'."""
    return ' '.join(f"{letter}{RESULT_SYMBOLS[status]}" for letter, status in zip(guess, result))


class GameConsole:
    """
    Interactive console loop for one game.

    Input and output are injectable so the loop can be driven by scripted
    input in tests.
    """

    def __init__(self,
                 config: GameConfiguration,
                 input_func: Callable[[str], str] = input,
                 output: Callable[..., None] = print,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.game = Game(config, rng=rng)
        self._input = input_func
        self._output = output

    def _show_rules(self) -> None:
        self._output('Wordle')
        self._output(f"Get {self.config.max_attempts} chances to guess a 5-letter word.")
        if self.config.strict_mode:
            self._output('Each guess must be a valid 5-letter word from the word list')
        else:
            self._output('Each guess must be a 5-letter word')
        self._output('The color of the tiles will change to show how close your guess was to the word')
        self._output(f"{RESULT_SYMBOLS[CharResult.HIT]} means correct character in the word and in the correct spot")
        self._output(f"{RESULT_SYMBOLS[CharResult.PRESENT]} means correct character in the word but in the wrong spot")
        self._output(f"{RESULT_SYMBOLS[CharResult.MISS]} means character not in any spot")

    def _display_game(self) -> None:
        state = self.game.get_status()
        self._output('\nWORDLE GAME')
        self._output(f"\nAttempts remaining: {state.remaining_attempts}\n")
        for i, (word, result) in enumerate(zip(state.guessed_words, state.guess_results), start=1):
            self._output(f"{i}. {format_result(word, result)}")

        letters = self.game.letter_status()
        if letters:
            self._output('Letters: ' + ' '.join(
                f"{letter}{RESULT_SYMBOLS[CharResult(status)]}" for letter, status in letters.items()
            ))

    def _show_final(self) -> None:
        state = self.game.get_status()
        if state.is_game_won:
            self._output(f"\nCongratulations! You won the game in {state.attempts} guesses")
        else:
            self._output("\nGame over! You've run out of moves")
            self._output(f"The word was: {self.game.reveal_secret()}")

    def run(self) -> bool:
        """
        Play until the game ends or input runs out.

        Returns:
            bool: True if the game was won
        """
        self._show_rules()
        try:
            self._input('Press Enter to continue...')

            while not self.game.is_game_ended:
                self._display_game()
                guess = self._input('\nEnter your 5-letter guess: ').strip()

                try:
                    outcome = self.game.submit_guess(guess)
                except WordleError as e:
                    self._output(f"\n{e.message}")
                    continue

                self._output(f"\nYour guess: {format_result(outcome.guessed_word, outcome.result)}")

        except (EOFError, KeyboardInterrupt):
            self._output('\nGoodbye!')
            return False

        self._display_game()
        self._show_final()
        game_logger.logger.info(
            f"Console game finished: won={self.game.is_game_won} attempts={self.game.attempts}"
        )
        return self.game.is_game_won
