"""
Client Console

Plays one Wordle game in the terminal against a running server. All game
logic stays on the server; this loop only renders responses and forwards
guesses.
"""

from typing import Callable, Optional

from ..console.game_console import RESULT_SYMBOLS, format_result
from ..models.game import CharResult
from ..utils.game_logger import game_logger
from .http_client import WordleClient


def _as_result(statuses):
    return tuple(CharResult(status) for status in statuses)


class ClientConsole:
    """
    Interactive console loop that talks to the HTTP API.

    The session created at start is always deleted on exit, including when
    input runs out mid-game.
    """

    def __init__(self,
                 client: WordleClient,
                 input_func: Callable[[str], str] = input,
                 output: Callable[..., None] = print):
        self.client = client
        self.session_id: Optional[str] = None
        self._input = input_func
        self._output = output

    def _show_rules(self, max_attempts: int) -> None:
        self._output(f"Game session created: {self.session_id}")
        self._output(f"Get {max_attempts} chances to guess a 5-letter word.")
        self._output('Each guess must be a valid 5-letter word')
        self._output('The color of the tiles will change to show how close your guess was to the word')
        self._output(f"{RESULT_SYMBOLS[CharResult.HIT]} means correct character in the word and in the correct spot")
        self._output(f"{RESULT_SYMBOLS[CharResult.PRESENT]} means correct character in the word but in the wrong spot")
        self._output(f"{RESULT_SYMBOLS[CharResult.MISS]} means character not in any spot")

    def _display_game(self, state) -> None:
        self._output('\nWORDLE GAME - CLIENT')
        self._output(f"\nAttempts remaining: {state['remaining_attempts']}\n")
        for i, (word, statuses) in enumerate(zip(state['guessed_words'], state['guess_results']), start=1):
            self._output(f"{i}. {format_result(word, _as_result(statuses))}")

    def _show_final(self, status) -> None:
        state = status['state']
        if state['is_game_won']:
            self._output(f"\nCongratulations! You won the game in {state['attempts']} guesses")
        else:
            self._output("\nGame over! You've run out of moves")
            self._output(f"The word was: {status.get('answer')}")

    def run(self) -> bool:
        """
        Play until the game ends, input runs out or the server stops answering.

        Returns:
            bool: True if the game was won
        """
        self._output('Welcome to Wordle Client')
        self._output('Connecting to Server ...')

        created = self.client.create_game()
        if not created.ok:
            self._output(f"Failed to create game: {created.message}")
            self._output('Make sure the server is running')
            return False

        self.session_id = created.data['session_id']
        try:
            self._show_rules(created.data['game_config']['max_attempts'])
            self._input('Press Enter to continue...')

            while True:
                status = self.client.get_game_status(self.session_id)
                if not status.ok:
                    self._output(f"Error getting game status: {status.message}")
                    return False

                state = status.data['state']
                self._display_game(state)
                if state['is_game_ended']:
                    self._show_final(status.data)
                    game_logger.logger.info(
                        f"Client game finished: session={self.session_id} won={state['is_game_won']}"
                    )
                    return state['is_game_won']

                guess = self._input('\nEnter your 5-letter guess: ').strip()
                outcome = self.client.submit_guess(self.session_id, guess)
                if not outcome.ok:
                    self._output(f"\n{outcome.message}")
                    continue

                result = _as_result(outcome.data['guess_result'])
                self._output(f"\nYour guess: {format_result(outcome.data['guessed_word'], result)}")

        except (EOFError, KeyboardInterrupt):
            self._output('\nGoodbye!')
            return False
        finally:
            self.client.delete_game(self.session_id)
