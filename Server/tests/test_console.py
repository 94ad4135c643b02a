from conftest import ScriptedIO, single_word_config
from wordle_api.console import GameConsole, format_result
from wordle_api.models import CharResult


def make_console(io, **config_kwargs):
    return GameConsole(single_word_config(**config_kwargs), input_func=io.input, output=io.output)


def test_format_result():
    result = (CharResult.MISS, CharResult.HIT, CharResult.HIT, CharResult.PRESENT, CharResult.HIT)
    assert format_result('TRACE', result) == 'T🟥 R🟩 A🟩 C🟨 E🟩'


def test_console_win_after_invalid_guess():
    io = ScriptedIO(['', 'abc', '  trace ', 'crane'])
    console = make_console(io)

    assert console.run() is True
    assert 'Guess must be a 5-letter word' in io.text
    assert 'Your guess: T🟥 R🟩 A🟩 C🟨 E🟩' in io.text
    assert 'Congratulations! You won the game in 2 guesses' in io.text
    assert console.game.get_status().attempts == 2


def test_console_loss_reveals_word():
    io = ScriptedIO(['', 'trace', 'slate'])
    console = make_console(io, max_attempts=2)

    assert console.run() is False
    assert "Game over! You've run out of moves" in io.text
    assert 'The word was: CRANE' in io.text
    assert 'Attempts remaining: 0' in io.text


def test_console_strict_mode_message():
    io = ScriptedIO(['', 'trace', 'crane'])
    console = make_console(io, strict_mode=True)

    assert console.run() is True
    assert 'Word is not included in list' in io.text
    assert console.game.get_status().attempts == 1


def test_console_stops_on_end_of_input():
    io = ScriptedIO(['', 'trace'])
    console = make_console(io)

    assert console.run() is False
    assert 'Goodbye!' in io.text
    assert console.game.get_status().attempts == 1
    assert not console.game.is_game_ended
