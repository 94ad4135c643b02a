from urllib.parse import urlsplit

import requests

from conftest import ScriptedIO
from wordle_api.client import ClientConsole, WordleClient, default_base_url

BASE_URL = 'http://wordle.test/api/v1'


class FlaskResponse:
    def __init__(self, response):
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self._body = response.get_json(silent=True)

    def json(self):
        if self._body is None:
            raise ValueError('No JSON object could be decoded')
        return self._body


class FlaskSession:
    """Routes requests.Session.request calls into the Flask test client."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []
        self.closed = False

    def request(self, method, url, json=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append((method, path, json))
        return FlaskResponse(self.test_client.open(path, method=method, json=json))

    def close(self):
        self.closed = True


class HtmlResponse:
    status_code = 502
    ok = False

    def json(self):
        raise ValueError('Expecting value')


class DownSession:
    def request(self, method, url, json=None, timeout=None):
        raise requests.ConnectionError('Connection refused')


def make_client(test_client):
    return WordleClient(BASE_URL, session=FlaskSession(test_client))


def test_client_round_trip(client):
    api = make_client(client)

    created = api.create_game(max_attempts=3)
    assert created.ok
    session_id = created.data['session_id']
    assert created.data['game_config']['max_attempts'] == 3

    guess = api.submit_guess(session_id, 'trace')
    assert guess.ok
    assert guess.data['guessed_word'] == 'TRACE'
    assert guess.data['guess_result'] == ['miss', 'hit', 'hit', 'present', 'hit']

    status = api.get_game_status(session_id)
    assert status.data['state']['attempts'] == 1
    assert 'answer' not in status.data

    assert api.delete_game(session_id).ok
    assert api.session.calls[1] == ('POST', f'/api/v1/wordle/{session_id}/guess', {'wordGuess': 'trace'})


def test_client_maps_error_bodies(client):
    api = make_client(client)

    missing = api.get_game_status('nope')
    assert not missing.ok
    assert missing.error == 'Not Found'
    assert missing.message == 'Game session not found'

    session_id = api.create_game().data['session_id']
    invalid = api.submit_guess(session_id, 'ab')
    assert invalid.error == 'Invalid Guess'
    assert invalid.message == 'Guess must be a 5-letter word'


def test_client_reports_network_errors():
    api = WordleClient(BASE_URL, session=DownSession())
    response = api.create_game()
    assert not response.ok
    assert response.error == 'Network Error'
    assert 'Connection refused' in response.message


def test_client_reports_non_json_reply():
    class HtmlSession:
        def request(self, method, url, json=None, timeout=None):
            return HtmlResponse()

    api = WordleClient(BASE_URL, session=HtmlSession())
    response = api.get_game_status('x')
    assert response.error == 'Network Error'
    assert response.message == 'Server returned an invalid response'


def test_console_wins_and_deletes_session(client, manager):
    io = ScriptedIO(['', 'abc', 'trace', 'crane', ''])
    api = make_client(client)

    assert ClientConsole(api, input_func=io.input, output=io.output).run() is True
    assert 'Get 6 chances to guess a 5-letter word.' in io.text
    assert 'Guess must be a 5-letter word' in io.text
    assert 'Your guess: T🟥 R🟩 A🟩 C🟨 E🟩' in io.text
    assert 'Congratulations! You won the game in 2 guesses' in io.text
    assert api.session.calls[-1][0] == 'DELETE'
    assert manager.active_session_count() == 0


def test_console_loss_shows_answer(client, manager):
    io = ScriptedIO([''] + ['slate'] * 6)
    api = make_client(client)

    assert ClientConsole(api, input_func=io.input, output=io.output).run() is False
    assert "Game over! You've run out of moves" in io.text
    assert 'The word was: CRANE' in io.text
    assert manager.active_session_count() == 0


def test_console_end_of_input_still_deletes_session(client, manager):
    io = ScriptedIO(['', 'trace'])
    api = make_client(client)

    assert ClientConsole(api, input_func=io.input, output=io.output).run() is False
    assert 'Goodbye!' in io.text
    assert manager.active_session_count() == 0


def test_console_without_server():
    io = ScriptedIO([''])
    console = ClientConsole(WordleClient(BASE_URL, session=DownSession()), input_func=io.input, output=io.output)

    assert console.run() is False
    assert 'Failed to create game: Connection refused' in io.text
    assert console.session_id is None


def test_default_base_url(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('WORDLE_SERVER_URL', raising=False)
    assert default_base_url().startswith('http://localhost:')
    assert default_base_url().endswith('/api/v1')

    monkeypatch.setenv('WORDLE_SERVER_URL', 'http://wordle.example:9000/api/v1')
    assert default_base_url() == 'http://wordle.example:9000/api/v1'
