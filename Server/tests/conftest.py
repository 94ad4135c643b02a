import random

import pytest

from wordle_api import create_app
from wordle_api.config import TestingConfig
from wordle_api.models import GameConfiguration
from wordle_api.services.session_service import SessionManager

SECRET = 'CRANE'
WORDS = ('CRANE', 'TRACE', 'SLATE', 'PLANT', 'APPLE', 'SPEED', 'ERASE')


class FakeClock:
    """Manually advanced clock for idle-timeout tests."""

    def __init__(self, start=1_700_000_000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedIO:
    """Feeds scripted answers to a console and records everything printed."""

    def __init__(self, answers):
        self.answers = iter(answers)
        self.lines = []

    def input(self, prompt=''):
        self.lines.append(prompt)
        try:
            return next(self.answers)
        except StopIteration:
            raise EOFError

    def output(self, *args):
        self.lines.append(' '.join(str(arg) for arg in args))

    @property
    def text(self):
        return '\n'.join(self.lines)


def single_word_config(word=SECRET, max_attempts=6, strict_mode=False):
    # One-word list pins the secret
    return GameConfiguration(max_attempts=max_attempts, strict_mode=strict_mode, word_list=(word,))


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def game_config():
    return single_word_config()


@pytest.fixture()
def strict_config():
    return GameConfiguration(max_attempts=6, strict_mode=True, word_list=WORDS)


@pytest.fixture()
def manager(game_config, clock):
    session_manager = SessionManager(
        game_config,
        timeout_seconds=3600,
        cleanup_interval_seconds=600,
        rng=random.Random(1234),
        clock=clock
    )
    yield session_manager
    session_manager.shutdown()


@pytest.fixture()
def flask_app(manager):
    return create_app(TestingConfig, session_manager=manager)


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
