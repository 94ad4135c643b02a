import json

import pytest

from wordle_api.config import (
    MAX_ATTEMPTS, WORD_LIST, DevelopmentConfig, ProductionConfig, TestingConfig,
    default_game_config, get_config, load_game_config, validate_word_list_integrity
)


def write_config(tmp_path, payload):
    path = tmp_path / 'gameConfig.json'
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding='utf-8')
    return str(path)


def test_packaged_word_list_is_valid():
    assert WORD_LIST
    assert validate_word_list_integrity(WORD_LIST)


@pytest.mark.parametrize('words, message', [
    ([], 'cannot be empty'),
    (['CRANE', 'TOOLONG'], 'not 5 characters'),
    (['CRANE', 'CR4NE'], 'non-alphabetic'),
    (['CRANE', 'slate'], 'uppercase'),
    (['CRANE', 'SLATE', 'CRANE'], 'Duplicate'),
])
def test_validate_word_list_integrity_failures(words, message):
    with pytest.raises(ValueError, match=message):
        validate_word_list_integrity(words)


def test_defaults_without_path():
    config = load_game_config(None)
    assert config == default_game_config()
    assert config.max_attempts == MAX_ATTEMPTS
    assert config.strict_mode is True
    assert config.word_list == tuple(WORD_LIST)


def test_missing_file_falls_back_to_defaults(tmp_path):
    assert load_game_config(str(tmp_path / 'absent.json')) == default_game_config()


def test_malformed_file_falls_back_to_defaults(tmp_path):
    assert load_game_config(write_config(tmp_path, '{not json')) == default_game_config()


def test_custom_list_used_when_longer_than_max_attempts(tmp_path):
    path = write_config(tmp_path, {
        'maxAttempts': 2,
        'strictMode': False,
        'customList': ['crane', 'slate', 'trace']
    })
    config = load_game_config(path)
    assert config.max_attempts == 2
    assert config.strict_mode is False
    assert config.word_list == ('CRANE', 'SLATE', 'TRACE')


def test_short_custom_list_ignored(tmp_path):
    path = write_config(tmp_path, {'maxAttempts': 6, 'customList': ['CRANE', 'SLATE']})
    config = load_game_config(path)
    assert config.max_attempts == 6
    assert config.strict_mode is True
    assert config.word_list == tuple(WORD_LIST)


def test_invalid_values_fall_back_to_defaults(tmp_path):
    assert load_game_config(write_config(tmp_path, {'maxAttempts': 0})) == default_game_config()
    assert load_game_config(write_config(tmp_path, {
        'maxAttempts': 1, 'customList': ['CRANE', 'CR4NE']
    })) == default_game_config()


def test_string_strict_mode_falls_back_to_defaults(tmp_path):
    path = write_config(tmp_path, {'maxAttempts': 6, 'strictMode': 'false'})
    assert load_game_config(path) == default_game_config()


def test_get_config_reads_app_env(monkeypatch):
    monkeypatch.delenv('APP_ENV', raising=False)
    assert get_config() is DevelopmentConfig

    monkeypatch.setenv('APP_ENV', 'production')
    assert get_config() is ProductionConfig
    assert get_config('testing') is TestingConfig


def test_get_config_rejects_unknown_name():
    with pytest.raises(ValueError, match='staging'):
        get_config('staging')
