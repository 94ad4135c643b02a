"""
Game Configuration Module

Defines the default game rules and loads per-deployment overrides from a JSON
game-config file. The default word database ships as wordles.json next to this
module.
"""

import json
import os
from typing import Final, Iterable, List, Optional

from ..exceptions import ConfigurationError
from ..models.game import GameConfiguration, WORD_LENGTH
from ..utils.game_logger import game_logger

# Core Game Configuration Constants
MAX_ATTEMPTS: Final[int] = 6
STRICT_MODE: Final[bool] = True


def validate_word_list_integrity(words: Iterable[str]) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only ASCII letters allowed
    3. Format validation: Consistent uppercase formatting
    4. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if the word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def _load_word_list() -> List[str]:
    """
    Load the default word list from the packaged wordles.json file.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If wordles.json file is not found
        ValueError: If the JSON is malformed or the word list is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'wordles.json')

    with open(json_file_path, 'r', encoding='utf-8') as f:
        word_list = json.load(f)

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    uppercase_words = [str(word).upper() for word in word_list]
    validate_word_list_integrity(uppercase_words)
    return uppercase_words


# Curated Word Database loaded from JSON file
WORD_LIST: Final[List[str]] = _load_word_list()


def default_game_config() -> GameConfiguration:
    return GameConfiguration(max_attempts=MAX_ATTEMPTS, strict_mode=STRICT_MODE, word_list=tuple(WORD_LIST))


def load_game_config(path: Optional[str] = None) -> GameConfiguration:
    """
    Build the game configuration from a JSON game-config file.

    The file holds ``maxAttempts``, an optional ``strictMode`` (default true)
    and an optional ``customList``. The custom list replaces the default word
    list only when it holds more words than ``maxAttempts``. A missing,
    unreadable or invalid file falls back to the defaults.

    Args:
        path: Path to the game-config JSON file; None uses the defaults

    Returns:
        GameConfiguration ready to create games with
    """
    if not path:
        return default_game_config()

    if not os.path.exists(path):
        game_logger.logger.warning(f"Config file not found at {path}, using default config")
        return default_game_config()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            config_file = json.load(f)

        if not isinstance(config_file, dict):
            raise ValueError("Game config must be a JSON object")

        max_attempts = config_file.get('maxAttempts', MAX_ATTEMPTS)
        strict_mode = config_file.get('strictMode', STRICT_MODE)
        custom_list = config_file.get('customList') or []

        word_list = WORD_LIST
        if isinstance(custom_list, list) and isinstance(max_attempts, int) and len(custom_list) > max_attempts:
            candidate = [str(word).upper() for word in custom_list]
            validate_word_list_integrity(candidate)
            word_list = candidate

        return GameConfiguration(max_attempts=max_attempts, strict_mode=strict_mode, word_list=tuple(word_list))

    except (OSError, ValueError, ConfigurationError) as e:
        game_logger.logger.warning(f"Error loading config: {e}, using default config")
        return default_game_config()
