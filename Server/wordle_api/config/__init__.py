"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, the default word list and the game-config loader
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    WORD_LIST, MAX_ATTEMPTS, STRICT_MODE,
    validate_word_list_integrity, default_game_config, load_game_config
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'WORD_LIST', 'MAX_ATTEMPTS', 'STRICT_MODE',
    'validate_word_list_integrity', 'default_game_config', 'load_game_config'
]
