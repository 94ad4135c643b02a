"""
Console Package

Runs a single Wordle game in the terminal using the configured game rules.
"""

from ..config import Config, load_game_config
from .game_console import GameConsole, format_result


def main():
    """Load the game configuration and play one game in the terminal."""
    config = load_game_config(Config.GAME_CONFIG_PATH)
    GameConsole(config).run()


__all__ = ['GameConsole', 'format_result', 'main']
