"""
Client Package

Console client that plays Wordle against a running server over HTTP.
"""

import os

from ..config import get_config
from .console import ClientConsole
from .http_client import ApiResponse, WordleClient


def default_base_url() -> str:
    """API root from WORDLE_SERVER_URL, else the configured local port."""
    return os.getenv('WORDLE_SERVER_URL', f"http://localhost:{get_config().PORT}/api/v1")


def main():
    """Connect to the server and play one game in the terminal."""
    client = WordleClient(default_base_url())
    try:
        ClientConsole(client).run()
    finally:
        client.close()


__all__ = ['ApiResponse', 'ClientConsole', 'WordleClient', 'default_base_url', 'main']
