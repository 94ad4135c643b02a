"""
HTTP Client

Thin wrapper over the Wordle session API. Every call returns an ApiResponse;
network failures and non-JSON replies are reported as errors instead of
raising, so the console loop can print them and carry on.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

NETWORK_ERROR = 'Network Error'


@dataclass
class ApiResponse:
    """Decoded reply from the server."""
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WordleClient:
    """
    Client for the /api/v1/wordle endpoints.

    Args:
        base_url: API root, e.g. http://localhost:8100/api/v1
        session: requests.Session to send through; a new one is created when omitted
        timeout: Per-request timeout in seconds
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, endpoint: str, json: Optional[Dict[str, Any]] = None) -> ApiResponse:
        try:
            response = self.session.request(
                method, f"{self.base_url}{endpoint}", json=json, timeout=self.timeout
            )
            data = response.json()
        except requests.RequestException as e:
            return ApiResponse(error=NETWORK_ERROR, message=str(e))
        except ValueError:
            return ApiResponse(error=NETWORK_ERROR, message='Server returned an invalid response')

        if not response.ok:
            if not isinstance(data, dict):
                data = {}
            return ApiResponse(
                error=data.get('error', f"HTTP {response.status_code}"),
                message=data.get('message', f"Request failed with status {response.status_code}")
            )
        return ApiResponse(data=data, message=data.get('message'))

    def create_game(self, max_attempts: Optional[int] = None,
                    strict_mode: Optional[bool] = None) -> ApiResponse:
        options = {}
        if max_attempts is not None:
            options['max_attempts'] = max_attempts
        if strict_mode is not None:
            options['strict_mode'] = strict_mode
        return self._request('POST', '/wordle', json=options or None)

    def get_game_status(self, session_id: str) -> ApiResponse:
        return self._request('GET', f"/wordle/{session_id}")

    def submit_guess(self, session_id: str, guess: str) -> ApiResponse:
        return self._request('POST', f"/wordle/{session_id}/guess", json={'wordGuess': guess})

    def delete_game(self, session_id: str) -> ApiResponse:
        return self._request('DELETE', f"/wordle/{session_id}")

    def close(self) -> None:
        self.session.close()
