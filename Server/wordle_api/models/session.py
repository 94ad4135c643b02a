"""
Session Data Models

Contains the server-side session record binding a client to one game.
"""

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from ..services.game_engine import Game


@dataclass
class Session:
    """A live game session. Timestamps are epoch seconds from the manager's clock."""
    session_id: str
    game: 'Game'
    created_at: float
    last_updated: float
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    closed: bool = False

    def touch(self, now: float) -> None:
        self.last_updated = now

    def idle_seconds(self, now: float) -> float:
        return now - self.last_updated

    def to_info(self) -> Dict[str, Any]:
        return {
            'session_id': self.session_id,
            'created_at': datetime.fromtimestamp(self.created_at, tz=timezone.utc).isoformat(),
            'last_updated': datetime.fromtimestamp(self.last_updated, tz=timezone.utc).isoformat(),
            'max_attempts': self.game.config.max_attempts,
            'strict_mode': self.game.config.strict_mode
        }
