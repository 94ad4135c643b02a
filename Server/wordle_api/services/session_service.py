"""
Session Service

Manages live game sessions: creation, lookup, guess submission, deletion and
the periodic sweep that evicts idle sessions.
"""

import random
import threading
import time
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import SessionNotFound
from ..models.game import GameConfiguration, GameState, GuessOutcome
from ..models.session import Session
from ..utils.game_logger import game_logger
from .game_engine import Game

SESSION_TIMEOUT_SECONDS = 60 * 60
CLEANUP_INTERVAL_SECONDS = 10 * 60


class SessionManager:
    """
    Registry of game sessions keyed by opaque session IDs.

    The registry lock guards the session map; each session carries its own
    lock for guesses and status reads. Locks are always taken registry first,
    and request paths release the registry lock before taking a session lock.
    """

    def __init__(self,
                 game_config: GameConfiguration,
                 timeout_seconds: float = SESSION_TIMEOUT_SECONDS,
                 cleanup_interval_seconds: float = CLEANUP_INTERVAL_SECONDS,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time):
        self.game_config = game_config
        self.timeout_seconds = timeout_seconds
        self.cleanup_interval_seconds = cleanup_interval_seconds
        self._rng = rng or random.Random()
        self._clock = clock

        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

        self._stop_event = threading.Event()
        self._cleanup_thread: Optional[threading.Thread] = None

    def _generate_session_id(self) -> str:
        # Called with the registry lock held
        while True:
            session_id = f"{self._rng.getrandbits(64):016x}{int(self._clock() * 1000):x}"
            if session_id not in self._sessions:
                return session_id

    def _get_session(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound(session_id)
        return session

    def create_session(self, config: Optional[GameConfiguration] = None) -> Tuple[str, GameState]:
        """
        Creates a new game session with a randomly selected word.

        Args:
            config: Game configuration, defaults to the manager's configuration

        Returns:
            Tuple of (session_id, initial GameState)
        """
        game = Game(config or self.game_config, rng=self._rng)

        with self._lock:
            session_id = self._generate_session_id()
            now = self._clock()
            self._sessions[session_id] = Session(
                session_id=session_id,
                game=game,
                created_at=now,
                last_updated=now
            )

        game_logger.logger.info(f"Created session {session_id} (max_attempts={game.config.max_attempts})")
        return session_id, game.get_status()

    def get_status(self, session_id: str) -> Tuple[GameState, Optional[str]]:
        """
        Returns the game state for a session and refreshes its idle clock.

        Returns:
            Tuple of (GameState, secret word if the game has ended else None)

        Raises:
            SessionNotFound: If the session does not exist
        """
        session = self._get_session(session_id)
        with session.lock:
            if session.closed:
                raise SessionNotFound(session_id)
            session.touch(self._clock())
            return session.game.get_status(), session.game.reveal_secret()

    def submit_guess(self, session_id: str, raw_guess: str) -> Tuple[GuessOutcome, Optional[str]]:
        """
        Submits a guess to a session's game.

        Validation happens once, inside Game.submit_guess, before any state
        changes.

        Returns:
            Tuple of (GuessOutcome, secret word if the game has ended else None)

        Raises:
            SessionNotFound: If the session does not exist
            InvalidGuess: If the guess fails validation
            GameEnded: If the game is already over
        """
        session = self._get_session(session_id)
        with session.lock:
            if session.closed:
                raise SessionNotFound(session_id)
            session.touch(self._clock())
            outcome = session.game.submit_guess(raw_guess)
            secret = session.game.reveal_secret()
        return outcome, secret

    def get_session_info(self, session_id: str) -> Dict:
        """Returns session metadata without refreshing the idle clock."""
        session = self._get_session(session_id)
        with session.lock:
            if session.closed:
                raise SessionNotFound(session_id)
            return session.to_info()

    def delete_session(self, session_id: str) -> None:
        """
        Removes a session immediately, regardless of game state.

        Raises:
            SessionNotFound: If the session does not exist
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFound(session_id)

        with session.lock:
            session.closed = True
        game_logger.logger.info(f"Deleted session {session_id}")

    def active_session_count(self) -> int:
        with self._lock:
            return len(self._sessions)

    def eviction_sweep(self) -> List[str]:
        """
        Removes every session idle for longer than the timeout.

        Staleness is re-checked under each session's lock so a guess that
        refreshed the session while the sweep was running keeps it alive.

        Returns:
            List of evicted session IDs
        """
        evicted = []
        with self._lock:
            now = self._clock()
            for session_id, session in list(self._sessions.items()):
                if session.idle_seconds(now) <= self.timeout_seconds:
                    continue
                with session.lock:
                    if session.idle_seconds(self._clock()) > self.timeout_seconds:
                        session.closed = True
                        del self._sessions[session_id]
                        evicted.append(session_id)

        for session_id in evicted:
            game_logger.logger.info(f"Cleaned up inactive session: {session_id}")
        return evicted

    def _cleanup_worker(self) -> None:
        """Background loop running the eviction sweep until shutdown."""
        game_logger.logger.info(
            f"Session cleanup worker started - checking every {self.cleanup_interval_seconds} seconds"
        )
        while not self._stop_event.wait(self.cleanup_interval_seconds):
            try:
                evicted = self.eviction_sweep()
                if evicted:
                    game_logger.logger.info(f"Session cleanup: Removed {len(evicted)} expired sessions")
            except Exception as e:
                game_logger.logger.error(f"Error in session cleanup worker: {e}")

    def start_cleanup_worker(self) -> threading.Thread:
        """Starts the periodic eviction sweep in a daemon thread."""
        if self._cleanup_thread and self._cleanup_thread.is_alive():
            return self._cleanup_thread

        self._stop_event.clear()
        self._cleanup_thread = threading.Thread(
            target=self._cleanup_worker, name='wordle-session-cleanup', daemon=True
        )
        self._cleanup_thread.start()
        return self._cleanup_thread

    def shutdown(self) -> None:
        """Stops the cleanup worker and drops all sessions."""
        self._stop_event.set()
        if self._cleanup_thread:
            self._cleanup_thread.join(timeout=5)
            self._cleanup_thread = None

        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()
        for session in sessions:
            with session.lock:
                session.closed = True
