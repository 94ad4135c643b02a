"""
Game Logger Module for the Wordle API

This module provides structured logging for user actions, server responses,
and game events. Entries are JSON documents written through the standard
logging module.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


class GameLogger:
    """
    Centralized logging system for the Wordle API.

    Features:
    - User action tracking with IP identification
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger('wordle_game')
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> None:
        """
        (Re)build the logger handlers.

        Args:
            log_dir: Directory for daily log files; None or empty logs to console only
            level: Minimum level written to the log file
        """
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.logger = self._setup_logger(level)

    def _log_file(self) -> Optional[Path]:
        if not self.log_dir:
            return None
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self, level: str) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('wordle_game')
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        log_file = self._log_file()
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console handler for only important messages
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'session_id': (getattr(request, 'view_args', None) or {}).get('session_id')
        }

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        session_id: Optional[str] = None,
                        **kwargs):
        """
        Log user actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_guess', 'get_state')
            session_id: Session identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'session_id': session_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, self._get_user_identity(request), details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            session_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            session_id: Session identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'session_id': session_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._get_user_identity(request), details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       session_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, deletions).

        Args:
            session_id: Session identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'session_deleted')
            user_ip: User's IP address, or 'system' for server-initiated events
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'session_id': session_id}
        details = {
            'session_id': session_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  session_id: Optional[str] = None):
        """Log errors with full context."""
        details = {
            'session_id': session_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }

        log_message = self._create_log_entry('ERROR', action, self._get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Trim large structures and never log an unrevealed answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'attempts': state.get('attempts'),
                'max_attempts': state.get('max_attempts'),
                'is_game_ended': state.get('is_game_ended'),
                'is_game_won': state.get('is_game_won'),
                'guesses_count': len(state.get('guessed_words', []))
            }
        if 'answer' in sanitized:
            sanitized['answer_revealed'] = sanitized.pop('answer') is not None

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about today's logged events (used by the health check)."""
        log_file = self._log_file()
        if log_file is None:
            return {'error': 'File logging disabled'}

        try:
            if not log_file.exists():
                return {'error': 'No log file found for today'}

            stats = {
                'log_file': str(log_file),
                'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
                'total_entries': 0,
                'user_actions': 0,
                'server_responses': 0,
                'game_events': 0,
                'errors': 0
            }

            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    if line.strip():
                        stats['total_entries'] += 1
                        if 'USER_ACTION' in line:
                            stats['user_actions'] += 1
                        elif 'SERVER_RESPONSE' in line:
                            stats['server_responses'] += 1
                        elif 'GAME_EVENT' in line:
                            stats['game_events'] += 1
                        elif 'ERROR' in line:
                            stats['errors'] += 1

            return stats

        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}


# Global logger instance, configured by create_app
game_logger = GameLogger()
