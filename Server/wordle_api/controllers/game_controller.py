"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from ..exceptions import ConfigurationError, InvalidGuess, WordleError
from ..services.game_engine import letter_status
from ..services.session_service import SessionManager
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

SESSION_MANAGER_KEY = 'wordle_sessions'


def get_session_manager() -> SessionManager:
    """Get the session manager owned by the current application."""
    return current_app.extensions[SESSION_MANAGER_KEY]


def _error_response(action: str, error: WordleError, session_id=None, **kwargs):
    error_response = error.to_response()
    game_logger.log_server_response(request, action, False, error_response, session_id, **kwargs)
    return jsonify(error_response), error.http_status


@game_bp.route('/wordle', methods=['POST'])
def new_game():
    """Create a new game session."""
    session_manager = get_session_manager()

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    game_logger.log_user_action(request, 'new_game', extra_data=data)

    try:
        if not isinstance(data, dict):
            raise ConfigurationError("Game options must be a JSON object")

        game_config = session_manager.game_config
        if 'max_attempts' in data or 'strict_mode' in data:
            game_config = game_config.with_overrides(
                max_attempts=data.get('max_attempts'),
                strict_mode=data.get('strict_mode')
            )

        session_id, state = session_manager.create_session(game_config)
    except WordleError as e:
        return _error_response('new_game', e)

    response_data = {
        'success': True,
        'session_id': session_id,
        'state': state.to_dict(),
        'game_config': {
            'max_attempts': game_config.max_attempts,
            'strict_mode': game_config.strict_mode
        }
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, session_id,
        max_attempts=game_config.max_attempts
    )
    return jsonify(response_data), 201


@game_bp.route('/wordle/<session_id>', methods=['GET'])
def get_state(session_id):
    """Get current game state."""
    session_manager = get_session_manager()
    game_logger.log_user_action(request, 'get_state', session_id)

    try:
        state, answer = session_manager.get_status(session_id)
        session_info = session_manager.get_session_info(session_id)
    except WordleError as e:
        return _error_response('get_state', e, session_id)

    response_data = {
        'success': True,
        'session_id': session_id,
        'state': state.to_dict(),
        'letter_status': letter_status(state),
        'session': session_info
    }
    if answer is not None:
        response_data['answer'] = answer

    game_logger.log_server_response(
        request, 'get_state', True, response_data, session_id,
        attempts=state.attempts, game_over=state.is_game_ended
    )
    return jsonify(response_data)


@game_bp.route('/wordle/<session_id>/guess', methods=['POST'])
def make_guess(session_id):
    """Submit a guess for validation and evaluation."""
    session_manager = get_session_manager()

    data = request.get_json(silent=True)
    guess = None
    if isinstance(data, dict):
        guess = data.get('guess', data.get('wordGuess'))

    game_logger.log_user_action(request, 'submit_guess', session_id, guess=guess)

    try:
        if guess is None:
            raise InvalidGuess("Guess is required")
        outcome, answer = session_manager.submit_guess(session_id, guess)
    except WordleError as e:
        return _error_response('submit_guess', e, session_id, attempted_guess=guess)

    response_data = {
        'success': True,
        'session_id': session_id,
        **outcome.to_dict()
    }
    if answer is not None:
        response_data['answer'] = answer

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, session_id,
        guess=outcome.guessed_word, round=outcome.state.attempts, game_over=outcome.state.is_game_ended
    )

    if outcome.state.is_game_ended:
        event = 'game_won' if outcome.state.is_game_won else 'game_lost'
        game_logger.log_game_event(
            session_id, event, request.remote_addr,
            rounds_used=outcome.state.attempts, target_word=answer,
            final_guess=outcome.guessed_word
        )

    return jsonify(response_data)


@game_bp.route('/wordle/<session_id>', methods=['DELETE'])
def delete_game(session_id):
    """Delete a game session."""
    session_manager = get_session_manager()
    game_logger.log_user_action(request, 'delete_game', session_id)

    try:
        session_manager.delete_session(session_id)
    except WordleError as e:
        return _error_response('delete_game', e, session_id)

    response_data = {'success': True}
    game_logger.log_server_response(request, 'delete_game', True, response_data, session_id)
    game_logger.log_game_event(session_id, 'session_deleted', request.remote_addr)
    return jsonify(response_data)


health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    session_manager = get_session_manager()

    response_data = {
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'active_sessions': session_manager.active_session_count(),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
