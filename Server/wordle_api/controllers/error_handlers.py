"""
Error Handlers

Application-wide error handlers turning failures into JSON responses.

- WordleError -> its own status code and {success, error, message} body
- 404 / 405 -> JSON instead of Flask's HTML pages
- Exception (catch-all) -> 500 that never leaks internal details
"""

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..exceptions import WordleError
from ..utils.game_logger import game_logger


def register_error_handlers(app: Flask) -> None:
    """Register all global error handlers on the Flask app."""

    @app.errorhandler(WordleError)
    def handle_wordle_error(error: WordleError):
        game_logger.log_server_response(request, request.endpoint or 'unknown', False, error.to_response())
        return jsonify(error.to_response()), error.http_status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        message = f"Route {request.path} not found" if error.code == 404 else error.description
        return jsonify({
            'success': False,
            'error': error.name,
            'message': message
        }), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        game_logger.log_error(request, error, request.endpoint or 'unknown')
        return jsonify({
            'success': False,
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred'
        }), 500
