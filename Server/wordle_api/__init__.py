"""
Wordle Session API Package

A Wordle game served over HTTP with in-memory sessions, plus a console mode
that plays a single game locally.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config, load_game_config
from .utils.game_logger import game_logger


def create_app(config_class=Config, session_manager=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        session_manager: Optional pre-built SessionManager; one is created from
            the configuration when omitted

    Returns:
        Flask application instance with all extensions initialized
    """
    from .controllers.error_handlers import register_error_handlers
    from .controllers.game_controller import SESSION_MANAGER_KEY, game_bp, health_bp
    from .services.session_service import SessionManager

    app = Flask(__name__)
    app.config.from_object(config_class)

    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize extensions
    CORS(app)

    if session_manager is None:
        session_manager = SessionManager(
            load_game_config(app.config.get('GAME_CONFIG_PATH')),
            timeout_seconds=app.config['SESSION_TIMEOUT_SECONDS'],
            cleanup_interval_seconds=app.config['CLEANUP_INTERVAL_SECONDS']
        )
    app.extensions[SESSION_MANAGER_KEY] = session_manager

    # Register blueprints
    app.register_blueprint(game_bp, url_prefix='/api/v1')
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    return app
