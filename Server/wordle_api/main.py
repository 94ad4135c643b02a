"""
Wordle Session API - Main Entry Point

This is the main entry point for the Wordle HTTP server.
It creates the Flask application, starts the session cleanup worker and
serves requests until interrupted.
"""

from . import create_app
from .config import get_config
from .controllers.game_controller import SESSION_MANAGER_KEY
from .utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    session_manager = None
    try:
        print("Creating Flask application...")
        app_config = get_config()
        app = create_app(app_config)
        session_manager = app.extensions[SESSION_MANAGER_KEY]
        print("✓ Flask application created successfully")

        # Start session cleanup worker in background thread
        session_manager.start_cleanup_worker()
        print(f"✓ Session cleanup worker started - checking every {app_config.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Wordle Server Starting - session cleanup and structured logging enabled")

        print(f"\nStarting Wordle Server on {app_config.HOST}:{app_config.PORT}")
        print(f"Health check: http://{app_config.HOST}:{app_config.PORT}/health")
        print(f"API base: http://{app_config.HOST}:{app_config.PORT}/api/v1")
        print(f"Debug mode: {app_config.DEBUG}")
        print("=" * 50)

        # Reloader would start a second cleanup worker in the child process
        app.run(host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG, use_reloader=False)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if session_manager is not None:
            session_manager.shutdown()


if __name__ == '__main__':
    main()
