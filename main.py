"""
Twiddle Game Server - Main Entry Point

Loads the word list, initializes the services and starts the
Flask-SocketIO application.
"""

import os

from twiddle import create_app
from twiddle.config import config
from twiddle.models.errors import EmptyDictionaryError
from twiddle.services.dictionary import Dictionary
from twiddle.services.game_service import initialize_game_service
from twiddle.services.preferences_service import initialize_preferences_service
from twiddle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        dictionary = Dictionary.from_file(config_class.WORD_LIST_PATH)
        if not len(dictionary):
            raise EmptyDictionaryError(f"Word list {config_class.WORD_LIST_PATH} has no words")
        game_logger.logger.info(
            f"Loaded {len(dictionary)} words of length {dictionary.word_length} "
            f"from {config_class.WORD_LIST_PATH}"
        )

        initialize_game_service(dictionary, config_class.MAX_ATTEMPTS)
        initialize_preferences_service()

        app, socketio = create_app(config_class)

        game_logger.logger.info(
            f"Twiddle Server Starting on {config_class.HOST}:{config_class.PORT} "
            f"(debug={config_class.DEBUG})"
        )
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        game_logger.logger.info("Twiddle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
