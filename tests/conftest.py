import os
import random
import tempfile

# Keep test logs out of the working tree; must run before twiddle is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='twiddle-logs-'))

import pytest

from twiddle import create_app
from twiddle.config import TestingConfig
from twiddle.models.game import GameOptions
from twiddle.services.dictionary import Dictionary
from twiddle.services.game_engine import GameEngine
from twiddle.services.game_service import initialize_game_service
from twiddle.services.preferences_service import initialize_preferences_service

WORDS = ["CRANE", "TRAIN", "BRAVE"]


def type_word(engine, word):
    """Type every letter of a word, returning the last state change."""
    change = None
    for letter in word:
        change = engine.enter_char(letter)
    return change


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def engine(dictionary):
    return GameEngine(GameOptions(dictionary, max_attempts=2), solution="CRANE")


@pytest.fixture
def game_service():
    return initialize_game_service(Dictionary(WORDS), max_attempts=2, rng=random.Random(0))


@pytest.fixture
def app(game_service):
    initialize_preferences_service()
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
