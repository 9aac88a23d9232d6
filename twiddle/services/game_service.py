"""
Game Service

Manages the in-memory game sessions served by the application.
"""

import random
import threading
import uuid
from typing import Dict, Optional, Tuple, Union

from ..models.errors import GameNotFoundError
from ..models.game import (
    AttemptState,
    AttemptValidated,
    ControlKey,
    GameOptions,
    GameState,
    StateChange,
)
from ..utils.game_logger import game_logger
from .dictionary import Dictionary
from .game_engine import GameEngine


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Solution selection and secure answer storage
    - Routing key presses to the right engine, one at a time per game
    - Game state snapshots without exposing answers to clients
    """

    def __init__(self, dictionary: Dictionary, max_attempts: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.options = GameOptions(dictionary, max_attempts)
        self.rng = rng
        self.games: Dict[str, GameEngine] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def create_new_game(self, solution: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            solution: Word to play for; picked at random when omitted

        Returns:
            str: Unique game ID for this session
        """
        engine = GameEngine(self.options, solution=solution, rng=self.rng)
        game_id = str(uuid.uuid4())

        with self._registry_lock:
            self.games[game_id] = engine
            self._locks[game_id] = threading.Lock()

        game_logger.logger.info(
            f"Game {game_id} created: word_length={engine.word_length}, "
            f"max_attempts={engine.max_attempts}"
        )
        return game_id

    def get_game(self, game_id: str) -> GameEngine:
        engine, _ = self._get_session(game_id)
        return engine

    def _get_session(self, game_id: str) -> Tuple[GameEngine, threading.Lock]:
        with self._registry_lock:
            engine = self.games.get(game_id)
            lock = self._locks.get(game_id)
        if engine is None or lock is None:
            raise GameNotFoundError(game_id)
        return engine, lock

    def enter_key(self, game_id: str, key: Union[str, ControlKey]) -> StateChange:
        """
        Applies one key press to a game session.

        Args:
            game_id: Unique game identifier
            key: Letter or control key

        Returns:
            StateChange describing the outcome

        Raises:
            GameNotFoundError: If the game does not exist
            InvalidKeyError: If the key is not a letter or control key
        """
        engine, lock = self._get_session(game_id)
        with lock:
            change = engine.enter_char(key)

        if isinstance(change, AttemptValidated) and change.is_finished:
            game_logger.log_game_event(
                game_id,
                'game_won' if change.is_win else 'game_lost',
                attempts_used=change.attempt_index + 1,
                solution=change.solution,
                final_guess=change.word,
            )
        return change

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state (the solution only once the game is over).

        Raises:
            GameNotFoundError: If the game does not exist
        """
        engine, lock = self._get_session(game_id)
        with lock:
            is_finished = engine.is_finished
            return GameState(
                game_id=game_id,
                word_length=engine.word_length,
                max_attempts=engine.max_attempts,
                active_attempt_index=engine.active_attempt_index,
                is_finished=is_finished,
                is_win=engine.is_win,
                attempts=[
                    AttemptState(
                        index=attempt.index,
                        word=attempt.word,
                        char_states=[state.value for state in attempt.char_states],
                        is_validated=attempt.is_validated,
                    )
                    for attempt in engine.attempts
                ],
                letter_states={
                    letter: state.value
                    for letter, state in sorted(engine.letter_states().items())
                },
                solution=engine.solution if is_finished else None,
            )

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._registry_lock:
            if game_id not in self.games:
                return False
            del self.games[game_id]
            del self._locks[game_id]
        return True

    def active_game_count(self) -> int:
        return len(self.games)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(dictionary: Dictionary, max_attempts: Optional[int] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(dictionary, max_attempts, rng)
    return _game_service
