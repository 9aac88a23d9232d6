"""
Game Engine

Turn-based state machine for a single game: routes each key press to the
active attempt, validates full rows against the dictionary and decides
when the game is over.
"""

import random
from typing import Dict, Optional, Tuple, Union

from ..models.attempt import Attempt
from ..models.errors import LengthMismatchError, UnknownSolutionError
from ..models.game import (
    CHAR_STATE_PRIORITY,
    GAME_ALREADY_FINISHED,
    NOT_ENOUGH_LETTERS,
    ROW_EMPTY,
    ROW_FULL,
    AddedChar,
    AttemptValidated,
    CharState,
    ControlKey,
    GameError,
    GameOptions,
    InvalidAttempt,
    RemovedChar,
    StateChange,
    parse_key,
)
from .dictionary import normalize_word


class GameEngine:
    """
    One game session.

    Exactly one attempt is active at a time. The active index only moves
    forward, and only after a validated guess that neither wins nor uses
    the last attempt. Once finished, no attempt changes again.
    """

    def __init__(self, options: GameOptions, solution: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        self.options = options
        self._solution = self._choose_solution(solution, rng)
        self._attempts: Tuple[Attempt, ...] = tuple(
            Attempt(self.word_length, i) for i in range(options.max_attempts)
        )
        self._active_attempt_index = 0

    def _choose_solution(self, solution: Optional[str], rng: Optional[random.Random]) -> str:
        dictionary = self.options.dictionary
        if solution is None:
            return dictionary.pick_random_entry(rng)

        solution = normalize_word(solution)
        if dictionary.word_length is not None and len(solution) != dictionary.word_length:
            raise LengthMismatchError(solution, dictionary.word_length)
        if not dictionary.contains(solution):
            raise UnknownSolutionError(f"Solution '{solution}' is not in the dictionary")
        return solution

    @property
    def solution(self) -> str:
        return self._solution

    @property
    def word_length(self) -> int:
        return self.options.word_length

    @property
    def max_attempts(self) -> int:
        return self.options.max_attempts

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return self._attempts

    @property
    def active_attempt_index(self) -> int:
        return self._active_attempt_index

    @property
    def active_attempt(self) -> Attempt:
        return self._attempts[self._active_attempt_index]

    @property
    def is_last_attempt(self) -> bool:
        return self._active_attempt_index == self.max_attempts - 1

    @property
    def is_win(self) -> bool:
        return self.active_attempt.is_correct

    @property
    def is_finished(self) -> bool:
        return self.is_win or (self.is_last_attempt and self.active_attempt.is_validated)

    def enter_char(self, key: Union[str, ControlKey]) -> StateChange:
        """
        Apply one key press and describe what happened.

        Rejected input (game over, row full, row empty, too few letters)
        comes back as a GameError without touching any attempt.

        Args:
            key: A letter, or Enter/Backspace as a ControlKey or key name

        Returns:
            StateChange: The event the presentation layer should apply

        Raises:
            InvalidKeyError: If the key is not a letter or control key
        """
        if self.is_finished:
            return GameError(GAME_ALREADY_FINISHED)

        key = parse_key(key)
        attempt = self.active_attempt

        if attempt.is_full:
            if key is ControlKey.ENTER:
                return self._validate_active_attempt()
            if key is ControlKey.BACKSPACE:
                attempt.remove_last_char()
                return RemovedChar(attempt.index)
            return GameError(ROW_FULL)

        if key is ControlKey.ENTER:
            return GameError(NOT_ENOUGH_LETTERS)
        if key is ControlKey.BACKSPACE:
            if attempt.is_empty:
                return GameError(ROW_EMPTY)
            attempt.remove_last_char()
            return RemovedChar(attempt.index)

        attempt.add_char(key)
        return AddedChar(attempt.index, key)

    def _validate_active_attempt(self) -> StateChange:
        attempt = self.active_attempt

        # Unknown words leave the row as typed so the player can fix it
        if not self.options.dictionary.contains(attempt.word):
            return InvalidAttempt()

        attempt.validate(self._solution)
        is_finished = self.is_finished
        change = AttemptValidated(
            attempt_index=attempt.index,
            char_states=attempt.char_states,
            word=attempt.word,
            is_finished=is_finished,
            is_win=attempt.is_correct,
            solution=self._solution,
        )

        if not is_finished:
            self._active_attempt_index += 1

        return change

    def letter_states(self) -> Dict[str, CharState]:
        """
        Best known state of every letter guessed so far, for keyboard highlighting.
        """
        states: Dict[str, CharState] = {}
        for attempt in self._attempts:
            if not attempt.is_validated:
                continue
            for letter, state in zip(attempt.word, attempt.char_states):
                current = states.get(letter)
                if current is None or CHAR_STATE_PRIORITY[state] > CHAR_STATE_PRIORITY[current]:
                    states[letter] = state
        return states
