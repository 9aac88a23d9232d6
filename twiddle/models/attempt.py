"""
Attempt Model

One row of the guess grid.
"""

from typing import List, Tuple

from .errors import AttemptAlreadyValidatedError, AttemptNotFullError, EmptyAttemptError
from .game import CharState


class Attempt:
    """
    Accumulates the letters of one guess and, once validated, holds the
    feedback for each position.

    A validated attempt is frozen: its word and char states never change.
    """

    def __init__(self, word_length: int, index: int):
        self.word_length = word_length
        self.index = index
        self.is_validated = False
        self._chars: List[str] = []
        self._char_states: Tuple[CharState, ...] = ()

    def __repr__(self):
        return f"Attempt(index={self.index}, word={self.word!r}, validated={self.is_validated})"

    @property
    def word(self) -> str:
        return "".join(self._chars)

    @property
    def char_states(self) -> Tuple[CharState, ...]:
        return self._char_states

    @property
    def is_full(self) -> bool:
        return len(self._chars) == self.word_length

    @property
    def is_empty(self) -> bool:
        return not self._chars

    @property
    def is_correct(self) -> bool:
        return (len(self._char_states) == self.word_length
                and all(state == CharState.CORRECT for state in self._char_states))

    def add_char(self, char: str) -> None:
        """Append a letter; ignored when the row is full."""
        if self.is_full:
            return
        self._chars.append(char)

    def remove_last_char(self) -> None:
        if self.is_validated:
            raise AttemptAlreadyValidatedError(f"Attempt {self.index} is already validated.")
        if self.is_empty:
            raise EmptyAttemptError("Row empty")
        self._chars.pop()

    def validate(self, solution: str) -> None:
        """
        Compare the word against the solution and freeze the attempt.

        Raises:
            AttemptNotFullError: If fewer than word_length letters were entered
            AttemptAlreadyValidatedError: If called a second time
        """
        # services imports models, so this one stays local
        from ..services.comparator import compare_word_with_solution

        if self.is_validated:
            raise AttemptAlreadyValidatedError(f"Attempt {self.index} is already validated.")
        if not self.is_full:
            raise AttemptNotFullError("Attempt is not full.")

        self._char_states = tuple(compare_word_with_solution(self.word, solution))
        self.is_validated = True
