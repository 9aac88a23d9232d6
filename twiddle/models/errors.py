"""
Game Errors

Exceptions raised when a caller breaks the contract of a game component.
Rejected player input (row full, word not in list, ...) is not an error:
the engine reports it as a state change instead.
"""


class TwiddleError(Exception):
    """Base class for all game errors."""


class DictionaryError(TwiddleError, ValueError):
    """Invalid use of a Dictionary."""


class InvalidEntryError(DictionaryError):
    """Entry is empty or not made of ASCII letters."""


class LengthMismatchError(DictionaryError):
    """Entry length differs from the dictionary's word length."""

    def __init__(self, entry: str, expected: int):
        super().__init__(
            f"Invalid entry: '{entry}'. Expected a word length of {expected}."
        )
        self.entry = entry
        self.expected = expected


class EmptyDictionaryError(DictionaryError):
    """No entry to pick from."""


class UnknownSolutionError(DictionaryError):
    """Requested solution is not a dictionary entry."""


class AttemptError(TwiddleError, RuntimeError):
    """Invalid operation on an Attempt."""


class EmptyAttemptError(AttemptError):
    pass


class AttemptNotFullError(AttemptError):
    pass


class AttemptAlreadyValidatedError(AttemptError):
    pass


class InvalidKeyError(TwiddleError, ValueError):
    """Input is neither a letter nor a control key."""


class GameNotFoundError(TwiddleError, KeyError):
    """No game session with the given id."""

    def __str__(self):
        return f"Game not found: {self.args[0]}" if self.args else "Game not found"
