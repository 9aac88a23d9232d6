"""
Data Models Package

Contains all data models, events and errors used throughout the application.
"""

from .attempt import Attempt
from .errors import (
    AttemptAlreadyValidatedError,
    AttemptNotFullError,
    EmptyAttemptError,
    EmptyDictionaryError,
    GameNotFoundError,
    InvalidEntryError,
    InvalidKeyError,
    LengthMismatchError,
    TwiddleError,
    UnknownSolutionError,
)
from .game import (
    AddedChar,
    AttemptState,
    AttemptValidated,
    CharState,
    ControlKey,
    GameError,
    GameOptions,
    GameState,
    InvalidAttempt,
    RemovedChar,
    StateChange,
    StateChangeKind,
    parse_key,
)

__all__ = [
    'Attempt',
    'AttemptAlreadyValidatedError', 'AttemptNotFullError', 'EmptyAttemptError',
    'EmptyDictionaryError', 'GameNotFoundError', 'InvalidEntryError', 'InvalidKeyError',
    'LengthMismatchError', 'TwiddleError', 'UnknownSolutionError',
    'AddedChar', 'AttemptState', 'AttemptValidated', 'CharState', 'ControlKey',
    'GameError', 'GameOptions', 'GameState', 'InvalidAttempt', 'RemovedChar',
    'StateChange', 'StateChangeKind', 'parse_key',
]
