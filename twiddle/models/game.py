"""
Game Data Models

Contains the game enums, options, state-change events and the serializable
game state snapshot.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple, Union

from .errors import InvalidKeyError

if TYPE_CHECKING:
    from ..services.dictionary import Dictionary


DEFAULT_MAX_ATTEMPTS = 6


class CharState(Enum):
    """Per-letter feedback for a validated attempt."""
    CORRECT = "Correct"  # same letter, same position
    PRESENT = "Present"  # letter appears at a different position
    MISS = "Miss"        # letter is not among the unmatched solution letters


# Keyboard highlight priority: a key never downgrades
CHAR_STATE_PRIORITY: Dict[CharState, int] = {
    CharState.MISS: 0,
    CharState.PRESENT: 1,
    CharState.CORRECT: 2,
}


class ControlKey(Enum):
    """Non-letter keys of the on-screen keyboard."""
    ENTER = "↵"
    BACKSPACE = "←"


_KEY_ALIASES = {
    "↵": ControlKey.ENTER,
    "ENTER": ControlKey.ENTER,
    "\n": ControlKey.ENTER,
    "\r": ControlKey.ENTER,
    "←": ControlKey.BACKSPACE,
    "BACKSPACE": ControlKey.BACKSPACE,
    "\b": ControlKey.BACKSPACE,
    "\x7f": ControlKey.BACKSPACE,
}


def parse_key(raw: Union[str, ControlKey]) -> Union[str, ControlKey]:
    """
    Classify a raw key as a control key or a single uppercase letter.

    Args:
        raw: Key glyph, key name ("Enter", "Backspace") or a letter

    Returns:
        ControlKey for Enter/Backspace, otherwise the uppercase letter

    Raises:
        InvalidKeyError: If the key is neither a letter nor a control key
    """
    if isinstance(raw, ControlKey):
        return raw
    if not isinstance(raw, str) or not raw:
        raise InvalidKeyError(f"Invalid key: {raw!r}")

    control = _KEY_ALIASES.get(raw) or _KEY_ALIASES.get(raw.upper())
    if control is not None:
        return control

    # Only A-Z; some letters upper-case to more than one character
    if len(raw) != 1 or not raw.isascii() or not raw.isalpha():
        raise InvalidKeyError(f"Invalid key: {raw!r}")
    return raw.upper()


class GameOptions:
    """Rules for one game: the dictionary to play from and the attempt count."""

    def __init__(self, dictionary: "Dictionary", max_attempts: Optional[int] = None):
        if max_attempts is None:
            max_attempts = DEFAULT_MAX_ATTEMPTS
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.dictionary = dictionary
        self.max_attempts = max_attempts

    @property
    def word_length(self) -> Optional[int]:
        return self.dictionary.word_length


class StateChangeKind(Enum):
    ADDED_CHAR = "added_char"
    REMOVED_CHAR = "removed_char"
    INVALID_ATTEMPT = "invalid_attempt"
    ATTEMPT_VALIDATED = "attempt_validated"
    GAME_ERROR = "game_error"


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_to_json_value(v) for v in value]
    return value


@dataclass(frozen=True)
class StateChange:
    """
    Outcome of one key press.

    The set of subclasses is closed; consumers switch on ``kind`` (or the
    class) to update the guess grid, the keyboard and the alert box.
    """

    @property
    def kind(self) -> StateChangeKind:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation tagged with ``type``."""
        data = {key: _to_json_value(value) for key, value in asdict(self).items()}
        return {"type": self.kind.value, **data}


@dataclass(frozen=True)
class AddedChar(StateChange):
    attempt_index: int
    char: str

    @property
    def kind(self) -> StateChangeKind:
        return StateChangeKind.ADDED_CHAR


@dataclass(frozen=True)
class RemovedChar(StateChange):
    attempt_index: int

    @property
    def kind(self) -> StateChangeKind:
        return StateChangeKind.REMOVED_CHAR


@dataclass(frozen=True)
class InvalidAttempt(StateChange):
    """The full row is not a dictionary word; the row stays editable."""

    @property
    def kind(self) -> StateChangeKind:
        return StateChangeKind.INVALID_ATTEMPT


@dataclass(frozen=True)
class AttemptValidated(StateChange):
    attempt_index: int
    char_states: Tuple[CharState, ...]
    word: str
    is_finished: bool
    is_win: bool
    solution: str

    @property
    def kind(self) -> StateChangeKind:
        return StateChangeKind.ATTEMPT_VALIDATED

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        # Answer stays secret until the game is over
        if not self.is_finished:
            data["solution"] = None
        return data


@dataclass(frozen=True)
class GameError(StateChange):
    message: str

    @property
    def kind(self) -> StateChangeKind:
        return StateChangeKind.GAME_ERROR


# Fixed GameError messages
GAME_ALREADY_FINISHED = "Game already finished"
ROW_FULL = "Row full. Only Enter or Backspace allowed."
NOT_ENOUGH_LETTERS = "Not enough letters."
ROW_EMPTY = "Row empty."


@dataclass
class AttemptState:
    """Serializable view of one guess row."""
    index: int
    word: str
    char_states: List[str]  # CharState values, empty until validated
    is_validated: bool


@dataclass
class GameState:
    """Server-side game state representation."""
    game_id: str
    word_length: int
    max_attempts: int
    active_attempt_index: int
    is_finished: bool
    is_win: bool
    attempts: List[AttemptState]
    letter_states: Dict[str, str] = field(default_factory=dict)
    solution: Optional[str] = None  # Only included when game is over
