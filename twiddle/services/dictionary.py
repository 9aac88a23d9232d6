"""
Dictionary Service

Holds the set of valid words for a game. All entries share one length,
fixed by the first entry added.
"""

import random
from typing import Iterable, Iterator, Optional, Set

from ..models.errors import EmptyDictionaryError, InvalidEntryError, LengthMismatchError


def normalize_word(word: str) -> str:
    return word.strip().upper()


class Dictionary:
    """
    Fixed-length word set with membership testing and random selection.

    Words are stored trimmed and uppercase; lookups apply the same
    normalization.
    """

    def __init__(self, words: Optional[Iterable[str]] = None,
                 rng: Optional[random.Random] = None):
        self._entries: Set[str] = set()
        self._word_length: Optional[int] = None
        self._rng = rng

        for word in words or ():
            self.add(word)

    @classmethod
    def from_text(cls, data: str, rng: Optional[random.Random] = None) -> "Dictionary":
        """
        Build a dictionary from newline-delimited text.

        Blank lines are skipped so a trailing newline is harmless.
        """
        return cls((line for line in data.splitlines() if line.strip()), rng=rng)

    @classmethod
    def from_file(cls, path, rng: Optional[random.Random] = None) -> "Dictionary":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_text(f.read(), rng=rng)

    @property
    def word_length(self) -> Optional[int]:
        return self._word_length

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.contains(word)

    def add(self, word: str) -> None:
        """
        Add a word; adding an existing word is a no-op.

        Raises:
            InvalidEntryError: If the word is empty or not made of ASCII letters
            LengthMismatchError: If the word length differs from the established length
        """
        entry = normalize_word(word)
        if not entry:
            raise InvalidEntryError("Dictionary entries cannot be empty")
        if not word.isascii() or not entry.isalpha():
            raise InvalidEntryError(f"Dictionary entries must be ASCII letters, got '{entry}'")

        if self._word_length is None:
            self._word_length = len(entry)
        elif len(entry) != self._word_length:
            raise LengthMismatchError(entry, self._word_length)

        self._entries.add(entry)

    def contains(self, word: str) -> bool:
        return normalize_word(word) in self._entries

    def pick_random_entry(self, rng: Optional[random.Random] = None) -> str:
        """
        Return one entry chosen uniformly at random.

        Args:
            rng: Random source to use instead of the dictionary's own

        Raises:
            EmptyDictionaryError: If the dictionary has no entries
        """
        if not self._entries:
            raise EmptyDictionaryError("Cannot pick a word from an empty dictionary")

        source = rng or self._rng or random
        # Sorted so a seeded source picks the same word in every process
        return source.choice(sorted(self._entries))
