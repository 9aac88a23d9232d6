"""
Word Comparator

Implements the letter evaluation used to give feedback on a guess.
"""

from typing import List, Optional

from ..models.errors import LengthMismatchError
from ..models.game import CharState


def compare_word_with_solution(guess: str, solution: str) -> List[CharState]:
    """
    Classify every letter of a guess against the solution.

    Exact position matches are resolved first and consume their solution
    letter; the remaining letters are then matched against what is left,
    so a repeated letter is never credited more often than it occurs in
    the solution.

    Args:
        guess: The guessed word
        solution: The hidden word, same length as the guess

    Returns:
        List[CharState]: One state per guess position

    Raises:
        LengthMismatchError: If the two words differ in length
    """
    guess = guess.upper()
    solution = solution.upper()

    if len(guess) != len(solution):
        raise LengthMismatchError(guess, len(solution))

    result: List[Optional[CharState]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(solution)

    # First pass: exact matches
    for i, letter in enumerate(guess):
        if letter == solution[i]:
            result[i] = CharState.CORRECT
            remaining[i] = None

    # Second pass: present elsewhere, or miss
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in remaining:
            result[i] = CharState.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = CharState.MISS

    return result  # type: ignore[return-value]
