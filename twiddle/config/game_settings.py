"""
Game Configuration Constants Module

Game rules and the bundled word list. The word list is a newline-delimited
text file with one word per line; every word must have the same length.
It is loaded with `Dictionary.from_file`.
"""

import os
from typing import Final, List

MAX_ATTEMPTS: Final[int] = 6
"""
Number of guess attempts allowed per game.
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words5.txt'
)


def get_word_statistics(words: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words
            - word_length: Length shared by all words
            - avg_vowel_count: Average vowels per word
            - most_common_letters: Five most frequent letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "word_length": len(words[0]),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
