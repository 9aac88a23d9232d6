"""
Services Package

Contains the game engine and the business logic services around it.
"""

from .comparator import compare_word_with_solution
from .dictionary import Dictionary
from .game_engine import GameEngine
from .game_service import GameService, get_game_service, initialize_game_service
from .preferences_service import (
    PreferenceKeys,
    PreferencesService,
    Theme,
    get_preferences_service,
    initialize_preferences_service,
)

__all__ = [
    'compare_word_with_solution',
    'Dictionary',
    'GameEngine',
    'GameService', 'get_game_service', 'initialize_game_service',
    'PreferenceKeys', 'PreferencesService', 'Theme',
    'get_preferences_service', 'initialize_preferences_service',
]
