"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and the bundled word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_WORD_LIST_PATH,
    MAX_ATTEMPTS,
    get_word_statistics,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_WORD_LIST_PATH', 'MAX_ATTEMPTS', 'get_word_statistics'
]
