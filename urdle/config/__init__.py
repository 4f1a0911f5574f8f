"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: hosting configuration (environment-based)
- game_settings.py: game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_ATTEMPTS, REFERENCE_TIMEZONE, STORAGE_KEY, STATE_SCHEMA_VERSION,
    GAME_TITLE, SHARE_GLYPHS, WORD_FILE, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ATTEMPTS', 'REFERENCE_TIMEZONE', 'STORAGE_KEY', 'STATE_SCHEMA_VERSION',
    'GAME_TITLE', 'SHARE_GLYPHS', 'WORD_FILE', 'validate_word_list_integrity'
]
