"""
Configuration Management Module

Runtime configuration loaded from environment variables with sensible defaults.
Game rules live in game_settings.py; this module only covers how the puzzle
is hosted (where state is stored, where logs go).
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module, if present
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Storage Settings
    STORAGE_BACKEND = os.getenv('URDLE_STORAGE_BACKEND', 'file')  # memory | file | mongo
    STATE_FILE = os.getenv('URDLE_STATE_FILE', os.path.join(os.path.expanduser('~'), '.urdle', 'state.json'))

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    MONGO_DB = os.getenv('MONGO_DB', 'urdle')
    MONGO_TIMEOUT_MS = int(os.getenv('MONGO_TIMEOUT_MS', 2000))

    # Word list
    WORD_FILE = os.getenv('URDLE_WORD_FILE')  # None means the bundled words.json

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    STORAGE_BACKEND = os.getenv('URDLE_STORAGE_BACKEND', 'mongo')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    STORAGE_BACKEND = 'memory'
    LOG_DIR = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
