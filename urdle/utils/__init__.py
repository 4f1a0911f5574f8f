"""
Utilities Package

Contains letter handling and logging helpers.
"""

from .letters import split_letters, letter_count
from .game_logger import game_logger, GameLogger

__all__ = ['split_letters', 'letter_count', 'game_logger', 'GameLogger']
