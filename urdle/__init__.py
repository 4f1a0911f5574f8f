"""
Urdle - Daily Word Puzzle Core

A Wordle-style puzzle for four-letter Urdu words, played once per day
against a word chosen from the date. This package contains the game rules,
daily word selection and persistence; rendering and input belong to the UI
layer that drives it.
"""

from .config import Config
from .services.catalog import WordCatalog
from .services.game_service import DailyPuzzleService, initialize_puzzle_service
from .services.storage_service import create_state_store
from .utils.game_logger import game_logger


def create_puzzle_service(config_class=Config) -> DailyPuzzleService:
    """
    Factory for the puzzle service.

    Args:
        config_class: Configuration class to use

    Returns:
        DailyPuzzleService wired to the configured word list and state store
    """
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    catalog = WordCatalog.from_json(config_class.WORD_FILE)
    store = create_state_store(config_class)
    service = initialize_puzzle_service(catalog, store)

    game_logger.logger.info(f"Urdle puzzle service ready ({len(catalog)} words)")
    return service
