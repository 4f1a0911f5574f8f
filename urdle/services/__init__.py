"""
Services Package

Contains all business logic: the word catalog, daily word selection,
game rules and state storage.
"""

from .catalog import WordCatalog
from .daily_service import today, epoch_day, secret_word, time_until_next_puzzle
from .storage_service import (
    StateStore, MemoryStateStore, JsonFileStateStore, MongoStateStore, create_state_store
)
from .game_service import (
    DailyPuzzleService, StalePuzzleError, evaluate, new_game, apply_guess, replay,
    keyboard_hint_states, share_text, get_puzzle_service, initialize_puzzle_service
)

__all__ = [
    'WordCatalog',
    'today', 'epoch_day', 'secret_word', 'time_until_next_puzzle',
    'StateStore', 'MemoryStateStore', 'JsonFileStateStore', 'MongoStateStore', 'create_state_store',
    'DailyPuzzleService', 'StalePuzzleError', 'evaluate', 'new_game', 'apply_guess', 'replay',
    'keyboard_hint_states', 'share_text', 'get_puzzle_service', 'initialize_puzzle_service'
]
