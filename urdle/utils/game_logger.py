"""
Game Logger Module

This module provides structured logging for player actions, rejected
guesses and game events of the daily puzzle.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the daily puzzle.

    Features:
    - Player action tracking keyed by puzzle day
    - Game event logging (wins, losses, restored sessions)
    - JSON structured logs for easy parsing
    - Optional daily log file; console only shows warnings and errors
    """

    def __init__(self, log_dir: Optional[str] = None, level: str = 'INFO'):
        self.log_dir: Optional[Path] = None
        self.logger = logging.getLogger('urdle_game')
        self.configure(log_dir, level)

    def configure(self, log_dir: Optional[str] = None, level: str = 'INFO') -> None:
        """
        (Re)build the handlers of the game logger.

        Args:
            log_dir: Directory for the daily log file; None disables file logging
            level: Minimum level written to the log file
        """
        logger = self.logger
        logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False)

    def log_user_action(self, action: str, day_key: Optional[str] = None, **kwargs):
        """
        Log player actions.

        Args:
            action: Type of action (e.g., 'initialize', 'submit_guess', 'share')
            day_key: Puzzle day if applicable
            **kwargs: Additional details to log
        """
        details = {'day_key': day_key, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_rejection(self, day_key: str, reason: str, **kwargs):
        """Log a guess that was refused without changing the game."""
        details = {'day_key': day_key, 'reason': reason, **kwargs}
        self.logger.info(self._create_log_entry('GUESS_REJECTED', 'submit_guess', details))

    def log_game_event(self, day_key: str, event: str, **kwargs):
        """
        Log game-specific events (wins, losses, etc.).

        Args:
            day_key: Puzzle day
            event: Type of game event (e.g., 'game_won', 'game_lost', 'state_restored')
            **kwargs: Additional game details
        """
        details = {'day_key': day_key, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_warning(self, action: str, message: str, **kwargs):
        details = {'message': message, **kwargs}
        self.logger.warning(self._create_log_entry('WARNING', action, details))

    def log_error(self, error: Exception, action: str, day_key: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            day_key: Puzzle day if applicable
        """
        details = {
            'day_key': day_key,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))


# Global logger instance; file logging is switched on by create_puzzle_service
game_logger = GameLogger()
