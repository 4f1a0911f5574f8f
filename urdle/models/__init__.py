"""
Data Models Package

Contains all data models and error types used throughout the package.
"""

from .errors import UrdleError, ConfigurationError, InvalidArgument
from .game import (
    LetterStatus, GameStatus, RejectionReason, Attempt, GameState, SubmitResult, PuzzleSession
)

__all__ = [
    'UrdleError', 'ConfigurationError', 'InvalidArgument',
    'LetterStatus', 'GameStatus', 'RejectionReason', 'Attempt', 'GameState', 'SubmitResult',
    'PuzzleSession'
]
