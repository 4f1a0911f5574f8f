"""
Error Types

Exceptions raised by the puzzle core. Rejected guesses are not errors;
see RejectionReason in game.py.
"""


class UrdleError(Exception):
    """Base class for all puzzle errors."""


class ConfigurationError(UrdleError):
    """The word catalog or settings cannot support a game (e.g. empty catalog)."""


class InvalidArgument(UrdleError, ValueError):
    """A caller passed arguments that violate an operation's preconditions."""
