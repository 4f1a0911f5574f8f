"""
Game Configuration Constants Module

This module defines all game rule constants for the daily puzzle.
All game parameters are centralized here to enable easy modification.

Note on the word file: the daily word is chosen by position, so entries in
words.json may only ever be appended. Inserting, removing or reordering
earlier entries changes the word of every future day.
"""

import os
from typing import Dict, Final, List

from ..models.errors import ConfigurationError
from ..utils.letters import split_letters

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 4
"""
Number of letters (grapheme units) in every word.
"""

MAX_ATTEMPTS: Final[int] = 5
"""
Maximum number of guess attempts allowed per daily puzzle.
Type: Final[int] - Immutable to prevent accidental modification
"""

REFERENCE_TIMEZONE: Final[str] = "America/New_York"
"""
Timezone in which the calendar day (and so the daily word) is decided.
"""

# Persistence
STORAGE_KEY: Final[str] = "urdle_daily"
STATE_SCHEMA_VERSION: Final[int] = 1

# Share text
GAME_TITLE: Final[str] = "اُردل"
SHARE_GLYPHS: Final[Dict[str, str]] = {
    "correct": "🟩",
    "present": "🟨",
    "absent": "⬜",
}

WORD_FILE: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), "words.json")


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. The list is not empty
    2. Length validation: every word has exactly word_length letters
    3. Uniqueness validation: no duplicate entries

    Duplicates are reported rather than dropped, since removing an entry
    would shift the daily word of every later day.

    Args:
        words: Ordered word list
        word_length: Required number of letters per word

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ConfigurationError: If any validation check fails
    """
    if not words:
        raise ConfigurationError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not isinstance(word, str) or not word.strip():
            raise ConfigurationError(f"Word at index {index} is not a non-empty string: {word!r}")

        letter_count = len(split_letters(word))
        if letter_count != word_length:
            raise ConfigurationError(
                f"Word at index {index} '{word}' has {letter_count} letters, expected {word_length}"
            )

    if len(words) != len(set(words)):
        seen = set()
        duplicates = []
        for word in words:
            if word in seen and word not in duplicates:
                duplicates.append(word)
            seen.add(word)
        raise ConfigurationError(f"Duplicate words found in word list: {duplicates}")

    return True
