"""
Word Catalog

The fixed, ordered list of words that may be guessed and that the daily
word is drawn from.
"""

import json
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..config.game_settings import WORD_FILE, WORD_LENGTH, validate_word_list_integrity
from ..models.errors import ConfigurationError
from ..utils.letters import split_letters


class WordCatalog:
    """
    Read-only word list.

    Order matters: the daily word is picked by index, so the catalog keeps
    its words exactly as given and refuses duplicates instead of dropping them.
    """

    def __init__(self, words: Sequence[str], word_length: int = WORD_LENGTH):
        words = list(words)
        validate_word_list_integrity(words, word_length)
        self._words: Tuple[str, ...] = tuple(words)
        self._members = frozenset(self._words)
        self.word_length = word_length

    @classmethod
    def from_json(cls, path: Optional[str] = None, word_length: int = WORD_LENGTH) -> "WordCatalog":
        """
        Load a catalog from a JSON file containing an array of words.

        Args:
            path: JSON file path, defaults to the bundled words.json
            word_length: Required number of letters per word

        Returns:
            WordCatalog: The loaded catalog

        Raises:
            ConfigurationError: If the file is missing, malformed or fails validation
        """
        json_file_path = path or WORD_FILE
        try:
            with open(json_file_path, 'r', encoding='utf-8') as f:
                word_list = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Word list file not found: {json_file_path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {json_file_path}: {e}")

        if not isinstance(word_list, list):
            raise ConfigurationError("JSON file must contain an array of words")

        return cls(word_list, word_length)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._members

    def contains(self, word: str) -> bool:
        """Guess legality check: exact membership, no normalization."""
        return word in self

    def get(self, index: int) -> str:
        """Return the word at index; IndexError outside [0, len)."""
        if not 0 <= index < len(self._words):
            raise IndexError(f"Catalog index {index} out of range [0, {len(self._words)})")
        return self._words[index]

    def letters(self, word: str) -> Tuple[str, ...]:
        return split_letters(word)

    def get_word_statistics(self) -> Dict:
        """
        Analyzes the word list and returns statistical information.

        Returns:
            dict: Statistical analysis including:
                - total_words: Number of words in the catalog
                - letter_frequency: Distribution of letters across all words
                - most_common_letters: Five most frequent letters with counts
        """
        letter_frequency: Dict[str, int] = {}
        for word in self._words:
            for letter in split_letters(word):
                letter_frequency[letter] = letter_frequency.get(letter, 0) + 1

        most_common: List[Tuple[str, int]] = sorted(
            letter_frequency.items(), key=lambda x: x[1], reverse=True
        )[:5]

        return {
            "total_words": len(self._words),
            "letter_frequency": letter_frequency,
            "most_common_letters": most_common
        }
