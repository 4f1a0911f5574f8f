"""
Letter Splitting

Urdu letters may carry diacritics (zer, zabar, pesh, ...) which Unicode
encodes as separate combining code points. Words are therefore compared
letter by letter, where a letter is one extended grapheme cluster
(a base character plus the marks and joiners attached to it).
"""

from typing import Tuple

import regex

_GRAPHEME = regex.compile(r"\X")


def split_letters(word: str) -> Tuple[str, ...]:
    """
    Split a word into user-perceived letters.

    Args:
        word: Word to split

    Returns:
        Tuple of letters, one extended grapheme cluster each
    """
    return tuple(_GRAPHEME.findall(word))


def letter_count(word: str) -> int:
    return len(split_letters(word))
