"""Mongolian Cyrillic alphabetical order.

Used as the last tie-break when ranking headwords. Cyrillic letters follow
the Mongolian alphabet (ө after о, ү after у); case only matters when two
words are otherwise identical, lower case first.
"""

from typing import Tuple

MONGOLIAN_ALPHABET = "абвгдеёжзийклмноөпрстуүфхцчшщъыьэюя"

_LETTER_ORDER = {letter: i for i, letter in enumerate(MONGOLIAN_ALPHABET)}

# Character groups, in sort order
_SPACE_OR_PUNCT = 0
_DIGIT = 1
_LATIN = 2
_CYRILLIC = 3
_OTHER = 4


def _primary(char: str) -> Tuple[int, int]:
    lower = char.lower()
    if lower in _LETTER_ORDER:
        return _CYRILLIC, _LETTER_ORDER[lower]
    if char.isdigit():
        return _DIGIT, ord(char)
    if "a" <= lower <= "z":
        return _LATIN, ord(lower)
    if char.isspace() or not char.isalnum():
        return _SPACE_OR_PUNCT, ord(char)
    return _OTHER, ord(lower)


def collation_key(text: str) -> tuple:
    """
    Sort key ordering words as a Mongolian dictionary does.

    Examples:
        >>> sorted(["үнэн", "ус", "өдөр", "орос"], key=collation_key)
        ['орос', 'өдөр', 'ус', 'үнэн']
    """
    text = text or ""
    primary = tuple(_primary(char) for char in text)
    # Lower case sorts before upper case
    tertiary = tuple(0 if not char.isupper() else 1 for char in text)
    return primary, tertiary, text


def compare_headwords(a: str, b: str) -> int:
    """Compare two Cyrillic headwords; returns -1, 0 or 1."""
    key_a, key_b = collation_key(a), collation_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0
