"""
Query normalization and script detection.

Queries arrive from a text box and may be typed in Cyrillic or in the Latin
romanization produced by ``hudam.transliterator``. The script decides which
headword field a query is compared against, so it is classified once per query.

Functions:
    normalize_query(text) -> str: Lower-case a query, mapping None to ""
    is_latin_query(text) -> bool: True for queries in the romanization alphabet
    comparison_text(entry, latin, normalize) -> str: Headword text a query is
        compared against
"""

from typing import Optional

from .transliterator import to_latin


# Romanization alphabet accepted as a Latin query (compared lower-cased)
LATIN_QUERY_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzöüčšž")


def normalize_query(text: Optional[str]) -> str:
    """
    Normalize a query for matching.

    Examples:
        >>> normalize_query("Тамир")
        'тамир'

        >>> normalize_query(None)
        ''
    """
    if not text:
        return ""
    return text.lower()


def is_latin_query(text: Optional[str]) -> bool:
    """
    Check whether a query is written in the Latin romanization.

    A query is Latin-like when it is non-empty and every character is a Latin
    letter a-z, one of ö ü č š ž, or whitespace (case-insensitive). Anything
    else, including the empty query, is searched as Cyrillic.

    Examples:
        >>> is_latin_query("Mongol")
        True

        >>> is_latin_query("čiqula ügei")
        True

        >>> is_latin_query("монгол")
        False

        >>> is_latin_query("mongol1")
        False
    """
    if not text:
        return False
    return all(char.isspace() or char.lower() in LATIN_QUERY_LETTERS for char in text)


def comparison_text(entry, latin: bool, normalize: bool = True) -> str:
    """
    Return the lower-cased headword text a query is compared against.

    Args:
        entry: DictionaryEntry
        latin: Compare against the romanized traditional headword instead of
            the Cyrillic one
        normalize: Transliteration mode for the Latin path

    Returns:
        Lower-cased comparison text ("" when the field is empty)
    """
    if latin:
        return (to_latin(entry.headword_traditional, normalize) or "").lower()
    return (entry.headword_cyrillic or "").lower()
