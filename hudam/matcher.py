"""
Fuzzy headword matching across scripts.

A query is first classified by script (see ``hudam.normalizer``):

    Cyrillic query: "тамир"
        compared with entry.headword_cyrillic, lower-cased

    Latin query: "damir"
        compared with to_latin(entry.headword_traditional), lower-cased

An entry is a hit when its comparison text contains the query, or when the
edit distance between the two is at most ``max_distance``.

Usage:
    matcher = build_matcher("тамир")
    hits = [entry for entry in dataset if matcher(entry)]
"""

from dataclasses import dataclass, field

from .edit_distance import distance
from .normalizer import comparison_text, is_latin_query, normalize_query

DEFAULT_MAX_DISTANCE = 3


@dataclass(frozen=True)
class EntryMatcher:
    """Predicate deciding whether a DictionaryEntry matches one query."""
    query: str
    max_distance: int = DEFAULT_MAX_DISTANCE
    normalize: bool = True
    latin: bool = field(init=False, default=False)

    def __post_init__(self):
        # Classify the raw query before lower-casing it
        object.__setattr__(self, "latin", is_latin_query(self.query))
        object.__setattr__(self, "query", normalize_query(self.query))

    def text_for(self, entry) -> str:
        """Text of ``entry`` this matcher compares against."""
        return comparison_text(entry, self.latin, self.normalize)

    def __call__(self, entry) -> bool:
        text = self.text_for(entry)
        # The empty query is contained in every text, so it matches everything
        if self.query in text:
            return True
        return distance(self.query, text) <= self.max_distance


def build_matcher(query: str, max_distance: int = DEFAULT_MAX_DISTANCE, normalize: bool = True) -> EntryMatcher:
    """
    Build a match predicate for a query.

    Args:
        query: User query in Cyrillic or Latin romanization
        max_distance: Largest edit distance still counted as a hit
        normalize: Transliteration mode used for Latin queries

    Returns:
        EntryMatcher, callable on a DictionaryEntry

    Examples:
        >>> from hudam.dictionary import DictionaryEntry
        >>> entry = DictionaryEntry("тамир", "ᠲᠠᠮᠢᠷ")
        >>> build_matcher("тамр")(entry)
        True

        >>> build_matcher("damir")(entry)
        True
    """
    return EntryMatcher(query or "", max_distance=max_distance, normalize=normalize)
