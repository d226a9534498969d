"""
Relevance ranking for matched headwords.

Entries that passed the matcher are ordered by a cascade of rules; the first
rule that tells two entries apart decides their order:

    1. Exact match with the query
    2. Comparison text starts with the query
    3. Comparison text contains the query
    4. Both contain it: the earlier occurrence wins
    5. First letter equals the query's first letter
    6. Smaller edit distance to the query
    7. Mongolian alphabetical order of the Cyrillic headwords

The comparison text is chosen the same way the matcher chooses it: the Cyrillic
headword for Cyrillic queries, the normalized romanization of the traditional
headword for Latin queries.

Usage:
    ranker = build_ranker("тамир")
    ordered = ranker.sort(hits)
"""

from functools import cmp_to_key
from typing import Dict, Iterable, List

from .collation import compare_headwords
from .edit_distance import distance
from .normalizer import comparison_text, is_latin_query, normalize_query


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _prefer(a_flag: bool, b_flag: bool) -> int:
    """-1 if only ``a`` has the property, 1 if only ``b`` has it, else 0."""
    if a_flag and not b_flag:
        return -1
    if b_flag and not a_flag:
        return 1
    return 0


class Ranker:
    """Comparator over DictionaryEntry objects bound to one query."""

    def __init__(self, query: str, normalize: bool = True):
        """
        Initialize ranker.

        Args:
            query: User query in Cyrillic or Latin romanization
            normalize: Transliteration mode for Latin queries
        """
        self.latin = is_latin_query(query)
        self.query = normalize_query(query)
        self.normalize = normalize

        # Per-query caches keyed by entry; a ranker never outlives its query
        self._texts: Dict[object, str] = {}
        self._distances: Dict[object, int] = {}

    def text_for(self, entry) -> str:
        """Lower-cased text of ``entry`` compared with the query."""
        text = self._texts.get(entry)
        if text is None:
            text = comparison_text(entry, self.latin, self.normalize)
            self._texts[entry] = text
        return text

    def distance_for(self, entry) -> int:
        """Edit distance between the query and the entry's comparison text."""
        dist = self._distances.get(entry)
        if dist is None:
            dist = distance(self.query, self.text_for(entry))
            self._distances[entry] = dist
        return dist

    def compare(self, a, b) -> int:
        """
        Compare two entries for sorting.

        Returns:
            -1 if ``a`` ranks first, 1 if ``b`` ranks first, 0 if they tie
        """
        query = self.query
        a_text = self.text_for(a)
        b_text = self.text_for(b)

        # 1. Exact match
        result = _prefer(a_text == query, b_text == query)
        if result:
            return result

        # 2. Prefix
        result = _prefer(a_text.startswith(query), b_text.startswith(query))
        if result:
            return result

        # 3. Containment
        a_contains = query in a_text
        b_contains = query in b_text
        result = _prefer(a_contains, b_contains)
        if result:
            return result

        # 4. Position of the match, only when both contain the query
        if a_contains and b_contains:
            result = _sign(a_text.find(query) - b_text.find(query))
            if result:
                return result

        # 5. Same first character
        first = query[:1]
        result = _prefer(a_text[:1] == first, b_text[:1] == first)
        if result:
            return result

        # 6. Edit distance
        result = _sign(self.distance_for(a) - self.distance_for(b))
        if result:
            return result

        # 7. Alphabetical
        return compare_headwords(a.headword_cyrillic, b.headword_cyrillic)

    @property
    def key(self):
        """Sort key adapter for ``sorted(..., key=ranker.key)``."""
        return cmp_to_key(self.compare)

    def sort(self, entries: Iterable) -> List:
        """Return ``entries`` ordered best match first."""
        return sorted(entries, key=self.key)


def build_ranker(query: str, normalize: bool = True) -> Ranker:
    """Bind a Ranker to ``query`` for repeated comparisons."""
    return Ranker(query or "", normalize=normalize)


def compare(query: str, a, b, normalize: bool = True) -> int:
    """
    Compare two entries for relevance to ``query``.

    Examples:
        >>> from hudam.dictionary import DictionaryEntry
        >>> exact = DictionaryEntry("тамир", "ᠲᠠᠮᠢᠷ")
        >>> longer = DictionaryEntry("тамирчин", "ᠲᠠᠮᠢᠷᠴᠢᠨ")
        >>> compare("тамир", exact, longer)
        -1
    """
    return build_ranker(query, normalize=normalize).compare(a, b)
