"""
Hudam Search Package

Cyrillic / Latin lookup over a traditional Mongolian script glossary.

Main Components:
    - transliterator: Traditional script → normalized or strict Latin
    - edit_distance: Levenshtein distance over code points
    - matcher: Per-entry fuzzy match across scripts
    - ranker: Relevance ordering of matched entries
    - search: Filter, rank and truncate in one call
    - debounce: Latest-request-wins scheduling for interactive drivers

Quick Start:
    from hudam import load_dataset, search, to_latin

    entries = load_dataset("data/dictionary.json")
    for entry in search(entries, "тамир"):
        print(entry.headword_cyrillic, to_latin(entry.headword_traditional))
"""

__version__ = "0.1.0"

from .transliterator import to_latin, transliterate_pair
from .edit_distance import distance
from .normalizer import is_latin_query
from .dictionary import DictionaryEntry, DatasetError, load_dataset, entries_from_records
from .matcher import EntryMatcher, build_matcher
from .ranker import Ranker, build_ranker, compare
from .search import DictionarySearch, SearchResult, search
from .debounce import Debouncer

__all__ = [
    "to_latin",
    "transliterate_pair",
    "distance",
    "is_latin_query",
    "DictionaryEntry",
    "DatasetError",
    "load_dataset",
    "entries_from_records",
    "EntryMatcher",
    "build_matcher",
    "Ranker",
    "build_ranker",
    "compare",
    "DictionarySearch",
    "SearchResult",
    "search",
    "Debouncer",
]
