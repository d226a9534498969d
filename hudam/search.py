"""
Headword search: filter, rank, truncate.

This is the entry point used by drivers (the console front end, or any UI):

    1. Build a matcher for the query and keep the entries it accepts
    2. Sort the hits with a ranker bound to the same query
    3. Keep the first ``limit`` entries

The dataset is scanned in full for every query; nothing is indexed or cached
between queries.

Usage:
    entries = load_dataset("data/dictionary.json")
    top = search(entries, "тамир")

    searcher = DictionarySearch(entries)
    result = searcher.lookup("mongol")
    for entry in result.entries:
        print(searcher.render(entry))
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .dictionary import DictionaryEntry
from .matcher import DEFAULT_MAX_DISTANCE, build_matcher
from .ranker import build_ranker
from .transliterator import to_latin

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20

# Queries slower than this are logged with their timing breakdown
SLOW_QUERY_SECONDS = 1.0


def _check_bounds(max_distance: int, limit: int) -> None:
    if max_distance < 0:
        raise ValueError(f"max_distance must be >= 0, got {max_distance}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")


def search(
    dataset: Sequence[DictionaryEntry],
    query: str,
    normalize: bool = True,
    max_distance: int = DEFAULT_MAX_DISTANCE,
    limit: int = DEFAULT_LIMIT,
) -> List[DictionaryEntry]:
    """
    Find the best-matching headwords for a query.

    Args:
        dataset: Ordered sequence of DictionaryEntry
        query: User query in Cyrillic or Latin romanization
        normalize: Transliteration mode for Latin queries
        max_distance: Largest edit distance still counted as a hit
        limit: Maximum number of entries returned

    Returns:
        Up to ``limit`` entries, best match first

    Raises:
        ValueError: If ``max_distance`` or ``limit`` is negative
    """
    _check_bounds(max_distance, limit)
    matcher = build_matcher(query, max_distance=max_distance, normalize=normalize)
    ranker = build_ranker(query, normalize=normalize)
    hits = [entry for entry in dataset if matcher(entry)]
    return ranker.sort(hits)[:limit]


@dataclass
class SearchResult:
    """Result of one lookup."""
    query: str
    entries: List[DictionaryEntry]
    matches_found: int = 0  # Hits before truncation
    latency_ms: float = 0.0
    timings: Dict[str, float] = field(default_factory=dict)


class DictionarySearch:
    """Search front end holding a dataset and its default settings."""

    def __init__(
        self,
        dataset: Sequence[DictionaryEntry],
        max_distance: int = DEFAULT_MAX_DISTANCE,
        limit: int = DEFAULT_LIMIT,
        normalize: bool = True,
    ):
        _check_bounds(max_distance, limit)
        self.dataset = tuple(dataset)
        self.max_distance = max_distance
        self.limit = limit
        self.normalize = normalize
        self._last_timings: Dict[str, float] = {}

    def lookup(self, query: str, limit: Optional[int] = None) -> SearchResult:
        """
        Search the dataset and report timings.

        Steps mirror ``search()``; each one is timed separately.

        Args:
            query: User query
            limit: Override for the default result count

        Returns:
            SearchResult with the ranked entries
        """
        limit = self.limit if limit is None else limit
        _check_bounds(self.max_distance, limit)

        timings = {}
        start = time.time()

        t0 = time.time()
        matcher = build_matcher(query, max_distance=self.max_distance, normalize=self.normalize)
        hits = [entry for entry in self.dataset if matcher(entry)]
        timings['filter'] = time.time() - t0

        t0 = time.time()
        ranked = build_ranker(query, normalize=self.normalize).sort(hits)
        timings['sort'] = time.time() - t0

        entries = ranked[:limit]
        elapsed = time.time() - start
        timings['total'] = elapsed
        self._last_timings = timings

        if elapsed > SLOW_QUERY_SECONDS:
            logger.warning(
                "Search took %.2fs for %r (%d entries scanned, %d hits); timings: %s",
                elapsed, query, len(self.dataset), len(hits), timings,
            )

        return SearchResult(
            query=query,
            entries=entries,
            matches_found=len(hits),
            latency_ms=elapsed * 1000,
            timings=timings,
        )

    def get_last_timings(self) -> Dict[str, float]:
        """
        Get timing breakdown (seconds) from the last lookup call.

        Keys: filter, sort, total.
        """
        return dict(self._last_timings)

    @staticmethod
    def render(entry: DictionaryEntry) -> str:
        """
        Format an entry as a two-line result row.

        First line: Cyrillic and traditional headwords. Second line: the
        normalized romanization followed by the strict one in parentheses.
        """
        normalized = to_latin(entry.headword_traditional, True) or ""
        strict = to_latin(entry.headword_traditional, False) or ""
        return f"{entry.headword_cyrillic}  {entry.headword_traditional}\n    {normalized} ( {strict} )"
