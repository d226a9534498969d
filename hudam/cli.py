"""Console front end for the headword search.

Usage:
  hudam тамир
  hudam mongol --limit 5
  hudam --rules
  hudam                     # interactive: one query per line, empty line quits
  hudam --live < keys.txt   # each line is a keystroke update, debounced
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import load_settings
from .debounce import Debouncer
from .dictionary import DatasetError, load_dataset
from .search import DictionarySearch, SearchResult
from .transliterator import NORMALIZATION_RULES

logger = logging.getLogger(__name__)

INITIAL_QUERY = "тамир"


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    p = argparse.ArgumentParser(
        prog="hudam",
        description="Search a Mongolian glossary in Cyrillic or Latin transliteration.",
    )
    p.add_argument("query", nargs="?", help="query; omit for interactive mode")
    p.add_argument("--data", default=str(settings.data_path), help="dataset JSON (default: %(default)s)")
    p.add_argument("--limit", type=int, default=settings.result_limit, help="max results (default: %(default)s)")
    p.add_argument("--max-distance", type=int, default=settings.max_distance,
                   help="edit distance still counted as a match (default: %(default)s)")
    p.add_argument("--strict", action="store_true", help="match Latin queries against the strict romanization")
    p.add_argument("--live", action="store_true",
                   help="treat stdin lines as keystroke updates and search only the latest")
    p.add_argument("--debounce-ms", type=int, default=settings.debounce_ms,
                   help="debounce window for --live (default: %(default)s)")
    p.add_argument("--rules", action="store_true", help="print the normalization rules and exit")
    p.add_argument("-v", "--verbose", action="store_true", help="log timings")
    p.set_defaults(log_level=settings.log_level)
    return p


def print_rules(out: TextIO = sys.stdout) -> None:
    print("Normalization rules", file=out)
    for name, rule in NORMALIZATION_RULES:
        print(f"  {name}: {rule}", file=out)
    print("Latin queries are matched against the normalized romanization of the traditional script.", file=out)


def print_result(searcher: DictionarySearch, result: SearchResult, out: TextIO = sys.stdout) -> None:
    if not result.entries:
        print(f"No results for '{result.query}'.", file=out)
        return
    print(f"{len(result.entries)} of {result.matches_found} matches for '{result.query}' "
          f"({result.latency_ms:.0f}ms)", file=out)
    for i, entry in enumerate(result.entries, 1):
        print(f"{i:2d}. {searcher.render(entry)}", file=out)


def _interactive(searcher: DictionarySearch, stdin: TextIO, out: TextIO) -> None:
    print(f"Type a query (e.g. '{INITIAL_QUERY}'), empty line to quit.", file=out)
    for line in stdin:
        # The search box lower-cases input before searching
        query = line.rstrip("\n").lower()
        if not query.strip():
            break
        print_result(searcher, searcher.lookup(query), out)


def _live(searcher: DictionarySearch, stdin: TextIO, out: TextIO, delay: float) -> None:
    debouncer = Debouncer(lambda q: print_result(searcher, searcher.lookup(q), out), delay=delay)
    for line in stdin:
        debouncer.submit(line.rstrip("\n").lower())
    debouncer.flush()


def main(argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, out: TextIO = sys.stdout) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO if args.verbose else getattr(logging, args.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    if args.rules:
        print_rules(out)
        return 0

    try:
        entries = load_dataset(args.data)
    except (DatasetError, FileNotFoundError) as e:
        logger.error("Could not load dataset: %s", e)
        parser.exit(1)

    try:
        searcher = DictionarySearch(
            entries,
            max_distance=args.max_distance,
            limit=args.limit,
            normalize=not args.strict,
        )
    except ValueError as e:
        parser.error(str(e))

    if args.query is not None:
        print_result(searcher, searcher.lookup(args.query.lower()), out)
        logger.info("Timings: %s", searcher.get_last_timings())
    elif args.live:
        _live(searcher, stdin, out, args.debounce_ms / 1000.0)
    else:
        _interactive(searcher, stdin, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
