#!/usr/bin/env python3
"""
Export both Latin renderings of every headword in a dataset.

Default paths (relative to repo root):
  - dataset: ./data/dictionary.json
  - output : ./data/dictionary_romanized.tsv

Usage:
  python tools/export_romanized.py
  python tools/export_romanized.py --data ./data/dictionary.json --out ./romanized.json --format json
"""

from __future__ import annotations
import argparse, json, os, sys, time
from typing import Dict, List

from tqdm import tqdm

# Allow running from a checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hudam.dictionary import DatasetError, DictionaryEntry, load_dataset
from hudam.transliterator import transliterate_pair

COLUMNS = ("cyrillic", "traditional", "latin", "latin_strict")


def _repo_root() -> str:
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

def _default_data() -> str:
    return os.path.join(_repo_root(), "data", "dictionary.json")

def _default_out() -> str:
    return os.path.join(_repo_root(), "data", "dictionary_romanized.tsv")


def romanize_entries(entries: List[DictionaryEntry], progress: bool = True) -> List[Dict[str, str]]:
    """One row per entry: both headwords plus normalized and strict Latin."""
    rows = []
    for entry in tqdm(entries, desc="Romanizing", disable=not progress):
        latin, strict = transliterate_pair(entry.headword_traditional)
        rows.append({
            "cyrillic": entry.headword_cyrillic,
            "traditional": entry.headword_traditional,
            "latin": latin or "",
            "latin_strict": strict or "",
        })
    return rows

def write_rows(rows: List[Dict[str, str]], out_path: str, fmt: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(out_path)), exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        if fmt == "json":
            json.dump(rows, f, ensure_ascii=False, indent=2)
            f.write("\n")
        else:
            f.write("\t".join(COLUMNS) + "\n")
            for row in rows:
                # Tabs/newlines inside a field would break the TSV layout
                f.write("\t".join(" ".join(row[c].split()) for c in COLUMNS) + "\n")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Export normalized and strict romanizations of a dataset.")
    ap.add_argument("--data", help="Path to dataset JSON", default=_default_data())
    ap.add_argument("--out", help="Path to output file", default=_default_out())
    ap.add_argument("--format", choices=("tsv", "json"), default="tsv")
    ap.add_argument("--quiet", action="store_true", help="No progress bar")
    args = ap.parse_args(argv)

    t0 = time.time()
    try:
        entries = load_dataset(args.data)
    except (DatasetError, FileNotFoundError) as e:
        print(f"[export_romanized] {e}", file=sys.stderr)
        return 1

    rows = romanize_entries(list(entries), progress=not args.quiet)
    write_rows(rows, args.out, args.format)

    dt = time.time() - t0
    print(f"[export_romanized] Wrote {len(rows)} rows to {args.out} in {dt:.1f}s.")
    return 0

if __name__ == "__main__":
    sys.exit(main())
