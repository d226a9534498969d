"""Dictionary entries and dataset loading.

The dataset is a JSON array exported from the glossary, one object per
headword:

    [
        {"tolgoi_ug": "тамир", "tolgoi_ug_hudam": "ᠲᠠᠮᠢᠷ", ...},
        ...
    ]

It is loaded once at startup and shared read-only by every query.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple, Union

logger = logging.getLogger(__name__)

# Accepted keys for each headword field, source export keys first
CYRILLIC_KEYS = ("tolgoi_ug", "headword_cyrillic")
TRADITIONAL_KEYS = ("tolgoi_ug_hudam", "headword_traditional")


class DatasetError(ValueError):
    """Raised when a dataset file or record is malformed."""


@dataclass(frozen=True)
class DictionaryEntry:
    """A glossary headword in Cyrillic and traditional script."""
    headword_cyrillic: str
    headword_traditional: str
    # Remaining fields of the source record (definitions etc.)
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))


def _first_present(record: Mapping[str, Any], keys: Tuple[str, ...]):
    for key in keys:
        if key in record:
            return key, record[key]
    return None, None


def entry_from_record(record: Mapping[str, Any], index: int = 0) -> DictionaryEntry:
    """
    Build a DictionaryEntry from one dataset record.

    Args:
        record: Mapping with a Cyrillic and a traditional headword
        index: Position of the record, used in error messages

    Raises:
        DatasetError: If the record is not an object or a headword is missing
    """
    if not isinstance(record, Mapping):
        raise DatasetError(f"record {index}: expected an object, got {type(record).__name__}")

    cyr_key, cyrillic = _first_present(record, CYRILLIC_KEYS)
    trad_key, traditional = _first_present(record, TRADITIONAL_KEYS)

    if cyr_key is None:
        raise DatasetError(f"record {index}: missing Cyrillic headword ({' or '.join(CYRILLIC_KEYS)})")
    if trad_key is None:
        raise DatasetError(f"record {index}: missing traditional headword ({' or '.join(TRADITIONAL_KEYS)})")

    extra = {k: v for k, v in record.items() if k not in (cyr_key, trad_key)}
    return DictionaryEntry(
        headword_cyrillic=str(cyrillic) if cyrillic is not None else "",
        headword_traditional=str(traditional) if traditional is not None else "",
        extra=extra,
    )


def entries_from_records(records: Iterable[Mapping[str, Any]]) -> Tuple[DictionaryEntry, ...]:
    """Convert in-memory records to an immutable, ordered dataset."""
    return tuple(entry_from_record(record, i) for i, record in enumerate(records))


def load_dataset(path: Union[str, Path]) -> Tuple[DictionaryEntry, ...]:
    """
    Load the glossary from a JSON file.

    Args:
        path: Path to the dataset JSON (an array of records)

    Returns:
        Tuple of DictionaryEntry in file order

    Raises:
        FileNotFoundError: If the file does not exist
        DatasetError: If the JSON is malformed or not an array of records
    """
    path = Path(path)
    start = time.time()

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise DatasetError(f"{path}: expected a JSON array of records")

    entries = entries_from_records(data)

    elapsed = time.time() - start
    logger.info("Loaded %d entries from %s in %.2fs", len(entries), path, elapsed)
    return entries
