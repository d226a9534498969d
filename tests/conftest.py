"""
Pytest configuration and fixtures for hudam tests.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to Python path to allow importing hudam without installing
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from hudam.dictionary import DictionaryEntry, entries_from_records  # noqa: E402


SAMPLE_RECORDS = [
    {"tolgoi_ug": "тамир", "tolgoi_ug_hudam": "ᠲᠠᠮᠢᠷ"},
    {"tolgoi_ug": "тамирчин", "tolgoi_ug_hudam": "ᠲᠠᠮᠢᠷᠴᠢᠨ"},
    {"tolgoi_ug": "тамгалах", "tolgoi_ug_hudam": "ᠲᠠᠮᠠᠭᠠᠯᠠᠬᠤ"},
    {"tolgoi_ug": "цамхаг", "tolgoi_ug_hudam": "ᠴᠠᠮᠬᠠᠭ"},
    {"tolgoi_ug": "монгол", "tolgoi_ug_hudam": "ᠮᠣᠩᠭᠣᠯ"},
    {"tolgoi_ug": "гэр", "tolgoi_ug_hudam": "ᠭᠡᠷ"},
    {"tolgoi_ug": "ус", "tolgoi_ug_hudam": "ᠤᠰᠤ"},
]


@pytest.fixture
def entries():
    """Small glossary used across tests."""
    return entries_from_records(SAMPLE_RECORDS)


@pytest.fixture
def make_entry():
    """Factory for single entries."""
    def _make(cyrillic: str, traditional: str = "") -> DictionaryEntry:
        return DictionaryEntry(cyrillic, traditional)
    return _make
