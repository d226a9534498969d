"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def _repo_root() -> Path:
    # this file is in hudam/, repo root is its parent
    return Path(__file__).resolve().parent.parent


DEFAULT_DATA_PATH = _repo_root() / "data" / "dictionary.json"


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    max_distance: int = 3
    result_limit: int = 20
    debounce_ms: int = 500
    log_level: str = "WARNING"

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must be >= 0, using %d", name, raw, default)
        return default
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from HUDAM_* environment variables.

    Variables: HUDAM_DATA_PATH, HUDAM_MAX_DISTANCE, HUDAM_RESULT_LIMIT,
    HUDAM_DEBOUNCE_MS, HUDAM_LOG_LEVEL. When ``dotenv`` is true the nearest .env
    file is loaded first (existing variables win).
    """
    if dotenv:
        load_dotenv()

    data_path = os.getenv("HUDAM_DATA_PATH")
    return Settings(
        data_path=Path(data_path) if data_path else DEFAULT_DATA_PATH,
        max_distance=_int_env("HUDAM_MAX_DISTANCE", 3),
        result_limit=_int_env("HUDAM_RESULT_LIMIT", 20),
        debounce_ms=_int_env("HUDAM_DEBOUNCE_MS", 500),
        log_level=(os.getenv("HUDAM_LOG_LEVEL") or "WARNING").upper(),
    )
