"""
Process settings, read from environment variables once at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_APOD_API_URL = "https://api.nasa.gov/planetary/apod"
DEFAULT_APOD_API_KEY = "DEMO_KEY"


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


@dataclass(frozen=True)
class Settings:
    database_url: str
    apod_api_url: str = DEFAULT_APOD_API_URL
    # Never hard-code a real key here; set APOD_API_KEY in the environment.
    apod_api_key: str = DEFAULT_APOD_API_KEY
    apod_timeout_s: float = 30.0
    ingest_on_startup: bool = True
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    host: str = "0.0.0.0"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            database_url=database_url(),
            apod_api_url=_env_str("APOD_API_URL", DEFAULT_APOD_API_URL),
            apod_api_key=_env_str("APOD_API_KEY", DEFAULT_APOD_API_KEY),
            apod_timeout_s=_env_float("APOD_TIMEOUT_SECONDS", 30.0),
            ingest_on_startup=_env_bool("APOD_INGEST_ON_STARTUP", True),
            db_pool_min_size=max(1, _env_int("DB_POOL_MIN_SIZE", 1)),
            db_pool_max_size=max(1, _env_int("DB_POOL_MAX_SIZE", 5)),
            host=_env_str("HOST", "0.0.0.0"),
            port=_env_int("PORT", 8000),
        )
