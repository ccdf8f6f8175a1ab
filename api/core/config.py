"""
Environment-driven settings.

Everything is read lazily so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def pool_min_size() -> int:
    return max(_env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(_env_int("DB_POOL_MAX_SIZE", 5), 1)


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def cors_allow_origins() -> list[str]:
    return _env_list("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def log_format() -> str:
    return os.environ.get("LOG_FORMAT", "detailed").strip().lower() or "detailed"
