"""
Environment-backed settings.

Every value is read on call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

STORAGE_BACKENDS = ("postgres", "memory")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
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


def storage_backend() -> str:
    backend = _env_str("FOLIO_STORAGE", "postgres").lower()
    if backend not in STORAGE_BACKENDS:
        raise RuntimeError(f"Unknown FOLIO_STORAGE '{backend}'. Allowed: {list(STORAGE_BACKENDS)}")
    return backend


def seed_on_startup() -> bool:
    return _env_bool("FOLIO_SEED", True)


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX", 5))


def db_command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", 5000)
