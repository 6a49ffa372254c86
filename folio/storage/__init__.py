"""
Persistence for the portfolio records.
"""

from __future__ import annotations

from folio.core import settings
from folio.core.db import Database

from .base import Storage
from .memory import MemoryStorage
from .postgres import PostgresStorage

__all__ = ["MemoryStorage", "PostgresStorage", "Storage", "storage_from_env"]


def storage_from_env() -> Storage:
    """
    Build the storage backend selected by FOLIO_STORAGE.
    """
    if settings.storage_backend() == "memory":
        return MemoryStorage()

    db = Database(
        settings.database_url(),
        min_size=settings.db_pool_min_size(),
        max_size=settings.db_pool_max_size(),
        command_timeout=settings.db_command_timeout(),
    )
    return PostgresStorage(db)
