"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from folio.storage import Storage


def get_storage(request: Request) -> Storage:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise RuntimeError("Storage is not initialized. Construct it in the app lifespan.")
    return storage
