"""
Query cache keyed by contract path.
"""

from __future__ import annotations

from typing import Any


class QueryCache:
    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any:
        return self._entries[key]

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, *keys: str) -> None:
        for key in keys:
            self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)
