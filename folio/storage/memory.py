"""
In-process storage with the same semantics as `PostgresStorage`.

Used for tests and for running the site without a database
(`FOLIO_STORAGE=memory`). Data is lost when the process exits.
"""

from __future__ import annotations

import itertools
from typing import Any

from .base import (
    NEWS_FIELDS,
    PROFILE_FIELDS,
    PROFILE_ID,
    PROJECT_FIELDS,
    PUBLICATION_FIELDS,
    Row,
    Storage,
    pick,
)


class _Table:
    def __init__(self, fields: tuple[str, ...], defaults: dict[str, Any] | None = None) -> None:
        self.fields = fields
        self.defaults = defaults or {}
        self._rows: dict[int, Row] = {}
        self._ids = itertools.count(1)

    def rows(self) -> list[Row]:
        # Insertion order == id order.
        return [dict(row) for row in self._rows.values()]

    def insert(self, data: dict[str, Any]) -> Row:
        row: Row = {"id": next(self._ids)}
        for name in self.fields:
            value = data.get(name)
            row[name] = self.defaults.get(name) if value is None else value
        self._rows[row["id"]] = row
        return dict(row)

    def update(self, row_id: int, data: dict[str, Any]) -> Row | None:
        row = self._rows.get(row_id)
        if row is None:
            return None
        row.update(pick(data, self.fields))
        return dict(row)

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(row_id, None) is not None


class MemoryStorage(Storage):
    def __init__(self) -> None:
        self._profile: Row | None = None
        self._publications = _Table(PUBLICATION_FIELDS, defaults={"is_selected": False})
        self._projects = _Table(PROJECT_FIELDS)
        self._news = _Table(NEWS_FIELDS)

    # Profile

    async def get_profile(self) -> Row | None:
        return dict(self._profile) if self._profile is not None else None

    async def update_profile(self, data: dict[str, Any]) -> Row:
        self._profile = {"id": PROFILE_ID, **{name: data.get(name) for name in PROFILE_FIELDS}}
        return dict(self._profile)

    # Publications

    async def list_publications(self) -> list[Row]:
        return sorted(self._publications.rows(), key=lambda row: row["year"], reverse=True)

    async def create_publication(self, data: dict[str, Any]) -> Row:
        return self._publications.insert(data)

    async def update_publication(self, publication_id: int, data: dict[str, Any]) -> Row | None:
        return self._publications.update(publication_id, data)

    async def delete_publication(self, publication_id: int) -> bool:
        return self._publications.delete(publication_id)

    # Projects

    async def list_projects(self) -> list[Row]:
        return self._projects.rows()

    async def create_project(self, data: dict[str, Any]) -> Row:
        return self._projects.insert(data)

    async def update_project(self, project_id: int, data: dict[str, Any]) -> Row | None:
        return self._projects.update(project_id, data)

    async def delete_project(self, project_id: int) -> bool:
        return self._projects.delete(project_id)

    # News

    async def list_news(self) -> list[Row]:
        return sorted(self._news.rows(), key=lambda row: row["date"], reverse=True)

    async def create_news(self, data: dict[str, Any]) -> Row:
        return self._news.insert(data)

    async def delete_news(self, news_id: int) -> bool:
        return self._news.delete(news_id)
