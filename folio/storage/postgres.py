"""
Portfolio persistence on Postgres (raw SQL through `core.db.Database`).
"""

from __future__ import annotations

import logging
from typing import Any

from folio.core.db import Database

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

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS profile (
    id INTEGER PRIMARY KEY DEFAULT 1 CHECK (id = 1),
    name TEXT NOT NULL,
    title TEXT NOT NULL,
    institution TEXT NOT NULL,
    bio TEXT NOT NULL,
    email TEXT NOT NULL,
    github_url TEXT,
    scholar_url TEXT,
    twitter_url TEXT,
    linkedin_url TEXT,
    cv_url TEXT,
    image_url TEXT
);

CREATE TABLE IF NOT EXISTS publications (
    id SERIAL PRIMARY KEY,
    title TEXT NOT NULL,
    authors TEXT NOT NULL,
    venue TEXT NOT NULL,
    year INTEGER NOT NULL,
    abstract TEXT,
    pdf_url TEXT,
    code_url TEXT,
    project_url TEXT,
    is_selected BOOLEAN NOT NULL DEFAULT false
);

CREATE TABLE IF NOT EXISTS projects (
    id SERIAL PRIMARY KEY,
    title TEXT NOT NULL,
    description TEXT NOT NULL,
    image_url TEXT,
    link TEXT,
    technologies TEXT
);

CREATE TABLE IF NOT EXISTS news (
    id SERIAL PRIMARY KEY,
    date TEXT NOT NULL,
    content TEXT NOT NULL,
    link TEXT
);
"""

PROFILE_COLUMNS = "id, " + ", ".join(PROFILE_FIELDS)
PUBLICATION_COLUMNS = "id, " + ", ".join(PUBLICATION_FIELDS)
PROJECT_COLUMNS = "id, " + ", ".join(PROJECT_FIELDS)
NEWS_COLUMNS = "id, " + ", ".join(NEWS_FIELDS)

# SERIAL columns are int4; larger ids cannot exist and would fail to encode.
SERIAL_MAX = 2**31 - 1

_PROFILE_UPSERT_SQL = (
    f"INSERT INTO profile (id, {', '.join(PROFILE_FIELDS)})\n"
    f"VALUES ({PROFILE_ID}, {', '.join(f'${i}' for i in range(1, len(PROFILE_FIELDS) + 1))})\n"
    "ON CONFLICT (id) DO UPDATE\n"
    f"SET {', '.join(f'{name} = EXCLUDED.{name}' for name in PROFILE_FIELDS)}\n"
    f"RETURNING {PROFILE_COLUMNS}"
)


def _is_serial_id(row_id: int) -> bool:
    return 1 <= row_id <= SERIAL_MAX


def _insert_sql(table: str, fields: tuple[str, ...], returning: str) -> str:
    placeholders = ", ".join(f"${i}" for i in range(1, len(fields) + 1))
    return (
        f"INSERT INTO {table} ({', '.join(fields)})\n"
        f"VALUES ({placeholders})\n"
        f"RETURNING {returning}"
    )


def _update_sql(table: str, fields: list[str], returning: str) -> str:
    # Column names come from the fixed *_FIELDS tuples, never from user input.
    assignments = ", ".join(f"{name} = ${i}" for i, name in enumerate(fields, start=1))
    return (
        f"UPDATE {table}\n"
        f"SET {assignments}\n"
        f"WHERE id = ${len(fields) + 1}\n"
        f"RETURNING {returning}"
    )


class PostgresStorage(Storage):
    def __init__(self, db: Database, *, ensure_schema: bool = True) -> None:
        self.db = db
        self._ensure_schema = ensure_schema

    async def open(self) -> None:
        await self.db.connect()
        if self._ensure_schema:
            await self.ensure_schema()

    async def close(self) -> None:
        await self.db.close()

    async def ensure_schema(self) -> None:
        await self.db.execute(SCHEMA_SQL)
        logger.info("schema_ready tables=profile,publications,projects,news")

    # Shared helpers

    async def _insert(self, table: str, fields: tuple[str, ...], returning: str, values: list[Any]) -> Row:
        row = await self.db.fetch_one(_insert_sql(table, fields, returning), *values)
        if row is None:
            raise RuntimeError(f"Failed to insert into {table}.")
        return row

    async def _update(
        self,
        table: str,
        fields: tuple[str, ...],
        returning: str,
        row_id: int,
        data: dict[str, Any],
    ) -> Row | None:
        if not _is_serial_id(row_id):
            return None
        changes = pick(data, fields)
        if not changes:
            return await self.db.fetch_one(
                f"SELECT {returning} FROM {table} WHERE id = $1",
                row_id,
            )
        return await self.db.fetch_one(
            _update_sql(table, list(changes), returning),
            *changes.values(),
            row_id,
        )

    async def _delete(self, table: str, row_id: int) -> bool:
        if not _is_serial_id(row_id):
            return False
        row = await self.db.fetch_one(
            f"DELETE FROM {table} WHERE id = $1 RETURNING id",
            row_id,
        )
        return row is not None

    # Profile

    async def get_profile(self) -> Row | None:
        return await self.db.fetch_one(
            f"""
            SELECT {PROFILE_COLUMNS}
            FROM profile
            WHERE id = {PROFILE_ID}
            """
        )

    async def update_profile(self, data: dict[str, Any]) -> Row:
        # Single statement; the CHECK (id = 1) key keeps concurrent first writes to one row.
        values = [data.get(name) for name in PROFILE_FIELDS]
        row = await self.db.fetch_one(_PROFILE_UPSERT_SQL, *values)
        if row is None:
            raise RuntimeError("Failed to upsert profile.")
        return row

    # Publications

    async def list_publications(self) -> list[Row]:
        return await self.db.fetch_all(
            f"""
            SELECT {PUBLICATION_COLUMNS}
            FROM publications
            ORDER BY year DESC, id ASC
            """
        )

    async def create_publication(self, data: dict[str, Any]) -> Row:
        values = [data.get(name) for name in PUBLICATION_FIELDS]
        values[PUBLICATION_FIELDS.index("is_selected")] = bool(data.get("is_selected") or False)
        return await self._insert("publications", PUBLICATION_FIELDS, PUBLICATION_COLUMNS, values)

    async def update_publication(self, publication_id: int, data: dict[str, Any]) -> Row | None:
        return await self._update("publications", PUBLICATION_FIELDS, PUBLICATION_COLUMNS, publication_id, data)

    async def delete_publication(self, publication_id: int) -> bool:
        return await self._delete("publications", publication_id)

    # Projects

    async def list_projects(self) -> list[Row]:
        return await self.db.fetch_all(
            f"""
            SELECT {PROJECT_COLUMNS}
            FROM projects
            ORDER BY id ASC
            """
        )

    async def create_project(self, data: dict[str, Any]) -> Row:
        values = [data.get(name) for name in PROJECT_FIELDS]
        return await self._insert("projects", PROJECT_FIELDS, PROJECT_COLUMNS, values)

    async def update_project(self, project_id: int, data: dict[str, Any]) -> Row | None:
        return await self._update("projects", PROJECT_FIELDS, PROJECT_COLUMNS, project_id, data)

    async def delete_project(self, project_id: int) -> bool:
        return await self._delete("projects", project_id)

    # News

    async def list_news(self) -> list[Row]:
        # YYYY-MM-DD strings sort chronologically.
        return await self.db.fetch_all(
            f"""
            SELECT {NEWS_COLUMNS}
            FROM news
            ORDER BY date DESC, id ASC
            """
        )

    async def create_news(self, data: dict[str, Any]) -> Row:
        values = [data.get(name) for name in NEWS_FIELDS]
        return await self._insert("news", NEWS_FIELDS, NEWS_COLUMNS, values)

    async def delete_news(self, news_id: int) -> bool:
        return await self._delete("news", news_id)
