"""
Storage interface for the four portfolio record kinds.

Rows travel as plain dicts keyed by snake_case column name. Inputs are the
`model_dump()` of the matching contract model.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

Row = dict[str, Any]

# The profile table holds at most this one row.
PROFILE_ID = 1

PROFILE_FIELDS = (
    "name",
    "title",
    "institution",
    "bio",
    "email",
    "github_url",
    "scholar_url",
    "twitter_url",
    "linkedin_url",
    "cv_url",
    "image_url",
)

PUBLICATION_FIELDS = (
    "title",
    "authors",
    "venue",
    "year",
    "abstract",
    "pdf_url",
    "code_url",
    "project_url",
    "is_selected",
)

PROJECT_FIELDS = (
    "title",
    "description",
    "image_url",
    "link",
    "technologies",
)

NEWS_FIELDS = (
    "date",
    "content",
    "link",
)


def pick(data: dict[str, Any], fields: tuple[str, ...]) -> Row:
    """
    Keep only known columns, preserving `fields` order.
    """
    return {name: data[name] for name in fields if name in data}


class Storage(ABC):
    """
    One operation set per record kind.

    `update_*` returns None and `delete_*` returns False when the id does not
    exist; neither raises for a missing row.
    """

    async def open(self) -> None:
        return None

    async def close(self) -> None:
        return None

    # Profile (singleton)

    @abstractmethod
    async def get_profile(self) -> Row | None: ...

    @abstractmethod
    async def update_profile(self, data: dict[str, Any]) -> Row: ...

    # Publications

    @abstractmethod
    async def list_publications(self) -> list[Row]: ...

    @abstractmethod
    async def create_publication(self, data: dict[str, Any]) -> Row: ...

    @abstractmethod
    async def update_publication(self, publication_id: int, data: dict[str, Any]) -> Row | None: ...

    @abstractmethod
    async def delete_publication(self, publication_id: int) -> bool: ...

    # Projects

    @abstractmethod
    async def list_projects(self) -> list[Row]: ...

    @abstractmethod
    async def create_project(self, data: dict[str, Any]) -> Row: ...

    @abstractmethod
    async def update_project(self, project_id: int, data: dict[str, Any]) -> Row | None: ...

    @abstractmethod
    async def delete_project(self, project_id: int) -> bool: ...

    # News

    @abstractmethod
    async def list_news(self) -> list[Row]: ...

    @abstractmethod
    async def create_news(self, data: dict[str, Any]) -> Row: ...

    @abstractmethod
    async def delete_news(self, news_id: int) -> bool: ...
