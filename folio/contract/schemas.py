"""
Record and payload schemas shared by the routers and the client.

Python attributes and database columns are snake_case; the JSON wire format
is camelCase (`pdfUrl`, `isSelected`). Both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

NEWS_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

# Postgres INTEGER / SERIAL range.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _reject_null(value: Any) -> Any:
    # Partial updates may leave a required column out, but never clear it.
    if value is None:
        raise ValueError("Field may be omitted but cannot be null")
    return value


# === PROFILE ===


class ProfileInput(WireModel):
    name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    institution: str = Field(..., min_length=1)
    bio: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    github_url: str | None = None
    scholar_url: str | None = None
    twitter_url: str | None = None
    linkedin_url: str | None = None
    cv_url: str | None = None
    image_url: str | None = None


class Profile(ProfileInput):
    id: int


# === PUBLICATIONS ===


class PublicationInput(WireModel):
    title: str = Field(..., min_length=1)
    authors: str = Field(..., min_length=1)
    venue: str = Field(..., min_length=1)
    year: int = Field(..., strict=True, ge=INT4_MIN, le=INT4_MAX)
    abstract: str | None = None
    pdf_url: str | None = None
    code_url: str | None = None
    project_url: str | None = None
    is_selected: bool = Field(default=False, strict=True)


class PublicationUpdate(WireModel):
    title: str | None = Field(default=None, min_length=1)
    authors: str | None = Field(default=None, min_length=1)
    venue: str | None = Field(default=None, min_length=1)
    year: int | None = Field(default=None, strict=True, ge=INT4_MIN, le=INT4_MAX)
    abstract: str | None = None
    pdf_url: str | None = None
    code_url: str | None = None
    project_url: str | None = None
    is_selected: bool | None = Field(default=None, strict=True)

    @field_validator("title", "authors", "venue", "year", "is_selected", mode="before")
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return _reject_null(value)


class Publication(PublicationInput):
    id: int


# === PROJECTS ===


class ProjectInput(WireModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str | None = None
    link: str | None = None
    # Comma separated, e.g. "Python, PyTorch".
    technologies: str | None = None


class ProjectUpdate(WireModel):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    image_url: str | None = None
    link: str | None = None
    technologies: str | None = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _required_not_null(cls, value: Any) -> Any:
        return _reject_null(value)


class Project(ProjectInput):
    id: int


# === NEWS ===


class NewsInput(WireModel):
    date: str = Field(..., pattern=NEWS_DATE_PATTERN)
    content: str = Field(..., min_length=1)
    link: str | None = None


class NewsItem(NewsInput):
    id: int


# === ERRORS ===


class ValidationErrorBody(BaseModel):
    message: str
    field: str | None = None


class ErrorBody(BaseModel):
    message: str
