"""
Route table for the portfolio API.

Each `Endpoint` names the HTTP method, the path (with `:id` placeholders),
the accepted input model and the response model for every status code. The
routers register themselves from this table and the client calls through it,
so both sides read the same definitions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel

from .schemas import (
    ErrorBody,
    NewsInput,
    NewsItem,
    Profile,
    ProfileInput,
    Project,
    ProjectInput,
    ProjectUpdate,
    Publication,
    PublicationInput,
    PublicationUpdate,
    ValidationErrorBody,
)

_PARAM_RE = re.compile(r":(\w+)")


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    # status code -> response model; None means "no body"
    responses: Mapping[int, Any] = field(default_factory=dict)
    input: type[BaseModel] | None = None

    @property
    def success_status(self) -> int:
        return min(code for code in self.responses if 200 <= code < 300)

    @property
    def success_model(self) -> Any:
        return self.responses[self.success_status]

    @property
    def route_path(self) -> str:
        """
        Path in FastAPI's `{name}` placeholder syntax.
        """
        return _PARAM_RE.sub(r"{\1}", self.path)

    def error_responses(self) -> dict[int | str, dict[str, Any]]:
        """
        Non-2xx entries in the shape FastAPI's `responses=` argument expects.
        """
        return {
            code: {"model": model}
            for code, model in self.responses.items()
            if code >= 300 and model is not None
        }


def build_url(path: str, params: Mapping[str, str | int] | None = None) -> str:
    """
    Substitute `:name` placeholders in `path` with stringified values.
    """
    url = path
    for key, value in (params or {}).items():
        token = f":{key}"
        if token in url:
            url = url.replace(token, str(value))
    return url


API: dict[str, dict[str, Endpoint]] = {
    "profile": {
        "get": Endpoint(
            method="GET",
            path="/api/profile",
            responses={200: Profile, 404: ErrorBody},
        ),
        # POST because the single profile row is upserted.
        "update": Endpoint(
            method="POST",
            path="/api/profile",
            input=ProfileInput,
            responses={200: Profile, 400: ValidationErrorBody},
        ),
    },
    "publications": {
        "list": Endpoint(
            method="GET",
            path="/api/publications",
            responses={200: list[Publication]},
        ),
        "create": Endpoint(
            method="POST",
            path="/api/publications",
            input=PublicationInput,
            responses={201: Publication, 400: ValidationErrorBody},
        ),
        "update": Endpoint(
            method="PUT",
            path="/api/publications/:id",
            input=PublicationUpdate,
            responses={200: Publication, 400: ValidationErrorBody, 404: ErrorBody},
        ),
        "delete": Endpoint(
            method="DELETE",
            path="/api/publications/:id",
            responses={204: None, 404: ErrorBody},
        ),
    },
    "projects": {
        "list": Endpoint(
            method="GET",
            path="/api/projects",
            responses={200: list[Project]},
        ),
        "create": Endpoint(
            method="POST",
            path="/api/projects",
            input=ProjectInput,
            responses={201: Project, 400: ValidationErrorBody},
        ),
        "update": Endpoint(
            method="PUT",
            path="/api/projects/:id",
            input=ProjectUpdate,
            responses={200: Project, 400: ValidationErrorBody, 404: ErrorBody},
        ),
        "delete": Endpoint(
            method="DELETE",
            path="/api/projects/:id",
            responses={204: None, 404: ErrorBody},
        ),
    },
    "news": {
        "list": Endpoint(
            method="GET",
            path="/api/news",
            responses={200: list[NewsItem]},
        ),
        "create": Endpoint(
            method="POST",
            path="/api/news",
            input=NewsInput,
            responses={201: NewsItem, 400: ValidationErrorBody},
        ),
        "delete": Endpoint(
            method="DELETE",
            path="/api/news/:id",
            responses={204: None, 404: ErrorBody},
        ),
    },
}
