"""
HTTP client for the portfolio API.

Reads are cached per contract path. Every successful mutation drops the
cached read it affects, so the next read refetches, and emits a `Notice`
(success or error) to the `notify` callback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from folio.contract import API, Endpoint, build_url
from folio.contract.schemas import NewsItem, Profile, Project, Publication

from .cache import QueryCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    title: str
    description: str
    variant: str = "default"


class PortfolioClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def log_notice(notice: Notice) -> None:
    level = logging.WARNING if notice.variant == "destructive" else logging.INFO
    logger.log(level, "notice title=%s description=%s", notice.title, notice.description)


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:300]
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return resp.text[:300]


class PortfolioClient:
    def __init__(
        self,
        http: httpx.Client,
        *,
        notify: Callable[[Notice], None] | None = None,
        cache: QueryCache | None = None,
    ) -> None:
        self.http = http
        self.notify = notify or log_notice
        self.cache = cache if cache is not None else QueryCache()

    @classmethod
    def connect(cls, base_url: str, *, timeout_s: float = 30.0, **kwargs: Any) -> "PortfolioClient":
        base_url = (base_url or "").strip().rstrip("/")
        if not base_url:
            raise PortfolioClientError("Base URL is empty.")
        return cls(httpx.Client(base_url=base_url, timeout=timeout_s), **kwargs)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "PortfolioClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Transport

    def _send(
        self,
        endpoint: Endpoint,
        *,
        params: Mapping[str, str | int] | None = None,
        payload: BaseModel | Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        body = None
        if payload is not None:
            if endpoint.input is None:
                raise PortfolioClientError(f"{endpoint.method} {endpoint.path} takes no body.")
            # Dicts go through the same input model the server validates with.
            model = payload if isinstance(payload, BaseModel) else endpoint.input.model_validate(payload)
            body = model.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return self.http.request(endpoint.method, build_url(endpoint.path, params), json=body)

    @staticmethod
    def _parse(endpoint: Endpoint, resp: httpx.Response) -> Any:
        model = endpoint.success_model
        if model is None:
            return None
        return TypeAdapter(model).validate_python(resp.json())

    def _query(self, endpoint: Endpoint, *, failure: str, missing_ok: bool = False) -> Any:
        key = endpoint.path
        if key in self.cache:
            return self.cache.get(key)

        resp = self._send(endpoint)
        if missing_ok and resp.status_code == 404:
            # Nothing saved yet (fresh install).
            data = None
        elif resp.status_code != endpoint.success_status:
            raise PortfolioClientError(
                f"{failure}: {_error_message(resp)}",
                status_code=resp.status_code,
            )
        else:
            data = self._parse(endpoint, resp)

        self.cache.set(key, data)
        return data

    def _mutate(
        self,
        endpoint: Endpoint,
        *,
        invalidates: str,
        success: str,
        failure: str,
        params: Mapping[str, str | int] | None = None,
        payload: BaseModel | Mapping[str, Any] | None = None,
    ) -> Any:
        try:
            resp = self._send(endpoint, params=params, payload=payload)
        except httpx.HTTPError as exc:
            self.notify(Notice("Error", failure, "destructive"))
            raise PortfolioClientError(f"{failure}: {exc}") from exc
        except ValidationError as exc:
            # Rejected before sending; same notice as a server-side 400.
            self.notify(Notice("Error", failure, "destructive"))
            raise PortfolioClientError(f"{failure}: {exc.errors()[0]['msg']}", status_code=400) from exc

        if resp.status_code != endpoint.success_status:
            self.notify(Notice("Error", failure, "destructive"))
            raise PortfolioClientError(
                f"{failure}: {_error_message(resp)}",
                status_code=resp.status_code,
            )

        result = self._parse(endpoint, resp)
        self.cache.invalidate(invalidates)
        self.notify(Notice("Success", success))
        return result

    # Profile

    def profile(self) -> Profile | None:
        return self._query(API["profile"]["get"], failure="Failed to fetch profile", missing_ok=True)

    def update_profile(self, data: BaseModel | Mapping[str, Any]) -> Profile:
        return self._mutate(
            API["profile"]["update"],
            payload=data,
            invalidates=API["profile"]["get"].path,
            success="Profile updated successfully",
            failure="Failed to update profile",
        )

    # Publications

    def publications(self) -> list[Publication]:
        return self._query(API["publications"]["list"], failure="Failed to fetch publications")

    def create_publication(self, data: BaseModel | Mapping[str, Any]) -> Publication:
        return self._mutate(
            API["publications"]["create"],
            payload=data,
            invalidates=API["publications"]["list"].path,
            success="Publication added",
            failure="Failed to add publication",
        )

    def update_publication(self, publication_id: int, data: BaseModel | Mapping[str, Any]) -> Publication:
        return self._mutate(
            API["publications"]["update"],
            params={"id": publication_id},
            payload=data,
            invalidates=API["publications"]["list"].path,
            success="Publication updated",
            failure="Failed to update publication",
        )

    def delete_publication(self, publication_id: int) -> None:
        self._mutate(
            API["publications"]["delete"],
            params={"id": publication_id},
            invalidates=API["publications"]["list"].path,
            success="Publication deleted",
            failure="Failed to delete publication",
        )

    # Projects

    def projects(self) -> list[Project]:
        return self._query(API["projects"]["list"], failure="Failed to fetch projects")

    def create_project(self, data: BaseModel | Mapping[str, Any]) -> Project:
        return self._mutate(
            API["projects"]["create"],
            payload=data,
            invalidates=API["projects"]["list"].path,
            success="Project added",
            failure="Failed to add project",
        )

    def update_project(self, project_id: int, data: BaseModel | Mapping[str, Any]) -> Project:
        return self._mutate(
            API["projects"]["update"],
            params={"id": project_id},
            payload=data,
            invalidates=API["projects"]["list"].path,
            success="Project updated",
            failure="Failed to update project",
        )

    def delete_project(self, project_id: int) -> None:
        self._mutate(
            API["projects"]["delete"],
            params={"id": project_id},
            invalidates=API["projects"]["list"].path,
            success="Project deleted",
            failure="Failed to delete project",
        )

    # News

    def news(self) -> list[NewsItem]:
        return self._query(API["news"]["list"], failure="Failed to fetch news")

    def create_news(self, data: BaseModel | Mapping[str, Any]) -> NewsItem:
        return self._mutate(
            API["news"]["create"],
            payload=data,
            invalidates=API["news"]["list"].path,
            success="News item added",
            failure="Failed to add news item",
        )

    def delete_news(self, news_id: int) -> None:
        self._mutate(
            API["news"]["delete"],
            params={"id": news_id},
            invalidates=API["news"]["list"].path,
            success="News item deleted",
            failure="Failed to delete news item",
        )
