"""
Project endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from folio.contract import API
from folio.contract.schemas import Project, ProjectInput, ProjectUpdate
from folio.core.dependencies import get_storage
from folio.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

ROUTES = API["projects"]


@router.get(
    ROUTES["list"].route_path,
    response_model=ROUTES["list"].success_model,
)
async def list_projects(storage: Storage = Depends(get_storage)) -> list[dict]:
    return await storage.list_projects()


@router.post(
    ROUTES["create"].route_path,
    response_model=Project,
    status_code=ROUTES["create"].success_status,
    responses=ROUTES["create"].error_responses(),
)
async def create_project(
    payload: ProjectInput,
    storage: Storage = Depends(get_storage),
) -> dict:
    row = await storage.create_project(payload.model_dump())
    logger.info("project_created id=%s", row["id"])
    return row


@router.put(
    ROUTES["update"].route_path,
    response_model=Project,
    status_code=ROUTES["update"].success_status,
    responses=ROUTES["update"].error_responses(),
)
async def update_project(
    id: int,
    payload: ProjectUpdate,
    storage: Storage = Depends(get_storage),
) -> dict:
    row = await storage.update_project(id, payload.model_dump(exclude_unset=True))
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    logger.info("project_updated id=%s", id)
    return row


@router.delete(
    ROUTES["delete"].route_path,
    status_code=ROUTES["delete"].success_status,
    response_class=Response,
    responses=ROUTES["delete"].error_responses(),
)
async def delete_project(id: int, storage: Storage = Depends(get_storage)) -> Response:
    deleted = await storage.delete_project(id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    logger.info("project_deleted id=%s", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
