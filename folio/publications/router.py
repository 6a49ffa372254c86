"""
Publication endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from folio.contract import API
from folio.contract.schemas import Publication, PublicationInput, PublicationUpdate
from folio.core.dependencies import get_storage
from folio.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

ROUTES = API["publications"]


@router.get(
    ROUTES["list"].route_path,
    response_model=ROUTES["list"].success_model,
)
async def list_publications(storage: Storage = Depends(get_storage)) -> list[dict]:
    """
    All publications, newest year first.
    """
    return await storage.list_publications()


@router.post(
    ROUTES["create"].route_path,
    response_model=Publication,
    status_code=ROUTES["create"].success_status,
    responses=ROUTES["create"].error_responses(),
)
async def create_publication(
    payload: PublicationInput,
    storage: Storage = Depends(get_storage),
) -> dict:
    row = await storage.create_publication(payload.model_dump())
    logger.info("publication_created id=%s year=%s", row["id"], row["year"])
    return row


@router.put(
    ROUTES["update"].route_path,
    response_model=Publication,
    status_code=ROUTES["update"].success_status,
    responses=ROUTES["update"].error_responses(),
)
async def update_publication(
    id: int,
    payload: PublicationUpdate,
    storage: Storage = Depends(get_storage),
) -> dict:
    """
    Apply only the fields present in the request body.
    """
    row = await storage.update_publication(id, payload.model_dump(exclude_unset=True))
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Publication not found")
    logger.info("publication_updated id=%s", id)
    return row


@router.delete(
    ROUTES["delete"].route_path,
    status_code=ROUTES["delete"].success_status,
    response_class=Response,
    responses=ROUTES["delete"].error_responses(),
)
async def delete_publication(id: int, storage: Storage = Depends(get_storage)) -> Response:
    deleted = await storage.delete_publication(id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Publication not found")
    logger.info("publication_deleted id=%s", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
