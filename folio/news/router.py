"""
News endpoints. News items are created and deleted, never edited.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from folio.contract import API
from folio.contract.schemas import NewsInput, NewsItem
from folio.core.dependencies import get_storage
from folio.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

ROUTES = API["news"]


@router.get(
    ROUTES["list"].route_path,
    response_model=ROUTES["list"].success_model,
)
async def list_news(storage: Storage = Depends(get_storage)) -> list[dict]:
    """
    All news items, most recent date first.
    """
    return await storage.list_news()


@router.post(
    ROUTES["create"].route_path,
    response_model=NewsItem,
    status_code=ROUTES["create"].success_status,
    responses=ROUTES["create"].error_responses(),
)
async def create_news(
    payload: NewsInput,
    storage: Storage = Depends(get_storage),
) -> dict:
    row = await storage.create_news(payload.model_dump())
    logger.info("news_created id=%s date=%s", row["id"], row["date"])
    return row


@router.delete(
    ROUTES["delete"].route_path,
    status_code=ROUTES["delete"].success_status,
    response_class=Response,
    responses=ROUTES["delete"].error_responses(),
)
async def delete_news(id: int, storage: Storage = Depends(get_storage)) -> Response:
    deleted = await storage.delete_news(id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="News item not found")
    logger.info("news_deleted id=%s", id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
