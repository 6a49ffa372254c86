"""
Profile endpoints. There is at most one profile; POST upserts it.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from folio.contract import API
from folio.contract.schemas import Profile, ProfileInput
from folio.core.dependencies import get_storage
from folio.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()

ROUTES = API["profile"]


@router.get(
    ROUTES["get"].route_path,
    response_model=Profile,
    responses=ROUTES["get"].error_responses(),
)
async def get_profile(storage: Storage = Depends(get_storage)) -> dict:
    row = await storage.get_profile()
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return row


@router.post(
    ROUTES["update"].route_path,
    response_model=Profile,
    status_code=ROUTES["update"].success_status,
    responses=ROUTES["update"].error_responses(),
)
async def update_profile(
    payload: ProfileInput,
    storage: Storage = Depends(get_storage),
) -> dict:
    """
    Overwrite the profile in place, or create it on first write.
    """
    row = await storage.update_profile(payload.model_dump())
    logger.info("profile_saved id=%s", row["id"])
    return row
