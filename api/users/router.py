"""
User API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from core.db import Database, StoreError
from core.dependencies import get_db

from . import repository, schemas

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/users", response_model=schemas.User)
async def create_user(
    payload: schemas.CreateUser,
    db: Database = Depends(get_db),
) -> dict:
    try:
        row = await repository.create_user(db, username=payload.username, email=payload.email)
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR) from exc

    logger.info("user_created id=%s", row["id"])
    return row
