"""
Post API endpoints.

Store failures on create map to 500; on id-addressed operations they map
to 404, as does an update that matches no row.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from core.db import Database, NoRowsError, StoreError
from core.dependencies import get_db

from . import repository, schemas

router = APIRouter()

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Post deleted successfully"

PostId = Annotated[int, Path(ge=schemas.INT4_MIN, le=schemas.INT4_MAX)]


@router.post("/posts", response_model=schemas.Post)
async def create_post(
    payload: schemas.CreatePost,
    db: Database = Depends(get_db),
) -> dict:
    try:
        row = await repository.create_post(
            db,
            title=payload.title,
            body=payload.body,
            user_id=payload.user_id,
        )
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR) from exc

    logger.info("post_created id=%s", row["id"])
    return row


@router.get("/posts/{post_id}", response_model=list[schemas.Post])
async def get_posts(
    post_id: PostId,
    db: Database = Depends(get_db),
) -> list[dict]:
    """
    Set fetch by id: an unknown id yields an empty list, not an error.
    """
    try:
        return await repository.get_posts_by_id(db, post_id)
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc


@router.put("/posts/{post_id}", response_model=schemas.Post)
async def update_post(
    post_id: PostId,
    payload: schemas.UpdatePost,
    db: Database = Depends(get_db),
) -> dict:
    try:
        row = await repository.update_post(
            db,
            post_id,
            title=payload.title,
            body=payload.body,
            user_id=payload.user_id,
        )
    except NoRowsError as exc:
        logger.info("post_not_found post_id=%s", post_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc

    logger.info("post_updated id=%s", row["id"])
    return row


@router.delete("/posts/{post_id}", response_model=schemas.Message)
async def delete_post(
    post_id: PostId,
    db: Database = Depends(get_db),
) -> dict:
    # Deleting an unknown id is still reported as success.
    try:
        removed = await repository.delete_post(db, post_id)
    except StoreError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND) from exc

    logger.info("post_deleted id=%s removed=%s", post_id, removed)
    return {"message": DELETED_MESSAGE}
