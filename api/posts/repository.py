"""
Post persistence (raw SQL).

Each function issues exactly one statement.
"""

from __future__ import annotations

from core.db import Database


async def create_post(db: Database, *, title: str, body: str, user_id: int | None) -> dict:
    return await db.query_one(
        """
        INSERT INTO posts (user_id, title, body)
        VALUES ($1, $2, $3)
        RETURNING id, title, body, user_id
        """,
        user_id,
        title,
        body,
    )


async def get_posts_by_id(db: Database, post_id: int) -> list[dict]:
    return await db.query(
        """
        SELECT id, user_id, title, body
        FROM posts
        WHERE id = $1
        """,
        post_id,
    )


async def update_post(
    db: Database,
    post_id: int,
    *,
    title: str,
    body: str,
    user_id: int | None,
) -> dict:
    """
    Replace title, body and owner of one post. Raises NoRowsError if the id is unknown.
    """
    return await db.query_one(
        """
        UPDATE posts
        SET title = $1,
            body = $2,
            user_id = $3
        WHERE id = $4
        RETURNING id, user_id, title, body
        """,
        title,
        body,
        user_id,
        post_id,
    )


async def delete_post(db: Database, post_id: int) -> int:
    return await db.execute(
        """
        DELETE FROM posts
        WHERE id = $1
        """,
        post_id,
    )
