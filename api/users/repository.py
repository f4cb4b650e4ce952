"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database


async def create_user(db: Database, *, username: str, email: str) -> dict:
    return await db.query_one(
        """
        INSERT INTO users (username, email)
        VALUES ($1, $2)
        RETURNING id, username, email
        """,
        username,
        email,
    )
