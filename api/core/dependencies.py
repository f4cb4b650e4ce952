"""
FastAPI dependencies shared by the feature routers.
"""

from __future__ import annotations

from fastapi import Request

from .db import Database


def get_db(request: Request) -> Database:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("DB pool is not initialized. The app lifespan creates it on startup.")
    return database
