"""
Pydantic schemas for post endpoints.

Ids and owner references are Postgres INTEGER columns, so they are bounded
to the signed 32-bit range before any statement is issued.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

Int4 = Annotated[int, Field(ge=INT4_MIN, le=INT4_MAX)]


class CreatePost(BaseModel):
    title: str
    body: str
    user_id: Int4 | None = None


class UpdatePost(BaseModel):
    """
    Full replacement: an omitted user_id clears the owner.
    """

    title: str
    body: str
    user_id: Int4 | None = None


class Post(BaseModel):
    id: int
    user_id: int | None
    title: str
    body: str


class Message(BaseModel):
    message: str
