"""
User API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateUser(BaseModel):
    username: str = Field(..., min_length=1)
    # No format check; the store only requires a value.
    email: str = Field(..., min_length=1)


class User(BaseModel):
    id: int
    username: str
    email: str
