"""
pytest configuration and fixtures.

The HTTP tests run the real routers against `FakeDatabase`, an in-memory
stand-in for `core.db.Database` that understands the statements issued by
the `users` and `posts` repositories.
"""

from __future__ import annotations

import itertools
from typing import Any, Generator

import pytest
from fastapi.testclient import TestClient

from core.db import NoRowsError, StoreError
from core.dependencies import get_db
from main import app


def _normalize(sql: str) -> str:
    return " ".join(sql.split())


class FakeDatabase:
    def __init__(self) -> None:
        self.users: dict[int, dict[str, Any]] = {}
        self.posts: dict[int, dict[str, Any]] = {}
        self.statements: list[str] = []
        self.fail_with: StoreError | None = None
        self._user_ids = itertools.count(1)
        self._post_ids = itertools.count(1)

    def _record(self, sql: str) -> str:
        statement = _normalize(sql)
        self.statements.append(statement)
        if self.fail_with is not None:
            raise self.fail_with
        return statement

    async def query_one(self, sql: str, *args: Any) -> dict[str, Any]:
        statement = self._record(sql)

        if statement.startswith("INSERT INTO users"):
            username, email = args
            row = {"id": next(self._user_ids), "username": username, "email": email}
            self.users[row["id"]] = row
            return dict(row)

        if statement.startswith("INSERT INTO posts"):
            user_id, title, body = args
            row = {"id": next(self._post_ids), "user_id": user_id, "title": title, "body": body}
            self.posts[row["id"]] = row
            return dict(row)

        if statement.startswith("UPDATE posts"):
            title, body, user_id, post_id = args
            row = self.posts.get(post_id)
            if row is None:
                raise NoRowsError("Statement returned no rows.")
            row.update(title=title, body=body, user_id=user_id)
            return dict(row)

        raise AssertionError(f"unexpected statement: {statement}")

    async def query(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        statement = self._record(sql)
        if statement.startswith("SELECT id, user_id, title, body FROM posts"):
            (post_id,) = args
            row = self.posts.get(post_id)
            return [dict(row)] if row is not None else []
        raise AssertionError(f"unexpected statement: {statement}")

    async def execute(self, sql: str, *args: Any) -> int:
        statement = self._record(sql)
        if statement.startswith("DELETE FROM posts"):
            (post_id,) = args
            return 1 if self.posts.pop(post_id, None) is not None else 0
        raise AssertionError(f"unexpected statement: {statement}")


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def client(fake_db: FakeDatabase) -> Generator[TestClient, None, None]:
    # Not entered as a context manager, so the lifespan (real pool) never runs.
    app.dependency_overrides[get_db] = lambda: fake_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
