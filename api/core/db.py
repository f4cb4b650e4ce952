"""
Async database access helpers (raw SQL) using asyncpg.

`Database` wraps the process-wide connection pool. The FastAPI lifespan
creates it once on startup (see `api/main.py`) and hands it to handlers
through `core.dependencies.get_db`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure surfaces as `StoreError`. A single-row statement that
returns nothing raises `NoRowsError`, so callers can tell "no matching row"
apart from "the statement failed".
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import asyncpg

logger = logging.getLogger(__name__)

_DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
)


class StoreError(RuntimeError):
    pass


class NoRowsError(StoreError):
    pass


def _affected_rows(status: str) -> int:
    # Status tags look like "DELETE 1", "UPDATE 3" or "INSERT 0 1".
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Borrow a connection for one statement.

        The pool takes the connection back on every exit path.
        """
        try:
            async with self._pool.acquire() as conn:
                yield conn
        except _DRIVER_ERRORS as exc:
            logger.exception("store_query_failed")
            raise StoreError(str(exc) or exc.__class__.__name__) from exc

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected row count.
        """
        async with self.acquire() as conn:
            status = await conn.execute(sql, *args)
        return _affected_rows(status)

    async def query(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        async with self.acquire() as conn:
            rows = await conn.fetch(sql, *args)
        return [dict(record) for record in rows]

    async def query_one(self, sql: str, *args: Any) -> dict[str, Any]:
        """
        Run a query and return its first row; raise NoRowsError if there is none.
        """
        async with self.acquire() as conn:
            row = await conn.fetchrow(sql, *args)
        if row is None:
            raise NoRowsError("Statement returned no rows.")
        return dict(row)

    async def close(self) -> None:
        await self._pool.close()
        logger.info("database_closed")


async def connect(
    url: str,
    *,
    min_size: int = 1,
    max_size: int = 10,
    command_timeout: float = 30.0,
) -> Database:
    try:
        pool = await asyncpg.create_pool(
            dsn=url,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
        )
    except _DRIVER_ERRORS as exc:
        raise StoreError(f"Could not connect to the database: {exc}") from exc

    logger.info("database_connected min_size=%s max_size=%s", min_size, max_size)
    return Database(pool)
