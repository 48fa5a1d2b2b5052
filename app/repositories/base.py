"""Base repository class."""

import asyncio
from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality.

    Every statement runs on a private cursor of the shared connection, so
    repositories can be driven from worker threads via ``query``/``run``.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None, read_only: bool = False):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def fetchall(self, query: str, params: list | None = None) -> list[dict]:
        """Execute and fetch all rows as dicts."""
        cursor = self._db.cursor()
        try:
            return fetch_rows(cursor, query, params)
        finally:
            cursor.close()

    def fetchone(self, query: str, params: list | None = None) -> dict | None:
        """Execute and fetch the first row as a dict."""
        rows = self.fetchall(query, params)
        return rows[0] if rows else None

    def transaction(self, fn: Callable[[duckdb.DuckDBPyConnection], Any]) -> Any:
        """Run `fn(cursor)` inside one transaction."""
        if self._read_only:
            raise RuntimeError("Cannot write in read-only mode")

        cursor = self._db.cursor()
        try:
            cursor.begin()
            result = fn(cursor)
            cursor.commit()
            return result
        except Exception:
            cursor.rollback()
            raise
        finally:
            cursor.close()

    async def query(self, query: str, params: list | None = None) -> list[dict]:
        """Execute off the event loop and return rows as dicts."""
        return await asyncio.to_thread(self.fetchall, query, params)

    async def run(self, fn: Callable[[duckdb.DuckDBPyConnection], Any]) -> Any:
        """Run a transaction off the event loop."""
        return await asyncio.to_thread(self.transaction, fn)


def fetch_rows(cursor: duckdb.DuckDBPyConnection, query: str, params: list | None = None) -> list[dict]:
    """Execute on an open cursor and return rows as dicts."""
    if params:
        cursor.execute(query, params)
    else:
        cursor.execute(query)
    columns = [c[0] for c in cursor.description]
    return [dict(zip(columns, r)) for r in cursor.fetchall()]
