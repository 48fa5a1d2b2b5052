"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_lock = threading.Lock()
_conn: duckdb.DuckDBPyConnection | None = None


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Apply all DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(path: str = DB_PATH, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a new connection; writable connections get the schema applied."""
    if not read_only and path != ":memory:" and not Path(path).exists():
        logger.warning("DB not found: {}. Creating empty DB.", path)
    conn = duckdb.connect(path, read_only=read_only)
    if not read_only:
        init_tables(conn)
    return conn


def get_db(read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Get the process-wide connection; callers run queries on their own cursor."""
    global _conn
    with _lock:
        if _conn is None:
            _conn = connect(DB_PATH, read_only=read_only)
            logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
        return _conn


def close_db() -> None:
    """Close the process-wide connection."""
    global _conn
    with _lock:
        if _conn is not None:
            _conn.close()
            _conn = None
            logger.debug("DB connection closed")
