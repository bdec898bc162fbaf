"""SQLite connection provider.

Opens the connections that repositories such as StudentsTable are built
with. Repositories never own their connection: whoever calls
open_connection() or get_db() is responsible for closing it.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

import structlog

from labdb.config.app_config import get_database_config
from labdb.db.students_table import StudentsTable

logger = structlog.get_logger(__name__)

MEMORY_DB = ":memory:"


def _resolve_path(db_path: Path | str | None) -> Path | str:
    if db_path is None:
        db_path = get_database_config().path
    if str(db_path) == MEMORY_DB:
        return MEMORY_DB
    return Path(db_path)


def open_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Open a new SQLite connection.

    Args:
        db_path: Database file or ":memory:". Defaults to the configured path.

    Returns:
        Connection with row factory set to sqlite3.Row. The caller must close it.
    """
    config = get_database_config()
    path = _resolve_path(db_path)

    if isinstance(path, Path):
        # Ensure directory exists
        path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(path, timeout=config.timeout)
    conn.row_factory = sqlite3.Row
    if config.foreign_keys:
        conn.execute("PRAGMA foreign_keys = ON")

    logger.debug("database.connection_opened", path=str(path))
    return conn


@contextmanager
def get_db(db_path: Path | str | None = None) -> Generator[sqlite3.Connection, None, None]:
    """Get database connection as context manager.

    Yields:
        SQLite connection with row factory set to sqlite3.Row

    Example:
        with get_db() as conn:
            students = StudentsTable(conn).find_all()
    """
    conn = open_connection(db_path)

    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(db_path: Path | str | None = None) -> Path | str:
    """Initialize database with the students table.

    Safe to call repeatedly: an existing table is left untouched.

    Args:
        db_path: Path to database file. Defaults to the configured path.

    Returns:
        The database location that was initialized
    """
    path = _resolve_path(db_path)

    with get_db(path) as conn:
        table = StudentsTable(conn)
        exists = conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?",
            (table.get_table_name(),),
        ).fetchone()
        created = table.create_table() if exists is None else False

    logger.info("database.initialized", path=str(path), created=created)
    return path
