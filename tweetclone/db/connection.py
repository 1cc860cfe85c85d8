"""Database connection management, transactions and initialization."""

import logging
import sqlite3
import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..config import get_database_path
from ..errors import StorageUnavailable, ValidationError
from .schema import SCHEMA

log = logging.getLogger(__name__)


def init_db(db_path: Path | None = None) -> None:
    """Initialize the database with schema."""
    if db_path is None:
        db_path = get_database_path()

    db_path.parent.mkdir(parents=True, exist_ok=True)

    max_attempts = 3
    for attempt in range(max_attempts):
        try:
            with get_connection(db_path) as conn:
                conn.executescript(SCHEMA)
                conn.commit()
            return
        except sqlite3.OperationalError as e:
            if "database is locked" in str(e) and attempt < max_attempts - 1:
                time.sleep(1)
                continue
            raise StorageUnavailable(f"Cannot initialize database at {db_path}: {e}") from e


@contextmanager
def get_connection(db_path: Path | None = None, readonly: bool = False) -> Iterator[sqlite3.Connection]:
    """Get a database connection with row factory and foreign keys enforced.

    Args:
        db_path: Path to database file. If None, uses default from config.
        readonly: If True, open in readonly mode to avoid write locks.
    """
    if db_path is None:
        db_path = get_database_path()

    try:
        if readonly:
            uri = f"file:{db_path}?mode=ro"
            conn = sqlite3.connect(uri, uri=True, timeout=30)
        else:
            conn = sqlite3.connect(db_path, timeout=30)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA busy_timeout=30000")
        conn.execute("PRAGMA foreign_keys=ON")
    except sqlite3.Error as e:
        raise StorageUnavailable(f"Cannot open database at {db_path}: {e}") from e

    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def storage_errors() -> Iterator[None]:
    """Re-raise sqlite errors from the block as tweetclone errors.

    Constraint violations become ``ValidationError``; anything else the
    store reports becomes ``StorageUnavailable``.
    """
    try:
        yield
    except sqlite3.IntegrityError as e:
        raise ValidationError(str(e)) from e
    except sqlite3.Error as e:
        raise StorageUnavailable(str(e)) from e


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run a block as one unit of work.

    Commits when the block succeeds. On any failure everything written inside
    the block is rolled back and sqlite errors are translated as in
    ``storage_errors``.
    """
    try:
        with storage_errors():
            yield conn
    except BaseException:
        _rollback(conn)
        raise

    try:
        conn.commit()
    except sqlite3.Error as e:
        _rollback(conn)
        raise StorageUnavailable(f"Commit failed: {e}") from e


def _rollback(conn: sqlite3.Connection) -> None:
    log.warning("Rolling back transaction")
    try:
        conn.rollback()
    except sqlite3.Error:
        log.exception("Rollback failed")
