"""Shared pytest fixtures for tweetclone tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tweetclone.db import create_user, get_connection, init_db  # noqa: E402


@pytest.fixture
def db_path(tmp_path):
    """A fresh database with the schema applied."""
    path = tmp_path / "tweetclone.db"
    init_db(path)
    return path


@pytest.fixture
def conn(db_path):
    with get_connection(db_path) as connection:
        yield connection


@pytest.fixture
def make_user(conn):
    """Create and commit a user."""

    def _make(nickname: str, **kwargs):
        user = create_user(conn, nickname, **kwargs)
        conn.commit()
        return user

    return _make


@pytest.fixture
def count_rows(conn):
    def _count(table: str) -> int:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    return _count
