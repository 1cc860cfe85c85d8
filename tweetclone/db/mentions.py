"""Mention-edge operations."""

import sqlite3

from ..models import Status, User
from .statuses import STATUS_SELECT, row_to_status
from .users import _row_to_user


def create_mention(conn: sqlite3.Connection, user_id: int, status_id: int) -> bool:
    """Record that a status mentions a user. The status must already exist.

    Returns True if a new edge was created.
    """
    cursor = conn.execute(
        "INSERT OR IGNORE INTO mentions (user_id, status_id) VALUES (?, ?)",
        (user_id, status_id),
    )
    return cursor.rowcount > 0


def list_mentioned_users(conn: sqlite3.Connection, status_id: int) -> list[User]:
    """Users mentioned by a status, in the order the edges were recorded."""
    cursor = conn.execute(
        """
        SELECT u.* FROM users u
        JOIN mentions m ON m.user_id = u.id
        WHERE m.status_id = ?
        ORDER BY m.rowid ASC
        """,
        (status_id,),
    )
    return [_row_to_user(row) for row in cursor.fetchall()]


def list_mentioned_statuses(conn: sqlite3.Connection, user_id: int, limit: int | None = None) -> list[Status]:
    """Statuses that mention a user, most recent first."""
    limit_clause = f"LIMIT {int(limit)}" if limit else ""
    cursor = conn.execute(
        f"""
        {STATUS_SELECT}
        JOIN mentions m ON m.status_id = s.id
        WHERE m.user_id = ?
        ORDER BY s.created_at DESC, s.id DESC
        {limit_clause}
        """,
        (user_id,),
    )
    return [row_to_status(row) for row in cursor.fetchall()]
