"""Follow-edge operations. ``follower_id`` follows ``user_id``."""

import sqlite3

from ..errors import ValidationError
from ..models import User
from .users import _row_to_user


def create_follow(conn: sqlite3.Connection, source_id: int, target_id: int) -> bool:
    """Make ``source_id`` follow ``target_id``.

    Returns True if a new edge was created, False if it already existed.
    """
    if source_id == target_id:
        raise ValidationError("Users cannot follow themselves")
    cursor = conn.execute(
        "INSERT OR IGNORE INTO relationships (user_id, follower_id) VALUES (?, ?)",
        (target_id, source_id),
    )
    return cursor.rowcount > 0


def delete_follow(conn: sqlite3.Connection, source_id: int, target_id: int) -> bool:
    """Remove a follow edge. Returns True if one was removed."""
    cursor = conn.execute(
        "DELETE FROM relationships WHERE user_id = ? AND follower_id = ?",
        (target_id, source_id),
    )
    return cursor.rowcount > 0


def is_following(conn: sqlite3.Connection, source_id: int, target_id: int) -> bool:
    row = conn.execute(
        "SELECT 1 FROM relationships WHERE user_id = ? AND follower_id = ?",
        (target_id, source_id),
    ).fetchone()
    return row is not None


def list_followed(conn: sqlite3.Connection, user_id: int) -> list[User]:
    """Users that ``user_id`` follows."""
    cursor = conn.execute(
        """
        SELECT u.* FROM users u
        JOIN relationships r ON r.user_id = u.id
        WHERE r.follower_id = ?
        ORDER BY u.nickname ASC
        """,
        (user_id,),
    )
    return [_row_to_user(row) for row in cursor.fetchall()]


def list_followers(conn: sqlite3.Connection, user_id: int) -> list[User]:
    """Users that follow ``user_id``."""
    cursor = conn.execute(
        """
        SELECT u.* FROM users u
        JOIN relationships r ON r.follower_id = u.id
        WHERE r.user_id = ?
        ORDER BY u.nickname ASC
        """,
        (user_id,),
    )
    return [_row_to_user(row) for row in cursor.fetchall()]


def list_friends(conn: sqlite3.Connection, user_id: int) -> list[User]:
    """Users that ``user_id`` follows and who follow ``user_id`` back."""
    cursor = conn.execute(
        """
        SELECT u.* FROM users u
        JOIN relationships outgoing ON outgoing.user_id = u.id AND outgoing.follower_id = ?
        JOIN relationships incoming ON incoming.follower_id = u.id AND incoming.user_id = ?
        ORDER BY u.nickname ASC
        """,
        (user_id, user_id),
    )
    return [_row_to_user(row) for row in cursor.fetchall()]
