"""Status CRUD and listing operations."""

import sqlite3
from datetime import datetime, timezone
from typing import Literal

from ..errors import ValidationError
from ..models import Status
from .users import get_user_by_id

DEFAULT_MAX_LENGTH = 140

STATUS_SELECT = """
    SELECT s.id, s.owner_id, s.recipient_id, s.text, s.created_at,
           o.nickname AS owner_nickname, r.nickname AS recipient_nickname
    FROM statuses s
    JOIN users o ON o.id = s.owner_id
    LEFT JOIN users r ON r.id = s.recipient_id
"""


def format_timestamp(value: datetime) -> str:
    """Serialize a timestamp so that string order matches time order."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def row_to_status(row: sqlite3.Row) -> Status:
    return Status(
        id=row["id"],
        owner_id=row["owner_id"],
        recipient_id=row["recipient_id"],
        text=row["text"],
        created_at=parse_timestamp(row["created_at"]),
        owner_nickname=row["owner_nickname"],
        recipient_nickname=row["recipient_nickname"],
    )


def create_status(
    conn: sqlite3.Connection,
    owner_id: int,
    text: str,
    created_at: datetime | None = None,
    recipient_id: int | None = None,
    raw_text: str | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Status:
    """Insert a status and return it with its assigned id.

    ``text`` is what gets stored (possibly annotated markup); the length bound
    applies to ``raw_text`` when given, i.e. to what the user typed.

    Raises ValidationError if the owner or recipient is missing, or the text
    is empty or too long.
    """
    owner = get_user_by_id(conn, owner_id)
    if owner is None:
        raise ValidationError(f"Status owner {owner_id} does not exist")

    recipient = None
    if recipient_id is not None:
        recipient = get_user_by_id(conn, recipient_id)
        if recipient is None:
            raise ValidationError(f"Status recipient {recipient_id} does not exist")

    measured = raw_text if raw_text is not None else text
    if not measured or not measured.strip():
        raise ValidationError("Status text is required")
    if len(measured) > max_length:
        raise ValidationError(f"Status text is {len(measured)} characters; the limit is {max_length}")

    created_at = created_at or datetime.now(timezone.utc)
    cursor = conn.execute(
        "INSERT INTO statuses (owner_id, recipient_id, text, created_at) VALUES (?, ?, ?, ?)",
        (owner_id, recipient_id, text, format_timestamp(created_at)),
    )
    return Status(
        id=cursor.lastrowid,
        owner_id=owner_id,
        recipient_id=recipient_id,
        text=text,
        created_at=parse_timestamp(format_timestamp(created_at)),
        owner_nickname=owner.nickname,
        recipient_nickname=recipient.nickname if recipient else None,
    )


def get_status(conn: sqlite3.Connection, status_id: int) -> Status | None:
    row = conn.execute(f"{STATUS_SELECT} WHERE s.id = ?", (status_id,)).fetchone()
    return row_to_status(row) if row else None


def list_own_statuses(
    conn: sqlite3.Connection,
    user_id: int,
    exclude_direct: bool = True,
    limit: int | None = 10,
) -> list[Status]:
    """Statuses owned by a user, most recent first."""
    conditions = ["s.owner_id = ?"]
    if exclude_direct:
        conditions.append("s.recipient_id IS NULL")

    limit_clause = f"LIMIT {int(limit)}" if limit else ""
    cursor = conn.execute(
        f"""
        {STATUS_SELECT}
        WHERE {" AND ".join(conditions)}
        ORDER BY s.created_at DESC, s.id DESC
        {limit_clause}
        """,
        (user_id,),
    )
    return [row_to_status(row) for row in cursor.fetchall()]


def list_public_statuses(conn: sqlite3.Connection, limit: int = 20) -> list[Status]:
    """Every non-direct status, most recent first."""
    cursor = conn.execute(
        f"""
        {STATUS_SELECT}
        WHERE s.recipient_id IS NULL
        ORDER BY s.created_at DESC, s.id DESC
        LIMIT ?
        """,
        (limit,),
    )
    return [row_to_status(row) for row in cursor.fetchall()]


def list_direct_messages(
    conn: sqlite3.Connection,
    user_id: int,
    direction: Literal["received", "sent"] = "received",
) -> list[Status]:
    """Direct messages sent to a user, or sent by them."""
    if direction == "received":
        where = "s.recipient_id = ?"
    elif direction == "sent":
        where = "s.owner_id = ? AND s.recipient_id IS NOT NULL"
    else:
        raise ValueError(f"Unknown direction: {direction!r}")

    cursor = conn.execute(
        f"""
        {STATUS_SELECT}
        WHERE {where}
        ORDER BY s.created_at DESC, s.id DESC
        """,
        (user_id,),
    )
    return [row_to_status(row) for row in cursor.fetchall()]


def count_direct_messages(conn: sqlite3.Connection, user_id: int) -> int:
    """Count direct messages a user has sent plus those sent to them."""
    row = conn.execute(
        """
        SELECT COUNT(*) FROM statuses
        WHERE (owner_id = ? AND recipient_id IS NOT NULL)
           OR recipient_id = ?
        """,
        (user_id, user_id),
    ).fetchone()
    return row[0]
