"""User CRUD operations."""

import re
import sqlite3
from typing import Any

from ..errors import ValidationError
from ..models import User

# Same character set the annotator recognizes after an "@"
NICKNAME_RE = re.compile(r"^\w(?:[\w.\-]*\w)?$")
_PROFILE_FIELDS = ("email", "formatted_name", "photo_url", "location", "description")


def _row_to_user(row: sqlite3.Row) -> User:
    return User(
        id=row["id"],
        nickname=row["nickname"],
        email=row["email"],
        identifier=row["identifier"],
        provider=row["provider"],
        formatted_name=row["formatted_name"],
        photo_url=row["photo_url"],
        location=row["location"],
        description=row["description"],
    )


def _fetch_user(conn: sqlite3.Connection, column: str, value: Any) -> User | None:
    row = conn.execute(f"SELECT * FROM users WHERE {column} = ?", (value,)).fetchone()
    return _row_to_user(row) if row else None


def get_user_by_nickname(conn: sqlite3.Connection, nickname: str) -> User | None:
    """Find a user by exact nickname match."""
    if not nickname:
        return None
    return _fetch_user(conn, "nickname", nickname)


def get_user_by_id(conn: sqlite3.Connection, user_id: int) -> User | None:
    return _fetch_user(conn, "id", user_id)


def get_user_by_identifier(conn: sqlite3.Connection, identifier: str) -> User | None:
    """Find a user by external identity-provider reference."""
    return _fetch_user(conn, "identifier", identifier)


def get_user_by_email(conn: sqlite3.Connection, email: str) -> User | None:
    return _fetch_user(conn, "email", email)


def validate_nickname(nickname: str) -> str:
    """Return the nickname unchanged if usable, else raise ValidationError."""
    if not nickname or not NICKNAME_RE.match(nickname):
        raise ValidationError(
            f"Invalid nickname {nickname!r}: use letters, digits, '_', '.' or '-', "
            "starting and ending with a letter or digit"
        )
    return nickname


def create_user(
    conn: sqlite3.Connection,
    nickname: str,
    email: str | None = None,
    identifier: str | None = None,
    provider: str | None = None,
    formatted_name: str | None = None,
    photo_url: str | None = None,
    location: str | None = None,
    description: str | None = None,
) -> User:
    """Insert a user. Raises ValidationError if the nickname is invalid or taken."""
    validate_nickname(nickname)
    if get_user_by_nickname(conn, nickname) is not None:
        raise ValidationError(f"Nickname @{nickname} is already taken")

    cursor = conn.execute(
        """
        INSERT INTO users (
            nickname, email, identifier, provider, formatted_name, photo_url, location, description
        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        """,
        (nickname, email, identifier, provider, formatted_name, photo_url, location, description),
    )
    return User(
        id=cursor.lastrowid,
        nickname=nickname,
        email=email,
        identifier=identifier,
        provider=provider,
        formatted_name=formatted_name,
        photo_url=photo_url,
        location=location,
        description=description,
    )


def update_profile(conn: sqlite3.Connection, user_id: int, **fields: Any) -> User:
    """Update free-form profile fields.

    ``nickname`` may be passed but must equal the stored one.
    """
    user = get_user_by_id(conn, user_id)
    if user is None:
        raise ValidationError(f"No user with id {user_id}")

    nickname = fields.pop("nickname", None)
    if nickname is not None and nickname != user.nickname:
        raise ValidationError("Nickname cannot be changed once assigned")

    unknown = set(fields) - set(_PROFILE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown profile fields: {', '.join(sorted(unknown))}")

    if fields:
        assignments = ", ".join(f"{name} = ?" for name in fields)
        conn.execute(
            f"UPDATE users SET {assignments} WHERE id = ?",
            (*fields.values(), user_id),
        )

    return user.model_copy(update=fields)


def list_users(conn: sqlite3.Connection, limit: int | None = None) -> list[User]:
    """List users alphabetically by nickname."""
    limit_clause = f"LIMIT {int(limit)}" if limit else ""
    cursor = conn.execute(f"SELECT * FROM users ORDER BY nickname ASC {limit_clause}")
    return [_row_to_user(row) for row in cursor.fetchall()]
