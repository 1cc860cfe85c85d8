"""Shared CLI utilities."""

import re
import sqlite3
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from rich.markup import escape
from rich.table import Table

from ..config import get_database_path
from ..db import get_connection, get_user_by_nickname, init_db
from ..models import Status, User
from ..time_utils import time_ago_in_words
from ._console import console

_ANCHOR_TAG_RE = re.compile(r"</?a\b[^>]*>", re.IGNORECASE)


def fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


@contextmanager
def open_db() -> Iterator[sqlite3.Connection]:
    """Open the configured database, creating it on first use."""
    db_path = get_database_path()
    if not db_path.exists():
        init_db(db_path)
    with get_connection(db_path) as conn:
        yield conn


def require_user(conn: sqlite3.Connection, nickname: str) -> User:
    user = get_user_by_nickname(conn, nickname.lstrip("@"))
    if user is None:
        fail(f"No user named @{nickname.lstrip('@')}")
    return user


def plain_text(text: str) -> str:
    """Drop anchor tags, keeping the linked text."""
    return _ANCHOR_TAG_RE.sub("", text)


def print_statuses(statuses: list[Status], title: str | None = None) -> None:
    if not statuses:
        console.print("No statuses found.")
        return

    table = Table(show_header=True, title=title)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("From", style="cyan")
    table.add_column("To", style="magenta")
    table.add_column("Status")
    table.add_column("When", style="dim")

    for s in statuses:
        table.add_row(
            str(s.id),
            f"@{s.owner_nickname}" if s.owner_nickname else str(s.owner_id),
            f"@{s.recipient_nickname}" if s.recipient_nickname else "",
            escape(plain_text(s.text)),
            time_ago_in_words(s.created_at),
        )

    console.print(table)


def print_users(users: list[User], title: str | None = None) -> None:
    if not users:
        console.print("No users found.")
        return

    table = Table(show_header=True, title=title)
    table.add_column("Nickname", style="cyan")
    table.add_column("Name")
    table.add_column("Location")

    for u in users:
        table.add_row(f"@{u.nickname}", escape(u.formatted_name or ""), escape(u.location or ""))

    console.print(table)
