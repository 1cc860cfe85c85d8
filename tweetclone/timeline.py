"""Assemble the statuses shown on a user's page."""

import sqlite3

from .db import list_followed, list_own_statuses, storage_errors
from .models import Status, User

PER_SOURCE_LIMIT = 10
PAGE_SIZE = 11


def assemble_timeline(
    conn: sqlite3.Connection,
    viewer: User,
    subject: User | None = None,
    per_source_limit: int = PER_SOURCE_LIMIT,
    page_size: int = PAGE_SIZE,
) -> list[Status]:
    """
    Statuses to show ``viewer`` on ``subject``'s page, newest first.

    The subject's own public statuses are always included. When viewers look
    at their own page (``subject`` is None or the viewer), the public statuses
    of everyone they follow are merged in as well.

    Each source contributes at most ``per_source_limit`` statuses before the
    merge, so the result is the top ``page_size`` of those candidates rather
    than of every status in the store. Read failures raise
    ``StorageUnavailable``.
    """
    subject = subject or viewer
    with storage_errors():
        statuses = list_own_statuses(conn, subject.id, exclude_direct=True, limit=per_source_limit)

        if subject.id == viewer.id:
            for followed in list_followed(conn, viewer.id):
                statuses += list_own_statuses(conn, followed.id, exclude_direct=True, limit=per_source_limit)

    statuses.sort(key=lambda s: (s.created_at, s.id), reverse=True)
    return statuses[:page_size]
