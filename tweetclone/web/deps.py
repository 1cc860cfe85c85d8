"""Request helpers shared by the route modules."""

import sqlite3

from fastapi import HTTPException, Request

from ..db import get_user_by_nickname, storage_errors
from ..models import User


def current_user(request: Request, conn: sqlite3.Connection) -> User:
    """The acting user, named by the trusted identity header set upstream."""
    header = request.app.state.settings.web.user_header
    nickname = request.headers.get(header)
    if not nickname:
        raise HTTPException(status_code=401, detail=f"Missing {header} header")
    with storage_errors():
        user = get_user_by_nickname(conn, nickname)
    if user is None:
        raise HTTPException(status_code=401, detail=f"Unknown user @{nickname}")
    return user


def user_or_404(conn: sqlite3.Connection, nickname: str) -> User:
    with storage_errors():
        user = get_user_by_nickname(conn, nickname.lstrip("@"))
    if user is None:
        raise HTTPException(status_code=404, detail=f"No user named @{nickname.lstrip('@')}")
    return user
