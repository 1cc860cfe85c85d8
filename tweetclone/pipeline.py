"""Classify submitted status text, then persist the status, its mentions or a follow edge."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from functools import partial

from .annotate import Annotation, annotate
from .classifier import DirectMessage, FollowCommand, PlainPost, StatusKind, classify
from .db import (
    create_follow,
    create_mention,
    create_status,
    get_user_by_nickname,
    storage_errors,
    transaction,
)
from .db.statuses import DEFAULT_MAX_LENGTH
from .errors import ErrorKind, RecipientNotFound, TargetNotFound
from .models import Status, User
from .shortener import Shortener

log = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    """Outcome of one submission. ``error`` is set only for recoverable failures."""

    kind: StatusKind
    status: Status | None = None
    followed: User | None = None
    mentions: list[User] = field(default_factory=list)
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def record_status(
    conn: sqlite3.Connection,
    owner_id: int,
    annotation: Annotation,
    raw_text: str,
    recipient_id: int | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    created_at: datetime | None = None,
) -> Status:
    """Persist a status and then one mention edge per mentioned user, atomically.

    If anything fails nothing is written: neither the status nor any of its
    mention edges.
    """
    with transaction(conn):
        status = create_status(
            conn,
            owner_id=owner_id,
            text=annotation.text,
            created_at=created_at,
            recipient_id=recipient_id,
            raw_text=raw_text,
            max_length=max_length,
        )
        for user in annotation.mentions:
            create_mention(conn, user.id, status.id)
    log.debug("Stored status %s with %d mention(s)", status.id, len(annotation.mentions))
    return status


def classify_and_persist(
    conn: sqlite3.Connection,
    current_user: User,
    raw_text: str,
    shorten: Shortener | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    follow_case_insensitive: bool = True,
    created_at: datetime | None = None,
) -> SubmissionResult:
    """
    Interpret ``raw_text`` posted by ``current_user`` and apply its effects.

    Unknown recipients or follow targets come back as a result with ``error``
    set and nothing written. ``ValidationError`` and ``StorageUnavailable``
    propagate, with nothing written.
    """
    command = classify(raw_text, follow_case_insensitive=follow_case_insensitive)
    resolve = partial(get_user_by_nickname, conn)
    log.debug("@%s submitted a %s", current_user.nickname, command.kind.value)

    with storage_errors():
        if isinstance(command, FollowCommand):
            target = resolve(command.target_handle)
            if target is None:
                return SubmissionResult(
                    kind=command.kind,
                    error=ErrorKind.TARGET_NOT_FOUND,
                    message=str(TargetNotFound(command.target_handle)),
                )
            with transaction(conn):
                created = create_follow(conn, current_user.id, target.id)
            if created:
                log.info("@%s now follows @%s", current_user.nickname, target.nickname)
            return SubmissionResult(kind=command.kind, followed=target)

        if isinstance(command, DirectMessage):
            recipient = resolve(command.recipient_handle)
            if recipient is None:
                return SubmissionResult(
                    kind=command.kind,
                    error=ErrorKind.RECIPIENT_NOT_FOUND,
                    message=str(RecipientNotFound(command.recipient_handle)),
                )
            annotation = annotate(command.body, resolve, shorten)
            status = record_status(
                conn,
                current_user.id,
                annotation,
                raw_text=command.body,
                recipient_id=recipient.id,
                max_length=max_length,
                created_at=created_at,
            )
            return SubmissionResult(kind=command.kind, status=status, mentions=annotation.mentions)

        if isinstance(command, PlainPost):
            annotation = annotate(command.body, resolve, shorten)
            status = record_status(
                conn,
                current_user.id,
                annotation,
                raw_text=command.body,
                max_length=max_length,
                created_at=created_at,
            )
            return SubmissionResult(kind=command.kind, status=status, mentions=annotation.mentions)

    raise TypeError(f"Unhandled command: {command!r}")


def send_direct_message(
    conn: sqlite3.Connection,
    sender: User,
    recipient_handle: str,
    text: str,
    shorten: Shortener | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> SubmissionResult:
    """Send ``text`` to ``recipient_handle`` without the ``D`` prefix."""
    resolve = partial(get_user_by_nickname, conn)
    handle = recipient_handle.lstrip("@")

    with storage_errors():
        recipient = resolve(handle)
        if recipient is None:
            return SubmissionResult(
                kind=StatusKind.DIRECT_MESSAGE,
                error=ErrorKind.RECIPIENT_NOT_FOUND,
                message=str(RecipientNotFound(handle)),
            )
        annotation = annotate(text, resolve, shorten)
        status = record_status(
            conn,
            sender.id,
            annotation,
            raw_text=text,
            recipient_id=recipient.id,
            max_length=max_length,
        )
    return SubmissionResult(kind=StatusKind.DIRECT_MESSAGE, status=status, mentions=annotation.mentions)
