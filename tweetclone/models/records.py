"""Pydantic models for stored users and statuses."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 — Pydantic needs this at runtime

from pydantic import BaseModel


class User(BaseModel):
    """A registered user. ``nickname`` is unique and never changes once set."""

    id: int
    nickname: str
    email: str | None = None
    identifier: str | None = None
    provider: str | None = None
    formatted_name: str | None = None
    photo_url: str | None = None
    location: str | None = None
    description: str | None = None


class Status(BaseModel):
    """A posted message. A non-null ``recipient_id`` makes it a direct message."""

    id: int
    owner_id: int
    recipient_id: int | None = None
    text: str
    created_at: datetime
    owner_nickname: str | None = None
    recipient_nickname: str | None = None

    @property
    def is_direct(self) -> bool:
        return self.recipient_id is not None
