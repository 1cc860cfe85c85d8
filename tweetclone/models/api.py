"""Pydantic models for API responses."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 — Pydantic needs this at runtime

from pydantic import BaseModel

from .records import Status, User


class StatusResponse(BaseModel):
    """JSON shape of a single status."""

    id: int
    text: str
    created_at: datetime
    owner: int
    owner_nickname: str | None = None
    recipient: int | None = None
    recipient_nickname: str | None = None

    @classmethod
    def from_status(cls, status: Status) -> StatusResponse:
        return cls(
            id=status.id,
            text=status.text,
            created_at=status.created_at,
            owner=status.owner_id,
            owner_nickname=status.owner_nickname,
            recipient=status.recipient_id,
            recipient_nickname=status.recipient_nickname,
        )


class UserResponse(BaseModel):
    """Public profile fields of a user."""

    id: int
    nickname: str
    formatted_name: str | None = None
    photo_url: str | None = None
    location: str | None = None
    description: str | None = None

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(
            id=user.id,
            nickname=user.nickname,
            formatted_name=user.formatted_name,
            photo_url=user.photo_url,
            location=user.location,
            description=user.description,
        )


class SubmissionResponse(BaseModel):
    """Outcome of posting status text."""

    kind: str
    status: StatusResponse | None = None
    followed: UserResponse | None = None
    error: str | None = None


class TimelineResponse(BaseModel):
    """A page of statuses, newest first."""

    statuses: list[StatusResponse]
    count: int


class UserListResponse(BaseModel):
    """A list of users."""

    users: list[UserResponse]
    count: int
