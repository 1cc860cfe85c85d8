"""Pydantic models for the tweetclone application."""

from __future__ import annotations

from .api import (
    StatusResponse,
    SubmissionResponse,
    TimelineResponse,
    UserListResponse,
    UserResponse,
)
from .config import (
    FollowConfig,
    PathsConfig,
    ShortenerConfig,
    StatusesConfig,
    TimelineConfig,
    TweetcloneConfig,
    WebConfig,
)
from .records import Status, User

__all__ = [
    "FollowConfig",
    "PathsConfig",
    "ShortenerConfig",
    "Status",
    "StatusResponse",
    "StatusesConfig",
    "SubmissionResponse",
    "TimelineConfig",
    "TimelineResponse",
    "TweetcloneConfig",
    "User",
    "UserListResponse",
    "UserResponse",
    "WebConfig",
]
