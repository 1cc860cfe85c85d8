"""Pydantic models for tweetclone configuration."""

from __future__ import annotations

from pydantic import BaseModel


class StatusesConfig(BaseModel):
    """Status text limits."""

    max_length: int = 140


class TimelineConfig(BaseModel):
    """Timeline assembly limits."""

    per_source_limit: int = 10
    page_size: int = 11


class ShortenerConfig(BaseModel):
    """URL-shortening service configuration."""

    enabled: bool = True
    api_url: str = "http://tinyurl.com/api-create.php"
    timeout_seconds: float = 2.0
    cache_size: int = 1024


class FollowConfig(BaseModel):
    """Follow command parsing."""

    case_insensitive: bool = True


class PathsConfig(BaseModel):
    """Paths configuration."""

    data_dir: str | None = None


class WebConfig(BaseModel):
    """Web API configuration."""

    user_header: str = "X-Tweetclone-User"


class TweetcloneConfig(BaseModel):
    """Top-level tweetclone configuration."""

    statuses: StatusesConfig = StatusesConfig()
    timeline: TimelineConfig = TimelineConfig()
    shortener: ShortenerConfig = ShortenerConfig()
    follow: FollowConfig = FollowConfig()
    paths: PathsConfig = PathsConfig()
    web: WebConfig = WebConfig()
