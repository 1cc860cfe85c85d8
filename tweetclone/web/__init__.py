"""Web API for tweetclone."""

from .app import create_app

__all__ = ["create_app"]
