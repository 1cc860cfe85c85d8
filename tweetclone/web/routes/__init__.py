"""Route modules for the tweetclone web API."""

from . import messages, statuses, users

__all__ = ["statuses", "users", "messages"]
