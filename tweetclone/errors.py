"""Error kinds raised by the tweetclone core."""

from enum import Enum


class TweetcloneError(Exception):
    """Base class for all tweetclone errors."""


class RecipientNotFound(TweetcloneError):
    """A direct message names a handle that does not resolve to a user."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"No user named @{handle} to send a direct message to" if handle else "Missing recipient")


class TargetNotFound(TweetcloneError):
    """A follow command names a handle that does not resolve to a user."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"No user named @{handle} to follow" if handle else "Missing user to follow")


class ValidationError(TweetcloneError):
    """Text length or required-field violation reported by the store."""


class StorageUnavailable(TweetcloneError):
    """The backing store could not be reached or failed mid-operation."""


class ShorteningUnavailable(TweetcloneError):
    """The URL-shortening service failed. Never fatal."""


class ErrorKind(str, Enum):
    """Recoverable failures returned to the caller instead of raised."""

    RECIPIENT_NOT_FOUND = "recipient_not_found"
    TARGET_NOT_FOUND = "target_not_found"
