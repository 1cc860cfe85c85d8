"""Human-friendly timestamps for status listings."""

from datetime import datetime, timezone


def time_ago_in_words(timestamp: datetime, now: datetime | None = None) -> str:
    """
    Describe how long ago ``timestamp`` was.

    Anything older than eight hours is shown as an absolute time, e.g.
    ``03:15 PM 07-Jan-2026``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    minutes = round(abs((now - timestamp).total_seconds()) / 60)

    if minutes == 0:
        return "less than a minute ago"
    if minutes < 5:
        return "less than 5 minutes ago"
    if minutes < 15:
        return "less than 15 minutes ago"
    if minutes < 30:
        return "less than 30 minutes ago"
    if minutes < 60:
        return "more than 30 minutes ago"
    if minutes < 120:
        return "more than 1 hour ago"
    if minutes < 240:
        return "more than 2 hours ago"
    if minutes < 480:
        return "more than 4 hours ago"
    return timestamp.strftime("%I:%M %p %d-%b-%Y")
