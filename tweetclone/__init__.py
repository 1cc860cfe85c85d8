"""Tweetclone - a small micro-blogging core: statuses, follows, mentions and timelines."""

try:
    from importlib.metadata import version

    __version__ = version("tweetclone")
except Exception:
    __version__ = "0.0.0-dev"
