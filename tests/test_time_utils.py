"""Tests for relative timestamps."""

from datetime import datetime, timedelta, timezone

import pytest

from tweetclone.time_utils import time_ago_in_words

NOW = datetime(2026, 1, 7, 23, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=10), "less than a minute ago"),
        (timedelta(minutes=3), "less than 5 minutes ago"),
        (timedelta(minutes=10), "less than 15 minutes ago"),
        (timedelta(minutes=20), "less than 30 minutes ago"),
        (timedelta(minutes=45), "more than 30 minutes ago"),
        (timedelta(minutes=90), "more than 1 hour ago"),
        (timedelta(hours=3), "more than 2 hours ago"),
        (timedelta(hours=5), "more than 4 hours ago"),
    ],
)
def test_recent_buckets(delta, expected):
    assert time_ago_in_words(NOW - delta, now=NOW) == expected


def test_old_timestamps_are_absolute():
    timestamp = datetime(2026, 1, 7, 15, 15, tzinfo=timezone.utc)

    assert time_ago_in_words(timestamp - timedelta(days=1), now=NOW) == "03:15 PM 06-Jan-2026"


def test_naive_timestamps_are_treated_as_utc():
    assert time_ago_in_words(datetime(2026, 1, 7, 22, 58), now=NOW) == "less than 5 minutes ago"
