"""Tests for status text classification."""

import pytest

from tweetclone.classifier import DirectMessage, FollowCommand, PlainPost, StatusKind, classify


def test_direct_message_splits_recipient_and_body():
    command = classify("D alice hello there")

    assert command == DirectMessage(recipient_handle="alice", body="hello there")
    assert command.kind == StatusKind.DIRECT_MESSAGE


def test_direct_message_keeps_body_spacing():
    assert classify("D alice  two  spaces").body == "two  spaces"


def test_direct_message_accepts_at_prefixed_recipient():
    assert classify("D @alice hi").recipient_handle == "alice"


def test_direct_message_without_recipient_has_empty_handle():
    assert classify("D ") == DirectMessage(recipient_handle="", body="")


@pytest.mark.parametrize("text", ["d alice hi", "Dear alice", "D", "Don't panic"])
def test_direct_message_prefix_is_case_sensitive_and_needs_whitespace(text):
    assert classify(text) == PlainPost(body=text)


@pytest.mark.parametrize("text", ["follow alice", "follows alice", "Follows alice", "FOLLOW alice", "Follow @alice"])
def test_follow_command_variants(text):
    command = classify(text)

    assert command == FollowCommand(target_handle="alice")
    assert command.kind == StatusKind.FOLLOW_COMMAND


def test_follow_matching_can_be_restricted_to_leading_capital():
    assert classify("Follows alice", follow_case_insensitive=False) == FollowCommand(target_handle="alice")
    assert classify("FOLLOW alice", follow_case_insensitive=False) == PlainPost(body="FOLLOW alice")


@pytest.mark.parametrize("text", ["followers are great", "I follow alice", "follow"])
def test_follow_needs_leading_keyword_and_whitespace(text):
    assert classify(text) == PlainPost(body=text)


def test_classification_is_deterministic():
    assert classify("D bob yo") == classify("D bob yo")
