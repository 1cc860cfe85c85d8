"""CLI tests running against a throwaway data directory."""

import pytest
from click.testing import CliRunner

from tweetclone.cli import cli
from tweetclone.config import get_config_path, load_settings


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("TWEETCLONE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    return CliRunner()


@pytest.fixture
def people(runner):
    for nickname in ("alice", "bob"):
        result = runner.invoke(cli, ["users", "add", nickname])
        assert result.exit_code == 0, result.output
    return runner


def test_users_add_and_list(people):
    result = people.invoke(cli, ["users", "list"])

    assert result.exit_code == 0
    assert "@alice" in result.output
    assert "@bob" in result.output


def test_users_add_rejects_duplicate(people):
    result = people.invoke(cli, ["users", "add", "alice"])

    assert result.exit_code == 1
    assert "already taken" in result.output


def test_post_follow_then_timeline(people):
    result = people.invoke(cli, ["post", "bob", "follow alice"])
    assert result.exit_code == 0, result.output
    assert "@bob now follows @alice" in result.output

    result = people.invoke(cli, ["post", "alice", "hello @bob", "--no-shorten"])
    assert result.exit_code == 0, result.output
    assert "Posted status #1: hello @bob" in result.output
    assert "Mentioned: @bob" in result.output

    result = people.invoke(cli, ["timeline", "bob"])
    assert result.exit_code == 0
    assert "hello @bob" in result.output

    result = people.invoke(cli, ["follows", "bob"])
    assert "@alice" in result.output


def test_post_to_unknown_recipient_fails(people):
    result = people.invoke(cli, ["post", "bob", "D ghost hi"])

    assert result.exit_code == 1
    assert "@ghost" in result.output


def test_post_as_unknown_user_fails(people):
    result = people.invoke(cli, ["post", "ghost", "hi"])

    assert result.exit_code == 1
    assert "No user named @ghost" in result.output


def test_post_too_long_fails(people):
    result = people.invoke(cli, ["post", "bob", "x" * 141])

    assert result.exit_code == 1
    assert "limit is 140" in result.output


def test_direct_messages(people):
    result = people.invoke(cli, ["messages", "send", "bob", "alice", "lunch?"])
    assert result.exit_code == 0, result.output
    assert "to @alice" in result.output

    result = people.invoke(cli, ["messages", "list", "alice"])
    assert "lunch?" in result.output

    result = people.invoke(cli, ["messages", "list", "alice", "sent"])
    assert "No statuses found." in result.output

    result = people.invoke(cli, ["public"])
    assert "No statuses found." in result.output


def test_unfollow(people):
    people.invoke(cli, ["post", "bob", "follow alice"])

    result = people.invoke(cli, ["unfollow", "bob", "alice"])
    assert "@bob no longer follows @alice" in result.output

    result = people.invoke(cli, ["unfollow", "bob", "alice"])
    assert "was not following" in result.output


def test_users_show_counts(people):
    people.invoke(cli, ["post", "bob", "follow alice"])
    people.invoke(cli, ["users", "edit", "alice", "--location", "Lisbon"])

    result = people.invoke(cli, ["users", "show", "alice"])

    assert result.exit_code == 0
    assert "Lisbon" in result.output
    assert "Followers: 1" in result.output


def test_config_set_is_used_by_commands(runner):
    result = runner.invoke(cli, ["config", "set", "statuses.max_length", "5"])
    assert result.exit_code == 0

    runner.invoke(cli, ["users", "add", "bob"])
    result = runner.invoke(cli, ["post", "bob", "too long"])

    assert result.exit_code == 1
    assert "limit is 5" in result.output


def test_config_set_rejects_invalid_values(runner):
    result = runner.invoke(cli, ["config", "set", "timeline.page_size", "abc"])

    assert result.exit_code == 1
    assert "timeline.page_size" in result.output
    assert not get_config_path().exists()
    assert load_settings().timeline.page_size == 11


def test_config_set_rejects_unknown_keys(runner):
    result = runner.invoke(cli, ["config", "set", "timeline.bogus", "1"])

    assert result.exit_code == 1
    assert "Unknown setting" in result.output
    assert not get_config_path().exists()
