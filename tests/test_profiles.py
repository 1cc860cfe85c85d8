"""Tests for identity-provider user provisioning."""

import hashlib

import pytest

from tweetclone.errors import ValidationError
from tweetclone.profiles import gravatar_url, nickname_from_identifier, provision_user

PROFILE = {
    "identifier": "https://id.example.com/u/42",
    "providerName": "Example ID",
    "preferredUsername": "bobby",
    "nickname": "bob",
    "email": "Bob@Example.com ",
    "name": {"formatted": "Bob Builder"},
}


def test_gravatar_url_uses_normalized_email_hash():
    digest = hashlib.md5(b"bob@example.com").hexdigest()

    assert gravatar_url(" Bob@Example.com") == f"http://www.gravatar.com/avatar/{digest}"


def test_nickname_from_identifier_is_stable_and_valid():
    nickname = nickname_from_identifier("https://id.example.com/u/42")

    assert nickname == nickname_from_identifier("https://id.example.com/u/42")
    assert nickname != nickname_from_identifier("https://id.example.com/u/43")
    assert nickname.isalnum()
    assert nickname == nickname.lower()


def test_first_login_creates_user(conn):
    user, created = provision_user(conn, PROFILE)

    assert created
    assert user.nickname == "bob"
    assert user.formatted_name == "Bob Builder"
    assert user.provider == "Example ID"
    assert user.photo_url == gravatar_url("bob@example.com")


def test_returning_login_finds_existing_user(conn):
    first, _ = provision_user(conn, PROFILE)
    again, created = provision_user(conn, {**PROFILE, "nickname": "somethingelse"})

    assert not created
    assert again.id == first.id
    assert again.nickname == "bob"


def test_missing_nickname_falls_back_to_identifier_hash(conn):
    user, _ = provision_user(conn, {"identifier": "abc", "photo": "http://img.example.com/me.png"})

    assert user.nickname == nickname_from_identifier("abc")
    assert user.photo_url == "http://img.example.com/me.png"


def test_taken_nickname_is_rejected(conn, make_user):
    make_user("bob")

    with pytest.raises(ValidationError):
        provision_user(conn, PROFILE)


def test_profile_without_identifier_is_rejected(conn):
    with pytest.raises(ValidationError):
        provision_user(conn, {"nickname": "bob"})
