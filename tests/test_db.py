"""Tests for database operations."""

import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from tweetclone.db import (
    count_direct_messages,
    create_follow,
    create_mention,
    create_status,
    create_user,
    delete_follow,
    get_connection,
    get_status,
    get_user_by_nickname,
    init_db,
    list_direct_messages,
    list_followed,
    list_followers,
    list_friends,
    list_mentioned_statuses,
    list_public_statuses,
    list_users,
    transaction,
    update_profile,
)
from tweetclone.errors import StorageUnavailable, ValidationError


def test_init_db_is_idempotent(db_path):
    init_db(db_path)

    with get_connection(db_path) as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}

    assert {"users", "statuses", "relationships", "mentions"} <= tables


def test_foreign_keys_are_enforced(conn):
    with pytest.raises(sqlite3.IntegrityError):
        conn.execute("INSERT INTO mentions (user_id, status_id) VALUES (1, 1)")


class TestUsers:
    def test_lookup_is_exact(self, conn, make_user):
        make_user("Bob")

        assert get_user_by_nickname(conn, "Bob").nickname == "Bob"
        assert get_user_by_nickname(conn, "bob") is None
        assert get_user_by_nickname(conn, "") is None

    def test_duplicate_nickname_rejected(self, conn, make_user):
        make_user("bob")

        with pytest.raises(ValidationError, match="already taken"):
            create_user(conn, "bob")

    @pytest.mark.parametrize("nickname", ["", "-bob", "bob.", "has space", "@bob"])
    def test_invalid_nickname_rejected(self, conn, nickname):
        with pytest.raises(ValidationError):
            create_user(conn, nickname)

    def test_nickname_cannot_change(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(ValidationError):
            update_profile(conn, bob.id, nickname="robert")

        with pytest.raises(sqlite3.DatabaseError):
            conn.execute("UPDATE users SET nickname = 'robert' WHERE id = ?", (bob.id,))

    def test_update_profile_fields(self, conn, make_user):
        bob = make_user("bob")

        updated = update_profile(conn, bob.id, nickname="bob", location="Berlin", description="hi")
        conn.commit()

        assert updated.location == "Berlin"
        assert get_user_by_nickname(conn, "bob").description == "hi"

    def test_update_profile_rejects_unknown_fields(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(ValidationError, match="Unknown"):
            update_profile(conn, bob.id, karma=5)

    def test_list_users_sorted(self, conn, make_user):
        for name in ("carol", "alice", "bob"):
            make_user(name)

        assert [u.nickname for u in list_users(conn)] == ["alice", "bob", "carol"]


class TestStatuses:
    def test_create_and_get(self, conn, make_user):
        bob = make_user("bob")
        when = datetime(2026, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)

        status = create_status(conn, bob.id, "hello", created_at=when)
        conn.commit()

        stored = get_status(conn, status.id)
        assert stored.created_at == when
        assert stored.owner_nickname == "bob"
        assert stored.recipient_nickname is None

    def test_owner_must_exist(self, conn):
        with pytest.raises(ValidationError):
            create_status(conn, 999, "hello")

    def test_recipient_must_exist(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(ValidationError):
            create_status(conn, bob.id, "hello", recipient_id=999)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_text_rejected(self, conn, make_user, text):
        bob = make_user("bob")

        with pytest.raises(ValidationError):
            create_status(conn, bob.id, text)

    def test_exactly_max_length_is_accepted(self, conn, make_user):
        bob = make_user("bob")

        assert create_status(conn, bob.id, "x" * 140).text == "x" * 140

    def test_created_at_is_immutable(self, conn, make_user):
        bob = make_user("bob")
        status = create_status(conn, bob.id, "hello")
        conn.commit()

        with pytest.raises(sqlite3.DatabaseError):
            conn.execute("UPDATE statuses SET created_at = '2000-01-01' WHERE id = ?", (status.id,))

    def test_public_listing_excludes_direct_messages(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        create_status(conn, bob.id, "first", created_at=base)
        create_status(conn, bob.id, "private", created_at=base + timedelta(minutes=1), recipient_id=alice.id)
        create_status(conn, alice.id, "second", created_at=base + timedelta(minutes=2))
        conn.commit()

        assert [s.text for s in list_public_statuses(conn)] == ["second", "first"]

    def test_direct_message_directions(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")
        create_status(conn, bob.id, "to alice", recipient_id=alice.id)
        create_status(conn, alice.id, "to bob", recipient_id=bob.id)
        create_status(conn, alice.id, "public")
        conn.commit()

        assert [s.text for s in list_direct_messages(conn, bob.id, "received")] == ["to bob"]
        assert [s.text for s in list_direct_messages(conn, bob.id, "sent")] == ["to alice"]
        assert count_direct_messages(conn, bob.id) == 2
        assert count_direct_messages(conn, alice.id) == 2

        with pytest.raises(ValueError):
            list_direct_messages(conn, bob.id, "sideways")


class TestRelationships:
    def test_follow_is_idempotent(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")

        assert create_follow(conn, bob.id, alice.id) is True
        assert create_follow(conn, bob.id, alice.id) is False
        conn.commit()

        assert list_followed(conn, bob.id) == [alice]
        assert list_followers(conn, alice.id) == [bob]
        assert list_followers(conn, bob.id) == []

    def test_self_follow_rejected(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(ValidationError):
            create_follow(conn, bob.id, bob.id)

    def test_friends_are_mutual_follows(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")
        carol = make_user("carol")
        create_follow(conn, bob.id, alice.id)
        create_follow(conn, alice.id, bob.id)
        create_follow(conn, bob.id, carol.id)
        conn.commit()

        assert list_friends(conn, bob.id) == [alice]
        assert list_friends(conn, carol.id) == []

    def test_unfollow(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")
        create_follow(conn, bob.id, alice.id)

        assert delete_follow(conn, bob.id, alice.id) is True
        assert delete_follow(conn, bob.id, alice.id) is False
        assert list_followed(conn, bob.id) == []


class TestMentions:
    def test_replies_lists_mentioning_statuses(self, conn, make_user):
        bob = make_user("bob")
        alice = make_user("alice")
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        older = create_status(conn, alice.id, "hi @bob", created_at=base)
        newer = create_status(conn, alice.id, "again @bob", created_at=base + timedelta(hours=1))
        create_status(conn, alice.id, "nothing to see")
        assert create_mention(conn, bob.id, older.id) is True
        assert create_mention(conn, bob.id, older.id) is False
        create_mention(conn, bob.id, newer.id)
        conn.commit()

        assert [s.id for s in list_mentioned_statuses(conn, bob.id)] == [newer.id, older.id]


class TestTransaction:
    def test_commits_on_success(self, db_path, conn, make_user):
        bob = make_user("bob")

        with transaction(conn):
            create_status(conn, bob.id, "kept")

        with get_connection(db_path) as other:
            assert other.execute("SELECT COUNT(*) FROM statuses").fetchone()[0] == 1

    def test_rolls_back_and_maps_storage_errors(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(StorageUnavailable):
            with transaction(conn):
                create_status(conn, bob.id, "lost")
                raise sqlite3.OperationalError("disk full")

        assert conn.execute("SELECT COUNT(*) FROM statuses").fetchone()[0] == 0

    def test_maps_constraint_violations_to_validation_errors(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(ValidationError):
            with transaction(conn):
                create_status(conn, bob.id, "lost")
                conn.execute("INSERT INTO relationships (user_id, follower_id) VALUES (?, ?)", (bob.id, bob.id))

        assert conn.execute("SELECT COUNT(*) FROM statuses").fetchone()[0] == 0

    def test_other_errors_propagate_after_rollback(self, conn, make_user):
        bob = make_user("bob")

        with pytest.raises(RuntimeError):
            with transaction(conn):
                create_status(conn, bob.id, "lost")
                raise RuntimeError("boom")

        assert conn.execute("SELECT COUNT(*) FROM statuses").fetchone()[0] == 0
