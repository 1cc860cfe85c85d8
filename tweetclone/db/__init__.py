"""Database layer for tweetclone (sqlite3)."""

from .connection import get_connection, init_db, storage_errors, transaction
from .mentions import create_mention, list_mentioned_statuses, list_mentioned_users
from .relationships import (
    create_follow,
    delete_follow,
    is_following,
    list_followed,
    list_followers,
    list_friends,
)
from .schema import SCHEMA
from .statuses import (
    count_direct_messages,
    create_status,
    get_status,
    list_direct_messages,
    list_own_statuses,
    list_public_statuses,
)
from .users import (
    create_user,
    get_user_by_email,
    get_user_by_id,
    get_user_by_identifier,
    get_user_by_nickname,
    list_users,
    update_profile,
    validate_nickname,
)

__all__ = [
    "SCHEMA",
    "count_direct_messages",
    "create_follow",
    "create_mention",
    "create_status",
    "create_user",
    "delete_follow",
    "get_connection",
    "get_status",
    "get_user_by_email",
    "get_user_by_id",
    "get_user_by_identifier",
    "get_user_by_nickname",
    "init_db",
    "is_following",
    "list_direct_messages",
    "list_followed",
    "list_followers",
    "list_friends",
    "list_mentioned_statuses",
    "list_mentioned_users",
    "list_own_statuses",
    "list_public_statuses",
    "list_users",
    "storage_errors",
    "transaction",
    "update_profile",
    "validate_nickname",
]
