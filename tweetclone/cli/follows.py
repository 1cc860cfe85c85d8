"""Follow graph commands."""

import rich_click as click

from ..db import delete_follow, list_followed, list_followers, list_friends, transaction
from ..errors import TweetcloneError
from ._console import console
from ._helpers import fail, open_db, print_users, require_user


@click.command()
@click.argument("nickname")
def follows(nickname: str):
    """List users NICKNAME follows."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        print_users(list_followed(conn, user.id), title=f"@{user.nickname} follows")


@click.command()
@click.argument("nickname")
def followers(nickname: str):
    """List users following NICKNAME."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        print_users(list_followers(conn, user.id), title=f"Followers of @{user.nickname}")


@click.command()
@click.argument("nickname")
def friends(nickname: str):
    """List users who follow NICKNAME and are followed back."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        print_users(list_friends(conn, user.id), title=f"Friends of @{user.nickname}")


@click.command()
@click.argument("nickname")
@click.argument("target")
def unfollow(nickname: str, target: str):
    """Make NICKNAME stop following TARGET."""
    try:
        with open_db() as conn:
            user = require_user(conn, nickname)
            followed = require_user(conn, target)
            with transaction(conn):
                removed = delete_follow(conn, user.id, followed.id)
    except TweetcloneError as e:
        fail(str(e))

    if removed:
        console.print(f"@{user.nickname} no longer follows @{followed.nickname}")
    else:
        console.print(f"@{user.nickname} was not following @{followed.nickname}")
