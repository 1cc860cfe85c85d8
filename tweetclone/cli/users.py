"""User management commands."""

import rich_click as click
from rich.markup import escape

from ..db import (
    count_direct_messages,
    create_user,
    list_followed,
    list_followers,
    list_users,
    transaction,
    update_profile,
)
from ..errors import TweetcloneError
from ._console import console
from ._helpers import fail, open_db, print_users, require_user


@click.group()
def users():
    """Manage users."""
    pass


@users.command("list")
@click.option("--limit", "-n", type=int, default=None, help="Maximum users to show")
def users_list(limit: int | None):
    """List users."""
    with open_db() as conn:
        print_users(list_users(conn, limit=limit))


@users.command("add")
@click.argument("nickname")
@click.option("--email", help="Contact address")
@click.option("--name", "formatted_name", help="Display name")
@click.option("--location", help="Location")
@click.option("--bio", "description", help="Short bio")
def users_add(
    nickname: str,
    email: str | None,
    formatted_name: str | None,
    location: str | None,
    description: str | None,
):
    """Register a user."""
    try:
        with open_db() as conn, transaction(conn):
            user = create_user(
                conn,
                nickname=nickname.lstrip("@"),
                email=email,
                formatted_name=formatted_name,
                location=location,
                description=description,
            )
    except TweetcloneError as e:
        fail(str(e))
    console.print(f"Added @{user.nickname}")


@users.command("edit")
@click.argument("nickname")
@click.option("--email", help="Contact address")
@click.option("--name", "formatted_name", help="Display name")
@click.option("--location", help="Location")
@click.option("--bio", "description", help="Short bio")
def users_edit(
    nickname: str,
    email: str | None,
    formatted_name: str | None,
    location: str | None,
    description: str | None,
):
    """Update a user's profile. Nicknames cannot change."""
    fields = {
        "email": email,
        "formatted_name": formatted_name,
        "location": location,
        "description": description,
    }
    fields = {k: v for k, v in fields.items() if v is not None}
    try:
        with open_db() as conn:
            user = require_user(conn, nickname)
            with transaction(conn):
                update_profile(conn, user.id, **fields)
    except TweetcloneError as e:
        fail(str(e))
    console.print(f"Updated @{user.nickname}")


@users.command("show")
@click.argument("nickname")
def users_show(nickname: str):
    """Show a user's profile."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        following = len(list_followed(conn, user.id))
        followers = len(list_followers(conn, user.id))
        messages = count_direct_messages(conn, user.id)

    console.print(f"[bold cyan]@{user.nickname}[/bold cyan] {escape(user.formatted_name or '')}")
    if user.location:
        console.print(f"  Location:  {escape(user.location)}")
    if user.description:
        console.print(f"  Bio:       {escape(user.description)}")
    if user.email:
        console.print(f"  Email:     {escape(user.email)}")
    console.print(f"  Following: {following}")
    console.print(f"  Followers: {followers}")
    console.print(f"  Messages:  {messages}")
