"""Posting and reading statuses."""

import rich_click as click

from ..classifier import StatusKind
from ..config import load_settings
from ..db import list_direct_messages, list_mentioned_statuses, list_public_statuses
from ..errors import TweetcloneError
from ..pipeline import classify_and_persist, send_direct_message
from ..shortener import build_shortener
from ..timeline import assemble_timeline
from ._console import console
from ._helpers import fail, open_db, plain_text, print_statuses, require_user


@click.command()
@click.argument("nickname")
@click.argument("text")
@click.option("--no-shorten", is_flag=True, help="Don't call the URL-shortening service")
def post(nickname: str, text: str, no_shorten: bool):
    """Post TEXT as NICKNAME.

    \b
    Text starting with "D <user>" is sent as a direct message;
    "follow <user>" follows that user instead of posting.
    """
    settings = load_settings()
    shorten = None if no_shorten else build_shortener(settings.shortener)

    try:
        with open_db() as conn:
            user = require_user(conn, nickname)
            result = classify_and_persist(
                conn,
                user,
                text,
                shorten=shorten,
                max_length=settings.statuses.max_length,
                follow_case_insensitive=settings.follow.case_insensitive,
            )
    except TweetcloneError as e:
        fail(str(e))

    if not result.ok:
        fail(result.message or result.error.value)

    if result.kind == StatusKind.FOLLOW_COMMAND:
        console.print(f"@{user.nickname} now follows @{result.followed.nickname}")
    elif result.kind == StatusKind.DIRECT_MESSAGE:
        console.print(f"Sent direct message #{result.status.id} to @{result.status.recipient_nickname}")
    else:
        console.print(f"Posted status #{result.status.id}: {plain_text(result.status.text)}", markup=False)

    if result.mentions:
        console.print("Mentioned: " + ", ".join(f"@{u.nickname}" for u in result.mentions))


@click.command()
@click.argument("nickname")
@click.option("--as", "viewer_nickname", help="View the page as this user (defaults to NICKNAME)")
def timeline(nickname: str, viewer_nickname: str | None):
    """Show NICKNAME's page: their statuses, plus those they follow when viewing your own."""
    settings = load_settings()
    with open_db() as conn:
        subject = require_user(conn, nickname)
        viewer = require_user(conn, viewer_nickname) if viewer_nickname else subject
        statuses = assemble_timeline(
            conn,
            viewer,
            subject,
            per_source_limit=settings.timeline.per_source_limit,
            page_size=settings.timeline.page_size,
        )
    print_statuses(statuses, title=f"@{subject.nickname}")


@click.command()
@click.option("--limit", "-n", type=int, default=20, help="Maximum statuses to show")
def public(limit: int):
    """Show the most recent public statuses."""
    with open_db() as conn:
        statuses = list_public_statuses(conn, limit=limit)
    print_statuses(statuses, title="Public timeline")


@click.command()
@click.argument("nickname")
def replies(nickname: str):
    """Show statuses that mention NICKNAME."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        statuses = list_mentioned_statuses(conn, user.id)
    print_statuses(statuses, title=f"Mentions of @{user.nickname}")


@click.group()
def messages():
    """Direct messages."""
    pass


@messages.command("list")
@click.argument("nickname")
@click.argument("direction", type=click.Choice(["received", "sent"]), default="received")
def messages_list(nickname: str, direction: str):
    """List direct messages NICKNAME received or sent."""
    with open_db() as conn:
        user = require_user(conn, nickname)
        statuses = list_direct_messages(conn, user.id, direction)
    label = "sent only to you" if direction == "received" else "you've sent"
    print_statuses(statuses, title=f"Direct messages {label}")


@messages.command("send")
@click.argument("sender")
@click.argument("recipient")
@click.argument("text")
@click.option("--no-shorten", is_flag=True, help="Don't call the URL-shortening service")
def messages_send(sender: str, recipient: str, text: str, no_shorten: bool):
    """Send TEXT from SENDER to RECIPIENT."""
    settings = load_settings()
    shorten = None if no_shorten else build_shortener(settings.shortener)

    try:
        with open_db() as conn:
            user = require_user(conn, sender)
            result = send_direct_message(
                conn,
                user,
                recipient,
                text,
                shorten=shorten,
                max_length=settings.statuses.max_length,
            )
    except TweetcloneError as e:
        fail(str(e))

    if not result.ok:
        fail(result.message or result.error.value)
    console.print(f"Sent direct message #{result.status.id} to @{result.status.recipient_nickname}")
