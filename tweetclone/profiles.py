"""Provision users from an external identity provider's profile payload."""

from __future__ import annotations

import hashlib
import logging
import sqlite3
from typing import Any

from .db import create_user, get_user_by_identifier, transaction
from .errors import ValidationError
from .models import User

log = logging.getLogger(__name__)

GRAVATAR_URL = "http://www.gravatar.com/avatar/"
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def gravatar_url(email: str) -> str:
    """Gravatar image URL for an email (Gravatar serves a default image when unknown)."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{GRAVATAR_URL}{digest}"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


def nickname_from_identifier(identifier: str) -> str:
    """Stable alphanumeric nickname for profiles that don't provide one."""
    digest = hashlib.sha1(identifier.encode("utf-8")).hexdigest()
    return _to_base36(int(digest[:16], 16))


def _formatted_name(profile: dict[str, Any]) -> str | None:
    name = profile.get("name")
    if isinstance(name, dict):
        return name.get("formatted")
    if isinstance(name, str):
        return name
    return None


def provision_user(conn: sqlite3.Connection, profile: dict[str, Any]) -> tuple[User, bool]:
    """
    Return the user for an identity-provider profile, creating it on first login.

    Returns (user, created). Raises ValidationError when the profile has no
    identifier or its nickname is invalid or already taken.
    """
    identifier = profile.get("identifier")
    if not identifier:
        raise ValidationError("Profile has no identifier")

    existing = get_user_by_identifier(conn, identifier)
    if existing is not None:
        return existing, False

    email = profile.get("email")
    nickname = profile.get("nickname") or nickname_from_identifier(identifier)
    photo_url = gravatar_url(email) if email else profile.get("photo")

    with transaction(conn):
        user = create_user(
            conn,
            nickname=nickname,
            email=email,
            identifier=identifier,
            provider=profile.get("providerName"),
            formatted_name=_formatted_name(profile),
            photo_url=photo_url,
        )
    log.info("Provisioned @%s from %s", user.nickname, user.provider or "identity provider")
    return user, True
