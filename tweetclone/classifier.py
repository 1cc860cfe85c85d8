"""Decide whether submitted status text is a post, a direct message or a follow command."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class StatusKind(str, Enum):
    POST = "post"
    DIRECT_MESSAGE = "direct_message"
    FOLLOW_COMMAND = "follow_command"


@dataclass(frozen=True)
class PlainPost:
    body: str

    kind = StatusKind.POST


@dataclass(frozen=True)
class DirectMessage:
    recipient_handle: str
    body: str

    kind = StatusKind.DIRECT_MESSAGE


@dataclass(frozen=True)
class FollowCommand:
    target_handle: str

    kind = StatusKind.FOLLOW_COMMAND


Command = PlainPost | DirectMessage | FollowCommand

# "D" is case-sensitive: "d " and "Dear" start ordinary posts.
_DIRECT_RE = re.compile(r"D\s")
_FOLLOW_RE = re.compile(r"[Ff]ollows?\s")
_FOLLOW_RE_ANY_CASE = re.compile(r"follows?\s", re.IGNORECASE)


def _strip_handle(token: str) -> str:
    return token[1:] if token.startswith("@") else token


def classify(text: str, follow_case_insensitive: bool = True) -> Command:
    """
    Classify raw status text.

    - ``D <handle> <body>`` is a direct message to ``handle``.
    - ``follow <handle>`` / ``follows <handle>`` makes the author follow
      ``handle``. Any casing is accepted unless ``follow_case_insensitive`` is
      False, in which case only the first letter may be capitalized.
    - Anything else is a plain post.

    Handles may be written with a leading ``@``. A missing handle yields an
    empty ``recipient_handle`` / ``target_handle``, which never resolves.
    """
    follow_re = _FOLLOW_RE_ANY_CASE if follow_case_insensitive else _FOLLOW_RE

    if _DIRECT_RE.match(text):
        parts = text.split(maxsplit=2)
        handle = _strip_handle(parts[1]) if len(parts) > 1 else ""
        body = parts[2].strip() if len(parts) > 2 else ""
        return DirectMessage(recipient_handle=handle, body=body)

    if follow_re.match(text):
        parts = text.split()
        handle = _strip_handle(parts[1]) if len(parts) > 1 else ""
        return FollowCommand(target_handle=handle)

    return PlainPost(body=text)
