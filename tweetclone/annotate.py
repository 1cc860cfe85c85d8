"""Detect URLs and @-mentions in status text and rewrite them as links."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .errors import ShorteningUnavailable
from .models import User
from .shortener import Shortener

log = logging.getLogger(__name__)

_URL_CHARS = r"[\w/#~:.?+=&%@!\-]"
# Trailing ".", ":", "?" and "-" belong to the sentence, not the URL.
_URL_PATTERN = (
    rf"\b(?:https?|telnet|gopher|file|wais|ftp)://{_URL_CHARS}+?"
    r"(?=[.:?\-]*(?:[^\w/#~:.?+=&%@!\-]|$))"
)
_MENTION_PATTERN = r"(?<!\w)@\w(?:[\w.\-]*\w)?"
_TOKEN_RE = re.compile(rf"(?P<url>{_URL_PATTERN})|(?P<mention>{_MENTION_PATTERN})", re.IGNORECASE)
_ANCHOR_RE = re.compile(r"<a\s[^>]*>.*?</a>", re.IGNORECASE | re.DOTALL)

UserResolver = Callable[[str], User | None]


@dataclass
class Annotation:
    text: str
    mentions: list[User] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)


def url_anchor(url: str) -> str:
    return f"<a href='{url}'>{url}</a>"


def mention_anchor(user: User, token: str) -> str:
    return f"<a href='/{user.nickname}'>{token}</a>"


def _split_markup(text: str) -> Iterator[tuple[str, bool]]:
    """Yield (segment, is_anchor) pairs covering the whole text."""
    position = 0
    for match in _ANCHOR_RE.finditer(text):
        if match.start() > position:
            yield text[position : match.start()], False
        yield match.group(0), True
        position = match.end()
    if position < len(text):
        yield text[position:], False


def annotate(text: str, resolve_user: UserResolver, shorten: Shortener | None = None) -> Annotation:
    """
    Rewrite raw URLs and @-mentions in ``text`` as anchors.

    Rules:
    - URLs are replaced by an anchor to their shortened form. When ``shorten``
      is None or the service fails the URL is left as typed.
    - ``@handle`` becomes a link to the user's page only if ``resolve_user``
      finds an exact nickname match; unknown handles are left untouched.
    - Mentioned users are returned once each, in first-occurrence order.
    - Text already inside an ``<a>`` element is never touched, so annotating
      annotated text is a no-op. This also applies to anchors the author
      typed: ``<a x>@bob</a>`` stays as written and mentions nobody.
    """
    mentions: list[User] = []
    urls: list[str] = []
    mentioned_ids: set[int] = set()
    shortened: dict[str, str | None] = {}
    resolved: dict[str, User | None] = {}

    def _shorten(url: str) -> str | None:
        if url in shortened:
            return shortened[url]
        short = None
        if shorten is not None:
            try:
                short = shorten(url)
            except ShorteningUnavailable as e:
                log.warning("Leaving URL unshortened: %s", e)
        shortened[url] = short
        return short

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if match.group("url"):
            if token not in urls:
                urls.append(token)
            short = _shorten(token)
            return url_anchor(short) if short else token

        handle = token[1:]
        if handle not in resolved:
            resolved[handle] = resolve_user(handle)
        user = resolved[handle]
        if user is None:
            return token
        if user.id not in mentioned_ids:
            mentioned_ids.add(user.id)
            mentions.append(user)
        return mention_anchor(user, token)

    pieces = []
    for segment, is_anchor in _split_markup(text):
        pieces.append(segment if is_anchor else _TOKEN_RE.sub(_replace, segment))

    return Annotation(text="".join(pieces), mentions=mentions, urls=urls)
