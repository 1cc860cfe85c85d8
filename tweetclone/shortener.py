"""URL-shortening client (tinyurl-style ``api-create`` endpoint)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache

import httpx

from .errors import ShorteningUnavailable
from .models import ShortenerConfig

log = logging.getLogger(__name__)

Shortener = Callable[[str], str]

DEFAULT_API_URL = "http://tinyurl.com/api-create.php"
DEFAULT_TIMEOUT_SECONDS = 2.0
DEFAULT_CACHE_SIZE = 1024


class TinyUrlShortener:
    """Shorten URLs through an HTTP endpoint that answers with the short URL as plain text.

    Successful lookups are remembered, up to ``cache_size`` distinct URLs.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
        cache_size: int = DEFAULT_CACHE_SIZE,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self._client = client
        self._lookup = lru_cache(maxsize=cache_size)(self._request)

    def __call__(self, url: str) -> str:
        return self._lookup(url)

    def _request(self, url: str) -> str:
        try:
            if self._client is not None:
                response = self._client.get(self.api_url, params={"url": url}, timeout=self.timeout)
            else:
                response = httpx.get(self.api_url, params={"url": url}, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise ShorteningUnavailable(f"Shortening {url} failed: {e}") from e

        if response.status_code != 200:
            raise ShorteningUnavailable(f"Shortening {url} failed: HTTP {response.status_code}")

        short = response.text.strip()
        if not short.lower().startswith(("http://", "https://")):
            raise ShorteningUnavailable(f"Shortening {url} returned an unusable body")
        return short


def build_shortener(config: ShortenerConfig) -> Shortener | None:
    """Build the configured shortener, or None when shortening is disabled."""
    if not config.enabled:
        log.debug("URL shortening disabled")
        return None
    return TinyUrlShortener(
        api_url=config.api_url,
        timeout=config.timeout_seconds,
        cache_size=config.cache_size,
    )
