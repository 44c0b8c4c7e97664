# feeds/services/fetcher.py

"""
FEED FETCHER

GET a feed URL and return the raw body bytes.

Rules:
- only http/https URLs are fetched; anything else is a FeedFetchError
- non-2xx -> FeedFetchError("Failed to fetch feed: <status>")
- network failures -> FeedFetchError("Failed to fetch feed: <reason>")
- timeout comes from settings.FEED_FETCH_TIMEOUT_SECONDS
"""

from __future__ import annotations

import logging
import socket
from urllib.error import HTTPError, URLError
from urllib.parse import urlparse
from urllib.request import Request, urlopen

from django.conf import settings

from feeds.services.exceptions import FeedFetchError

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/rss+xml, application/atom+xml, application/xml;q=0.9, text/xml;q=0.9, */*;q=0.5"


def _timeout() -> int:
    return int(getattr(settings, "FEED_FETCH_TIMEOUT_SECONDS", 30) or 30)


def _user_agent() -> str:
    return (getattr(settings, "FEED_FETCH_USER_AGENT", "") or "StorefrontFeedImporter/1.0").strip()


def validate_feed_url(url: str) -> str:
    url = (url or "").strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FeedFetchError(f"Invalid feed URL: {url or '(empty)'}")
    return url


def fetch_feed(url: str, *, timeout: int | None = None) -> bytes:
    url = validate_feed_url(url)

    req = Request(
        url,
        headers={
            "User-Agent": _user_agent(),
            "Accept": ACCEPT_HEADER,
        },
        method="GET",
    )

    try:
        with urlopen(req, timeout=timeout or _timeout()) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= int(status) < 300:
                raise FeedFetchError(f"Failed to fetch feed: {status}", status_code=int(status))
            body = resp.read()
    except HTTPError as exc:
        raise FeedFetchError(f"Failed to fetch feed: {exc.code}", status_code=exc.code) from exc
    except URLError as exc:
        raise FeedFetchError(f"Failed to fetch feed: {exc.reason}") from exc
    except (socket.timeout, TimeoutError) as exc:
        raise FeedFetchError("Failed to fetch feed: timed out") from exc
    except OSError as exc:
        raise FeedFetchError(f"Failed to fetch feed: {exc}") from exc
    except ValueError as exc:
        raise FeedFetchError(f"Invalid feed URL: {url}") from exc

    logger.debug("Fetched %d bytes from %s", len(body), url)
    return body
