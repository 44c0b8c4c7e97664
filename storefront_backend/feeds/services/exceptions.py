# feeds/services/exceptions.py

"""
FEED SERVICE ERRORS

Centralized domain errors for the feed import pipeline.
"""


class FeedError(Exception):
    """Base exception for all feed pipeline failures."""


class FeedFetchError(FeedError):
    """Raised when a feed URL is invalid, unreachable, or answers non-2xx."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class FeedParseError(FeedError):
    """Raised by the strict parser when the document is not well-formed XML."""


class EmptyFeedError(FeedError):
    """Raised when a feed parses but yields no products."""

    def __init__(self, message: str = "No products found in feed"):
        super().__init__(message)
