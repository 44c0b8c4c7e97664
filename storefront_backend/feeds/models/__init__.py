"""
PATH: feeds/models/__init__.py

Feeds models export surface.
"""

from .custom_feed import CustomFeed
from .feed_source import FeedSource

__all__ = [
    "CustomFeed",
    "FeedSource",
]
