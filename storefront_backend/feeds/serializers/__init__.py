# feeds/serializers/__init__.py

from .custom_feed import CustomFeedSerializer
from .feed_source import FeedSourceSerializer
from .imports import ImportFromUrlSerializer, ImportFromXmlSerializer, PreviewFeedSerializer

__all__ = [
    "CustomFeedSerializer",
    "FeedSourceSerializer",
    "ImportFromUrlSerializer",
    "ImportFromXmlSerializer",
    "PreviewFeedSerializer",
]
