from .custom import CustomFeedViewSet
from .imports import ImportFromUrlView, ImportFromXmlView, PreviewFeedView
from .sources import FeedSourceViewSet

__all__ = [
    "CustomFeedViewSet",
    "FeedSourceViewSet",
    "ImportFromUrlView",
    "ImportFromXmlView",
    "PreviewFeedView",
]
