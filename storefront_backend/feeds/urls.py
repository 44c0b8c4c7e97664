# feeds/urls.py
"""
FEEDS ADMIN API

Base path (mounted in backend/urls.py):
    /api/feeds/

- sources/            CRUD + POST sources/<id>/run/ + POST sources/run-due/
- custom/             CRUD
- import/             POST {url, category_id?}
- import/xml/         POST {xml, category_id?}
- preview/            POST {url} | {xml}
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from feeds.views import (
    CustomFeedViewSet,
    FeedSourceViewSet,
    ImportFromUrlView,
    ImportFromXmlView,
    PreviewFeedView,
)

router = DefaultRouter()
router.register(r"sources", FeedSourceViewSet, basename="feed-sources")
router.register(r"custom", CustomFeedViewSet, basename="custom-feeds")

urlpatterns = [
    path("import/", ImportFromUrlView.as_view(), name="feed-import-url"),
    path("import/xml/", ImportFromXmlView.as_view(), name="feed-import-xml"),
    path("preview/", PreviewFeedView.as_view(), name="feed-preview"),
    path("", include(router.urls)),
]
