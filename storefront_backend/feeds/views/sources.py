# feeds/views/sources.py

"""
FEED SOURCE ADMIN API

- CRUD:  /api/feeds/sources/
- Run:   POST /api/feeds/sources/<id>/run/
         Imports now and records the outcome on the source exactly like a
         scheduler tick would. Returns the ImportResult.
- Tick:  POST /api/feeds/sources/run-due/
         Runs one scheduler pass synchronously (all due, enabled sources).
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from feeds.models import FeedSource
from feeds.serializers import FeedSourceSerializer
from feeds.services.exceptions import FeedError
from feeds.services.runner import run_feed_source
from feeds.services.scheduler import FeedScheduler
from feeds.views._errors import feed_error_response
from permissions.roles import CAP_FEEDS_MANAGE, HasCapability

logger = logging.getLogger(__name__)


class FeedSourceViewSet(viewsets.ModelViewSet):
    serializer_class = FeedSourceSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_FEEDS_MANAGE
    pagination_class = None

    def get_queryset(self):
        return FeedSource.objects.select_related("category").order_by("id")

    @extend_schema(
        request=None,
        responses={
            200: OpenApiResponse(description="Import result"),
            400: OpenApiResponse(description="Feed empty / unparseable"),
            502: OpenApiResponse(description="Feed could not be fetched"),
            500: OpenApiResponse(description="Unexpected import failure"),
        },
    )
    @action(detail=True, methods=["post"], url_path="run")
    def run(self, request, pk=None):
        source = self.get_object()

        try:
            _, result = run_feed_source(source, raise_errors=True)
        except FeedError as exc:
            return feed_error_response(exc)
        except Exception as exc:
            logger.exception("%s: manual import failed", source.name)
            return Response(
                {"detail": f"Import failed: {exc}"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(result.to_dict(), status=status.HTTP_200_OK)

    @extend_schema(request=None, responses={200: OpenApiResponse(description="Per-source outcomes")})
    @action(detail=False, methods=["post"], url_path="run-due")
    def run_due(self, request):
        outcomes = FeedScheduler().run_once()
        return Response([o.to_dict() for o in outcomes], status=status.HTTP_200_OK)
