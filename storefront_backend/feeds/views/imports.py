# feeds/views/imports.py

"""
ONE-OFF IMPORTS (ADMIN)

POST /api/feeds/import/       {url, category_id?}   fetch + import
POST /api/feeds/import/xml/   {xml, category_id?}   import pasted XML
POST /api/feeds/preview/      {url} | {xml}         parse only, nothing written

category_id is the fallback category for items whose feed category
doesn't match a store category.
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from feeds.serializers import (
    ImportFromUrlSerializer,
    ImportFromXmlSerializer,
    PreviewFeedSerializer,
)
from feeds.services.category_matcher import match_category
from feeds.services.exceptions import FeedError
from feeds.services.fetcher import fetch_feed
from feeds.services.importer import import_from_url, import_from_xml, load_store_categories
from feeds.services.keywords import get_keyword_table
from feeds.services.parser import parse_feed_xml_strict
from feeds.views._errors import feed_error_response
from permissions.roles import CAP_FEEDS_IMPORT, CAP_FEEDS_MANAGE, HasAnyCapability

logger = logging.getLogger(__name__)

_IMPORT_RESPONSES = {
    200: OpenApiResponse(description="Import result"),
    400: OpenApiResponse(description="Validation error / feed empty or unparseable"),
    502: OpenApiResponse(description="Feed could not be fetched"),
}


class _FeedImportPermissionMixin:
    permission_classes = [IsAuthenticated, HasAnyCapability]
    required_any_capabilities = {CAP_FEEDS_MANAGE, CAP_FEEDS_IMPORT}


class ImportFromUrlView(_FeedImportPermissionMixin, APIView):
    @extend_schema(request=ImportFromUrlSerializer, responses=_IMPORT_RESPONSES)
    def post(self, request, *args, **kwargs):
        ser = ImportFromUrlSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            result = import_from_url(data["url"], data.get("category_id"))
        except FeedError as exc:
            logger.warning("Manual import from %s failed: %s", data["url"], exc)
            return feed_error_response(exc)

        logger.info(
            "Manual import from %s: imported %d, skipped %d",
            data["url"],
            result.imported,
            result.skipped,
        )
        return Response(result.to_dict(), status=status.HTTP_200_OK)


class ImportFromXmlView(_FeedImportPermissionMixin, APIView):
    @extend_schema(request=ImportFromXmlSerializer, responses=_IMPORT_RESPONSES)
    def post(self, request, *args, **kwargs):
        ser = ImportFromXmlSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            result = import_from_xml(data["xml"], data.get("category_id"))
        except FeedError as exc:
            return feed_error_response(exc)

        return Response(result.to_dict(), status=status.HTTP_200_OK)


class PreviewFeedView(_FeedImportPermissionMixin, APIView):
    """
    Parse a feed and show where each item would land. Writes nothing.
    """

    @extend_schema(request=PreviewFeedSerializer, responses=_IMPORT_RESPONSES)
    def post(self, request, *args, **kwargs):
        ser = PreviewFeedSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        try:
            raw = fetch_feed(data["url"]) if data.get("url") else data["xml"]
            items = parse_feed_xml_strict(raw)
        except FeedError as exc:
            return feed_error_response(exc)

        categories = load_store_categories()
        names = {c.id: c.name for c in categories}
        table = get_keyword_table()

        payload = []
        for item in items:
            matched_id = match_category(item.feed_category, categories, table)
            row = item.to_dict()
            row["matched_category_id"] = matched_id
            row["matched_category_name"] = names.get(matched_id)
            payload.append(row)

        return Response({"count": len(payload), "items": payload}, status=status.HTTP_200_OK)
