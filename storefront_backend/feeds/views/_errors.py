# feeds/views/_errors.py

"""
FeedError -> HTTP response mapping shared by the admin feed views.

- FeedFetchError -> 502 (upstream feed broken/unreachable)
- EmptyFeedError / FeedParseError -> 400 (feed content unusable)
"""

from rest_framework import status
from rest_framework.response import Response

from feeds.services.exceptions import FeedError, FeedFetchError


def feed_error_response(exc: FeedError) -> Response:
    code = status.HTTP_502_BAD_GATEWAY if isinstance(exc, FeedFetchError) else status.HTTP_400_BAD_REQUEST
    return Response({"detail": str(exc)}, status=code)
