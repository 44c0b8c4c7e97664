# feeds/views/custom.py

from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated

from feeds.models import CustomFeed
from feeds.serializers import CustomFeedSerializer
from permissions.roles import CAP_FEEDS_MANAGE, HasCapability


class CustomFeedViewSet(viewsets.ModelViewSet):
    """
    Admin CRUD for custom feeds. Public serving lives in feeds/views/public.py.
    """

    serializer_class = CustomFeedSerializer
    permission_classes = [IsAuthenticated, HasCapability]
    required_capability = CAP_FEEDS_MANAGE
    pagination_class = None
    queryset = CustomFeed.objects.all().order_by("name")
