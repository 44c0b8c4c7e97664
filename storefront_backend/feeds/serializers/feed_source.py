# feeds/serializers/feed_source.py

from django.utils import timezone
from rest_framework import serializers

from catalog.models import Category
from feeds.models import FeedSource


class FeedSourceSerializer(serializers.ModelSerializer):
    """
    Feed source serializer.

    Rules:
    - url must be a valid URL (the fetcher only follows http/https)
    - interval_hours >= 1
    - run bookkeeping (last_*) is read-only; only the scheduler/run action writes it
    """

    url = serializers.URLField(max_length=2048)
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    interval_hours = serializers.IntegerField(min_value=1, required=False)
    is_due = serializers.SerializerMethodField()

    class Meta:
        model = FeedSource
        fields = [
            "id",
            "name",
            "url",
            "category",
            "category_name",
            "interval_hours",
            "enabled",
            "last_import_at",
            "last_import_count",
            "last_error",
            "is_due",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "last_import_at",
            "last_import_count",
            "last_error",
            "is_due",
            "created_at",
        ]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def get_is_due(self, obj) -> bool:
        return bool(obj.enabled) and obj.is_due(timezone.now())
