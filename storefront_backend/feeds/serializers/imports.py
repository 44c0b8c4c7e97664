# feeds/serializers/imports.py

"""
Request serializers for one-off imports and previews.
"""

from rest_framework import serializers

from catalog.models import Category


class _CategoryIdMixin(serializers.Serializer):
    category_id = serializers.IntegerField(required=False, allow_null=True)

    def validate_category_id(self, value):
        if value is None:
            return None
        if not Category.objects.filter(pk=value).exists():
            raise serializers.ValidationError("Category not found")
        return value


class ImportFromUrlSerializer(_CategoryIdMixin):
    url = serializers.URLField(max_length=2048)


class ImportFromXmlSerializer(_CategoryIdMixin):
    xml = serializers.CharField(trim_whitespace=False)


class PreviewFeedSerializer(serializers.Serializer):
    url = serializers.URLField(max_length=2048, required=False)
    xml = serializers.CharField(required=False, trim_whitespace=False)

    def validate(self, attrs):
        has_url = bool(attrs.get("url"))
        has_xml = bool((attrs.get("xml") or "").strip())
        if has_url == has_xml:
            raise serializers.ValidationError("Provide exactly one of url or xml")
        return attrs
