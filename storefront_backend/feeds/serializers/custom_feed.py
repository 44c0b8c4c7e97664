# feeds/serializers/custom_feed.py

from xml.etree import ElementTree as ET

from django.urls import reverse
from rest_framework import serializers

from catalog.services.slugs import slugify_name
from feeds.models import CustomFeed


class CustomFeedSerializer(serializers.ModelSerializer):
    """
    Custom (admin-authored) feed.

    - slug optional on write; derived from name
    - content must be well-formed XML (it is served verbatim as application/xml)
    """

    slug = serializers.SlugField(required=False, allow_blank=True, max_length=255)
    public_path = serializers.SerializerMethodField()

    class Meta:
        model = CustomFeed
        fields = ["id", "name", "slug", "content", "public_path", "created_at", "updated_at"]
        read_only_fields = ["id", "public_path", "created_at", "updated_at"]

    def validate_content(self, value: str):
        if not (value or "").strip():
            raise serializers.ValidationError("content cannot be blank")
        try:
            ET.fromstring(value.encode("utf-8"))
        except ET.ParseError as exc:
            raise serializers.ValidationError(f"content is not well-formed XML: {exc}")
        return value

    def validate(self, attrs):
        slug = (attrs.get("slug") or "").strip()
        if not slug and "name" in attrs and self.instance is None:
            slug = slugify_name(attrs["name"], max_length=255).strip("-")
        if slug:
            qs = CustomFeed.objects.filter(slug=slug)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError({"slug": "A custom feed with this slug already exists."})
            attrs["slug"] = slug
        elif self.instance is None:
            raise serializers.ValidationError({"slug": "slug could not be derived from name"})
        else:
            attrs.pop("slug", None)
        return attrs

    def get_public_path(self, obj) -> str:
        return reverse("public-feeds:custom-feed", kwargs={"slug": obj.slug})
