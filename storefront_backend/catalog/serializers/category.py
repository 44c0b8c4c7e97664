# catalog/serializers/category.py

from rest_framework import serializers

from catalog.models import Category
from catalog.services.slugs import slugify_name


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer.

    Rules:
    - name is required and trimmed
    - slug is optional on write; derived from name when omitted
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    slug = serializers.SlugField(required=False, allow_blank=True, max_length=255)
    product_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description", "icon", "product_count"]
        read_only_fields = ["id", "product_count"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def validate(self, attrs):
        slug = (attrs.get("slug") or "").strip()
        if not slug and "name" in attrs:
            slug = slugify_name(attrs["name"], max_length=255).strip("-")
        if slug:
            qs = Category.objects.filter(slug=slug)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError({"slug": "A category with this slug already exists."})
            attrs["slug"] = slug
        return attrs
