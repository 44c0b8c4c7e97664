# catalog/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Canonical Product serializer for both admin CRUD and the public storefront.
- slug is optional on create: derived from name and made unique (-2, -3, ...).
  The feed importer does NOT go through here; it skips duplicate slugs instead.
"""

from decimal import Decimal

from rest_framework import serializers

from catalog.models import Category, Product
from catalog.services.slugs import slugify_name, unique_slug


class ProductSerializer(serializers.ModelSerializer):
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, default=None)
    category_slug = serializers.CharField(source="category.slug", read_only=True, default=None)
    slug = serializers.SlugField(required=False, allow_blank=True, max_length=255)
    is_on_sale = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "price",
            "compare_at_price",
            "category",
            "category_name",
            "category_slug",
            "image",
            "badge",
            "in_stock",
            "vendor",
            "is_on_sale",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "id",
            "category_name",
            "category_slug",
            "is_on_sale",
            "created_at",
            "updated_at",
        ]

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("name is required")
        return value

    def validate_price(self, value):
        if value is None or value < Decimal("0.00"):
            raise serializers.ValidationError("price must be non-negative")
        return value

    def validate_compare_at_price(self, value):
        if value is not None and value < Decimal("0.00"):
            raise serializers.ValidationError("compare_at_price must be non-negative")
        return value

    def validate(self, attrs):
        slug = (attrs.get("slug") or "").strip()

        if self.instance is None and not slug:
            base = slugify_name(attrs.get("name"))
            slug = unique_slug(base, exists=lambda s: Product.objects.filter(slug=s).exists())

        if slug:
            qs = Product.objects.filter(slug=slug)
            if self.instance is not None:
                qs = qs.exclude(pk=self.instance.pk)
            if qs.exists():
                raise serializers.ValidationError({"slug": "A product with this slug already exists."})
            attrs["slug"] = slug
        else:
            attrs.pop("slug", None)

        return attrs
