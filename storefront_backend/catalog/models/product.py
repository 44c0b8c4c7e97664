# catalog/models/product.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .category import Category


class Product(models.Model):
    """
    Represents a sellable product.

    IMPORT MODEL (IMPORTANT):
    - slug is unique and is the dedup key for feed imports
    - the feed importer only ever creates rows, never updates them
    - compare_at_price is the "was" price shown when the product is on sale
    """

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    name = models.CharField(max_length=255, db_index=True)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)

    price = models.DecimalField(max_digits=10, decimal_places=2)
    compare_at_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
    )

    image = models.TextField(null=True, blank=True)
    badge = models.CharField(max_length=64, null=True, blank=True)
    in_stock = models.BooleanField(default=True)
    vendor = models.CharField(max_length=255, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["name"], name="catalog_product_name_idx"),
            models.Index(fields=["in_stock"], name="catalog_product_stock_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.slug})"

    def clean(self):
        if self.price is None or Decimal(self.price) < 0:
            raise ValidationError("price cannot be negative")

        if self.compare_at_price is not None and Decimal(self.compare_at_price) < 0:
            raise ValidationError("compare_at_price cannot be negative")

    @property
    def is_on_sale(self) -> bool:
        return self.compare_at_price is not None and self.compare_at_price > self.price
