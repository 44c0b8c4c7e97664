"""
=====================================================
PATH: catalog/admin.py
=====================================================

Django admin for the catalog.

- Products are searchable by name/slug/vendor and filterable by category + stock.
- Slugs are prepopulated from the name on create.
"""

from __future__ import annotations

from django.contrib import admin

from catalog.models import Category, Product


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "icon")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "category", "price", "compare_at_price", "in_stock", "vendor", "created_at")
    list_filter = ("category", "in_stock")
    search_fields = ("name", "slug", "vendor")
    list_select_related = ("category",)
    prepopulated_fields = {"slug": ("name",)}
    readonly_fields = ("created_at", "updated_at")
