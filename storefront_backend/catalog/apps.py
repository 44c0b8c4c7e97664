# catalog/apps.py

"""
CATALOG APP CONFIG

Categories + products (the storefront catalog).
Feed imports write new products here; outbound feeds read from here.
"""

from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "catalog"
    verbose_name = "Catalog"
