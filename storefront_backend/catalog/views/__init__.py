# catalog/views/__init__.py

"""
Catalog views package exports.
"""

from .category import AdminCategoryViewSet, PublicCategoryViewSet
from .product import AdminProductViewSet, PublicProductViewSet

__all__ = [
    "AdminCategoryViewSet",
    "PublicCategoryViewSet",
    "AdminProductViewSet",
    "PublicProductViewSet",
]
