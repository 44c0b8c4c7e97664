# catalog/serializers/__init__.py

from .category import CategorySerializer
from .product import ProductSerializer

__all__ = [
    "CategorySerializer",
    "ProductSerializer",
]
