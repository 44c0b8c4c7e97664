# catalog/views/product.py

"""
PRODUCT VIEWSETS

Public:
- GET /api/catalog/products/?category=&category_slug=&in_stock=&vendor=&q=
- GET /api/catalog/products/<slug>/

Admin (catalog.edit):
- CRUD under /api/catalog/admin/products/
"""

from rest_framework import viewsets
from rest_framework.permissions import AllowAny, IsAuthenticated

from catalog.filters import ProductFilter
from catalog.models import Product
from catalog.serializers import ProductSerializer
from catalog.views.category import PublicCatalogThrottle
from permissions.roles import CAP_CATALOG_EDIT, HasAnyCapability


class PublicProductViewSet(viewsets.ReadOnlyModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    filterset_class = ProductFilter
    lookup_field = "slug"

    def get_queryset(self):
        return Product.objects.select_related("category")


class AdminProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticated, HasAnyCapability]
    required_any_capabilities = {CAP_CATALOG_EDIT}
    filterset_class = ProductFilter

    def get_queryset(self):
        return Product.objects.select_related("category")
