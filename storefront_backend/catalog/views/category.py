# catalog/views/category.py

from django.db.models import Count
from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from catalog.filters import ProductFilter
from catalog.models import Category, Product
from catalog.serializers import CategorySerializer, ProductSerializer
from permissions.roles import CAP_CATALOG_EDIT, HasAnyCapability


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


def _categories_with_counts():
    return Category.objects.annotate(product_count=Count("products")).order_by("name")


class PublicCategoryViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Public category browsing (AllowAny).

    - GET /api/catalog/categories/
    - GET /api/catalog/categories/<slug>/
    - GET /api/catalog/categories/<slug>/products/
    """

    serializer_class = CategorySerializer
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    lookup_field = "slug"
    pagination_class = None

    def get_queryset(self):
        return _categories_with_counts()

    @extend_schema(responses=ProductSerializer(many=True))
    @action(detail=True, methods=["get"], url_path="products")
    def products(self, request, slug=None):
        category = self.get_object()
        qs = Product.objects.select_related("category").filter(category=category)
        qs = ProductFilter(request.query_params, queryset=qs).qs
        return Response(ProductSerializer(qs, many=True).data)


class AdminCategoryViewSet(viewsets.ModelViewSet):
    """
    Category admin API.

    Policy:
    - Only users with catalog.edit capability can read/write here.
    - Deleting a category detaches its products (FK is SET_NULL).
    """

    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated, HasAnyCapability]
    required_any_capabilities = {CAP_CATALOG_EDIT}
    pagination_class = None

    def get_queryset(self):
        return _categories_with_counts()
