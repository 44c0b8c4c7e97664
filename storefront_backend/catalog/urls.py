# catalog/urls.py

"""
CATALOG URLS

Mounted at /api/catalog/ in backend/urls.py.

Public (AllowAny):
    categories/                 categories/<slug>/        categories/<slug>/products/
    products/                   products/<slug>/
Admin (catalog.edit):
    admin/categories/           admin/products/
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from catalog.views import (
    AdminCategoryViewSet,
    AdminProductViewSet,
    PublicCategoryViewSet,
    PublicProductViewSet,
)

router = DefaultRouter()

router.register(r"categories", PublicCategoryViewSet, basename="categories")
router.register(r"products", PublicProductViewSet, basename="products")
router.register(r"admin/categories", AdminCategoryViewSet, basename="admin-categories")
router.register(r"admin/products", AdminProductViewSet, basename="admin-products")

urlpatterns = [
    path("", include(router.urls)),
]
