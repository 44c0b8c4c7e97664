# catalog/filters.py

"""
PRODUCT FILTERS (django-filter)

Query params:
- category=<id>          category primary key
- category_slug=<slug>   category slug
- in_stock=true|false
- vendor=<text>          case-insensitive exact
- q=<text>               name/description contains
- min_price / max_price
"""

import django_filters
from django.db.models import Q

from catalog.models import Product


class ProductFilter(django_filters.FilterSet):
    category = django_filters.NumberFilter(field_name="category_id")
    category_slug = django_filters.CharFilter(field_name="category__slug")
    in_stock = django_filters.BooleanFilter(field_name="in_stock")
    vendor = django_filters.CharFilter(field_name="vendor", lookup_expr="iexact")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    q = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Product
        fields = ["category", "category_slug", "in_stock", "vendor", "min_price", "max_price", "q"]

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))
