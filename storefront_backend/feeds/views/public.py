# feeds/views/public.py

"""
PUBLIC OUTBOUND FEEDS (AllowAny)

Mounted at the site root (see backend/urls.py):
- GET /feeds/                       JSON index
- GET /feeds/google-shopping.xml
- GET /feeds/facebook.xml
- GET /feeds/products.xml
- GET /feeds/custom/<slug>.xml      admin-authored XML, verbatim
- GET /sitemap.xml

Plain Django views (not DRF): the XML is already serialized bytes and
merchant-center crawlers send arbitrary Accept headers.
"""

from __future__ import annotations

from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_GET

from catalog.models import Category, Product
from feeds.models import CustomFeed
from feeds.services.generators import (
    facebook_feed,
    generic_product_feed,
    google_shopping_feed,
    sitemap_xml,
)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"


def site_url_for(request) -> str:
    """
    Public base URL, honouring the reverse proxy's forwarded headers.
    """
    proto = (request.META.get("HTTP_X_FORWARDED_PROTO") or "").split(",")[0].strip()
    host = (request.META.get("HTTP_X_FORWARDED_HOST") or "").split(",")[0].strip()

    proto = proto or request.scheme
    host = host or request.get_host()
    return f"{proto}://{host}"


def _xml_response(body) -> HttpResponse:
    return HttpResponse(body, content_type=XML_CONTENT_TYPE)


def _catalog():
    products = Product.objects.all().order_by("id")
    categories = list(Category.objects.all().order_by("name"))
    return products, categories


@require_GET
def google_shopping_view(request):
    products, categories = _catalog()
    return _xml_response(google_shopping_feed(products, categories, site_url_for(request)))


@require_GET
def facebook_view(request):
    products, categories = _catalog()
    return _xml_response(facebook_feed(products, categories, site_url_for(request)))


@require_GET
def products_view(request):
    products, categories = _catalog()
    return _xml_response(generic_product_feed(products, categories, site_url_for(request)))


@require_GET
def sitemap_view(request):
    products, categories = _catalog()
    return _xml_response(sitemap_xml(products, categories, site_url_for(request)))


@require_GET
def custom_feed_view(request, slug: str):
    feed = get_object_or_404(CustomFeed, slug=slug)
    if not feed.content:
        raise Http404("Feed has no content")
    return _xml_response(feed.content)


@require_GET
def feeds_index_view(request):
    base = site_url_for(request)
    return JsonResponse(
        {
            "feeds": {
                "google_shopping": f"{base}/feeds/google-shopping.xml",
                "facebook": f"{base}/feeds/facebook.xml",
                "products": f"{base}/feeds/products.xml",
                "sitemap": f"{base}/sitemap.xml",
            },
            "custom": [
                {"name": name, "url": f"{base}/feeds/custom/{slug}.xml"}
                for name, slug in CustomFeed.objects.order_by("name").values_list("name", "slug")
            ],
        }
    )
