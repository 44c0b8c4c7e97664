# feeds/services/generators.py

"""
OUTBOUND FEED GENERATORS

Build the XML documents the storefront publishes from the catalog:
- Google Shopping (RSS 2.0 + g: namespace)
- Facebook / Meta catalog (plain RSS 2.0)
- generic <products> document
- sitemap.xml

Documents are built with ElementTree, so all text/attributes are escaped.
Prices are "<amount> <CURRENCY>" with 2dp. Branding comes from settings
(FEED_STORE_NAME, FEED_DEFAULT_BRAND, FEED_DEFAULT_PRODUCT_TYPE, FEED_CURRENCY).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional
from xml.etree import ElementTree as ET

from django.conf import settings
from django.utils import timezone

from catalog.models import Category, Product

GOOGLE_NS = "http://base.google.com/ns/1.0"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
PLACEHOLDER_IMAGE_PATH = "/placeholder-product.png"

ET.register_namespace("g", GOOGLE_NS)


@dataclass(frozen=True)
class FeedBranding:
    store_name: str
    default_brand: str
    default_product_type: str
    currency: str
    shipping_country: str

    @classmethod
    def from_settings(cls) -> "FeedBranding":
        return cls(
            store_name=getattr(settings, "FEED_STORE_NAME", "") or "Storefront",
            default_brand=getattr(settings, "FEED_DEFAULT_BRAND", "") or "Storefront",
            default_product_type=getattr(settings, "FEED_DEFAULT_PRODUCT_TYPE", "") or "Products",
            currency=getattr(settings, "FEED_CURRENCY", "") or "GBP",
            shipping_country=getattr(settings, "FEED_SHIPPING_COUNTRY", "") or "GB",
        )


def _g(local: str) -> str:
    return f"{{{GOOGLE_NS}}}{local}"


def _sub(parent, tag: str, text: Optional[str] = None, **attrs) -> ET.Element:
    el = ET.SubElement(parent, tag, {k: str(v) for k, v in attrs.items()})
    if text is not None:
        el.text = str(text)
    return el


def _serialize(root: ET.Element) -> bytes:
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _money(value) -> str:
    return f"{value:.2f}"


def _category_map(categories: Iterable[Category]) -> dict[int, Category]:
    return {c.id: c for c in categories}


def _product_url(site_url: str, product: Product) -> str:
    return f"{site_url}/product/{product.slug}"


def _image_url(site_url: str, product: Product) -> str:
    return product.image or f"{site_url}{PLACEHOLDER_IMAGE_PATH}"


def _price_and_sale_price(product: Product):
    """
    (price, sale) for the shopping feeds: price is always the selling price;
    sale repeats it whenever the product carries a compare-at price.
    """
    sale = product.price if product.compare_at_price is not None else None
    return product.price, sale


# =====================================================
# GOOGLE SHOPPING
# =====================================================

def google_shopping_feed(
    products: Iterable[Product],
    categories: Iterable[Category],
    site_url: str,
    branding: Optional[FeedBranding] = None,
) -> bytes:
    branding = branding or FeedBranding.from_settings()
    cats = _category_map(categories)
    cur = branding.currency

    rss = ET.Element("rss", {"version": "2.0"})
    channel = _sub(rss, "channel")
    _sub(channel, "title", f"{branding.store_name} - {branding.default_product_type}")
    _sub(channel, "link", site_url)
    _sub(channel, "description", f"{branding.default_product_type} from {branding.store_name}")

    for p in products:
        cat = cats.get(p.category_id)
        price, sale = _price_and_sale_price(p)

        item = _sub(channel, "item")
        _sub(item, _g("id"), p.id)
        _sub(item, "title", p.name)
        _sub(item, "description", p.description or p.name)
        _sub(item, "link", _product_url(site_url, p))
        _sub(item, _g("image_link"), _image_url(site_url, p))
        _sub(item, _g("price"), f"{_money(price)} {cur}")
        if sale is not None:
            _sub(item, _g("sale_price"), f"{_money(sale)} {cur}")
        _sub(item, _g("availability"), "in_stock" if p.in_stock else "out_of_stock")
        _sub(item, _g("condition"), "new")
        _sub(item, _g("brand"), p.vendor or branding.default_brand)
        _sub(item, _g("product_type"), cat.name if cat else branding.default_product_type)
        _sub(item, _g("identifier_exists"), "false")
        shipping = _sub(item, _g("shipping"))
        _sub(shipping, _g("country"), branding.shipping_country)
        _sub(shipping, _g("price"), f"0.00 {cur}")

    return _serialize(rss)


# =====================================================
# FACEBOOK / META
# =====================================================

def facebook_feed(
    products: Iterable[Product],
    categories: Iterable[Category],
    site_url: str,
    branding: Optional[FeedBranding] = None,
) -> bytes:
    branding = branding or FeedBranding.from_settings()
    cats = _category_map(categories)
    cur = branding.currency

    rss = ET.Element("rss", {"version": "2.0"})
    channel = _sub(rss, "channel")
    _sub(channel, "title", branding.store_name)
    _sub(channel, "link", site_url)
    _sub(channel, "description", f"{branding.default_product_type} & Accessories")

    for p in products:
        cat = cats.get(p.category_id)
        price, sale = _price_and_sale_price(p)

        item = _sub(channel, "item")
        _sub(item, "id", p.id)
        _sub(item, "title", p.name)
        _sub(item, "description", p.description or p.name)
        _sub(item, "availability", "in stock" if p.in_stock else "out of stock")
        _sub(item, "condition", "new")
        _sub(item, "price", f"{_money(price)} {cur}")
        if sale is not None:
            _sub(item, "sale_price", f"{_money(sale)} {cur}")
        _sub(item, "link", _product_url(site_url, p))
        _sub(item, "image_link", _image_url(site_url, p))
        _sub(item, "brand", p.vendor or branding.default_brand)
        _sub(item, "product_type", cat.name if cat else branding.default_product_type)

    return _serialize(rss)


# =====================================================
# GENERIC PRODUCTS
# =====================================================

def generic_product_feed(
    products: Iterable[Product],
    categories: Iterable[Category],
    site_url: str,
    branding: Optional[FeedBranding] = None,
    generated_at=None,
) -> bytes:
    branding = branding or FeedBranding.from_settings()
    cats = _category_map(categories)
    cur = branding.currency
    generated_at = generated_at or timezone.now()

    root = ET.Element(
        "products",
        {
            "store": branding.store_name,
            "url": site_url,
            "currency": cur,
            "generated": generated_at.isoformat(),
        },
    )

    for p in products:
        cat = cats.get(p.category_id)
        el = _sub(root, "product")
        _sub(el, "id", p.id)
        _sub(el, "name", p.name)
        _sub(el, "slug", p.slug)
        _sub(el, "description", p.description or "")
        _sub(el, "price", _money(p.price), currency=cur)
        if p.compare_at_price is not None:
            _sub(el, "compare_at_price", _money(p.compare_at_price), currency=cur)
        _sub(el, "url", _product_url(site_url, p))
        if p.image:
            _sub(el, "image", p.image)
        _sub(el, "category", cat.name if cat else "")
        _sub(el, "vendor", p.vendor or "")
        _sub(el, "in_stock", "true" if p.in_stock else "false")
        if p.badge:
            _sub(el, "badge", p.badge)

    return _serialize(root)


# =====================================================
# SITEMAP
# =====================================================

def sitemap_xml(
    products: Iterable[Product],
    categories: Iterable[Category],
    site_url: str,
    today=None,
) -> bytes:
    lastmod = (today or timezone.localdate()).isoformat()

    urlset = ET.Element(f"{{{SITEMAP_NS}}}urlset")

    def add(loc: str, changefreq: str, priority: str) -> None:
        url = _sub(urlset, f"{{{SITEMAP_NS}}}url")
        _sub(url, f"{{{SITEMAP_NS}}}loc", loc)
        _sub(url, f"{{{SITEMAP_NS}}}changefreq", changefreq)
        _sub(url, f"{{{SITEMAP_NS}}}priority", priority)
        _sub(url, f"{{{SITEMAP_NS}}}lastmod", lastmod)

    add(f"{site_url}/", "daily", "1.0")
    for c in categories:
        add(f"{site_url}/category/{c.slug}", "daily", "0.8")
    for p in products:
        add(_product_url(site_url, p), "weekly", "0.6")

    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True, default_namespace=SITEMAP_NS)
