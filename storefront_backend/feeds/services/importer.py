# feeds/services/importer.py

"""
PRODUCT IMPORTER (APPLICATION SERVICE)

Purpose:
- Turn parsed FeedItems into new catalog Products.
- Append-only: existing products are never updated.
- Idempotent by slug: importing the same feed twice creates nothing the
  second time.

Rules:
- items with price <= 0 AND no name are dropped silently (not counted)
- slug = slugify_name(name) (80 chars); a slug already in the catalog or
  earlier in the same batch is skipped, counted, and its name recorded
- feed category -> store category via match_category(); unmatched items get
  the fallback category
- each product is created in its own savepoint; a failure is recorded as
  "<name>: <error>" and the batch carries on
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Optional

from django.db import transaction

from catalog.models import Category, Product
from catalog.services.slugs import slugify_name
from feeds.services.category_matcher import match_category
from feeds.services.exceptions import EmptyFeedError
from feeds.services.fetcher import fetch_feed
from feeds.services.keywords import get_keyword_table
from feeds.services.parser import parse_feed_xml
from feeds.services.types import FeedItem, ImportResult, StoreCategory

logger = logging.getLogger(__name__)


def load_store_categories() -> list[StoreCategory]:
    return [
        StoreCategory(id=pk, name=name, slug=slug)
        for pk, name, slug in Category.objects.order_by("id").values_list("id", "name", "slug")
    ]


def _resolve_fallback(fallback_category_id, store_categories: list[StoreCategory]) -> Optional[int]:
    if fallback_category_id in (None, ""):
        return None
    try:
        fallback_id = int(fallback_category_id)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric fallback category %r", fallback_category_id)
        return None
    if not any(cat.id == fallback_id for cat in store_categories):
        logger.warning("Fallback category %s does not exist; importing uncategorised", fallback_id)
        return None
    return fallback_id


def _create_product(item: FeedItem, *, slug: str, category_id: Optional[int]) -> Product:
    with transaction.atomic():
        return Product.objects.create(
            name=item.name,
            slug=slug,
            description=item.description or None,
            price=item.price or Decimal("0.00"),
            compare_at_price=item.compare_at_price or None,
            category_id=category_id,
            image=item.image or None,
            badge=None,
            in_stock=item.in_stock is not False,
            vendor=item.vendor or None,
        )


def import_products(items: Iterable[FeedItem], fallback_category_id=None) -> ImportResult:
    result = ImportResult()

    existing_slugs = set(Product.objects.values_list("slug", flat=True))
    store_categories = load_store_categories()
    keyword_table = get_keyword_table()
    fallback_id = _resolve_fallback(fallback_category_id, store_categories)

    for item in items:
        if item.price <= 0 and not item.name:
            continue

        slug = slugify_name(item.name)
        if not slug:
            result.skipped_names.append(f"{item.name}: name has no usable characters for a slug")
            continue

        if slug in existing_slugs:
            result.skipped_names.append(item.name)
            continue
        existing_slugs.add(slug)

        category_id = match_category(item.feed_category, store_categories, keyword_table)
        if category_id:
            result.categories_matched += 1
        else:
            category_id = fallback_id

        try:
            product = _create_product(item, slug=slug, category_id=category_id)
        except Exception as exc:
            logger.warning("Feed item %r not imported: %s", item.name, exc)
            result.skipped_names.append(f"{item.name}: {exc}")
            continue

        result.products.append(
            {
                "id": product.id,
                "name": product.name,
                "category": item.feed_category or "none",
            }
        )

    result.imported = len(result.products)
    result.skipped = len(result.skipped_names)
    return result


def import_from_xml(xml, category_id=None) -> ImportResult:
    items = parse_feed_xml(xml)
    if not items:
        raise EmptyFeedError()
    return import_products(items, category_id)


def import_from_url(url: str, category_id=None) -> ImportResult:
    body = fetch_feed(url)
    return import_from_xml(body, category_id)
