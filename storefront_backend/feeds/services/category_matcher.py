# feeds/services/category_matcher.py

"""
CATEGORY MATCHER

Maps a supplier's free-text category ("Components > Graphics Cards",
"RTX 4090 GPU") onto one of our store categories.

Tiers (first hit wins; each tier scans store categories in order):
1. exact, case-insensitive, on category name or slug
2. substring containment in either direction against the category name
3. keyword table: categories whose lower-cased name is a table key match
   when any of their keywords appears in the feed category

Returns the category id, or None (caller falls back to the source default).
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence

from feeds.services.keywords import get_keyword_table
from feeds.services.types import StoreCategory


def match_category(
    feed_category: Optional[str],
    store_categories: Sequence[StoreCategory],
    keyword_table: Optional[Mapping[str, Iterable[str]]] = None,
) -> Optional[int]:
    if not feed_category:
        return None

    needle = feed_category.lower().strip()
    if not needle:
        return None

    for cat in store_categories:
        if needle == cat.name.lower() or needle == cat.slug.lower():
            return cat.id

    for cat in store_categories:
        name = cat.name.lower()
        if name and (name in needle or needle in name):
            return cat.id

    table = get_keyword_table() if keyword_table is None else keyword_table

    for cat in store_categories:
        keywords = table.get(cat.name.lower())
        if not keywords:
            continue
        for keyword in keywords:
            if keyword in needle:
                return cat.id

    return None
