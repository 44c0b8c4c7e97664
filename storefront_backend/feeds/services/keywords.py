# feeds/services/keywords.py

"""
CATEGORY KEYWORD TABLE (CONFIG-LOADED)

Maps a canonical store category name (lower-case) to marketing synonyms found
in supplier feed categories, e.g. "graphics cards" -> ["gpu", "geforce", "rtx"].

Source:
- settings.FEED_CATEGORY_KEYWORDS_FILE when set
- otherwise feeds/data/category_keywords.json

Loaded once per process; reload_keyword_table() drops the cache.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS_FILE = Path(__file__).resolve().parent.parent / "data" / "category_keywords.json"


def _configured_path() -> Path:
    raw = (getattr(settings, "FEED_CATEGORY_KEYWORDS_FILE", "") or "").strip()
    return Path(raw) if raw else DEFAULT_KEYWORDS_FILE


def parse_keyword_table(data) -> dict[str, tuple[str, ...]]:
    """
    Validate + normalize a decoded JSON table.

    Keys and keywords are lower-cased and trimmed; blank keywords dropped.
    """
    if not isinstance(data, dict):
        raise ImproperlyConfigured("Category keyword table must be a JSON object")

    table: dict[str, tuple[str, ...]] = {}
    for key, keywords in data.items():
        if not isinstance(key, str) or not key.strip():
            raise ImproperlyConfigured("Category keyword table keys must be non-empty strings")
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise ImproperlyConfigured(
                f"Category keyword table entry {key!r} must be a list of strings"
            )
        cleaned = tuple(k.strip().lower() for k in keywords if k.strip())
        table[key.strip().lower()] = cleaned
    return table


def load_keyword_table_from(path: Path) -> dict[str, tuple[str, ...]]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ImproperlyConfigured(f"Cannot read category keyword table {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ImproperlyConfigured(f"Category keyword table {path} is not valid JSON: {exc}") from exc

    table = parse_keyword_table(data)
    logger.debug("Loaded %d category keyword groups from %s", len(table), path)
    return table


@lru_cache(maxsize=1)
def get_keyword_table() -> dict[str, tuple[str, ...]]:
    return load_keyword_table_from(_configured_path())


def reload_keyword_table() -> dict[str, tuple[str, ...]]:
    get_keyword_table.cache_clear()
    return get_keyword_table()
