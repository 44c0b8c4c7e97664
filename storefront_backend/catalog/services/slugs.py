# catalog/services/slugs.py

"""
SLUG HELPERS

Product slugs are the feed importer's dedup key, so the rule is fixed:
- lower-case
- every run of characters outside [a-z0-9] collapses to a single "-"
- trailing "-" removed (a leading "-" is kept)
- truncated to max_length (80 for products)
"""

from __future__ import annotations

import re

PRODUCT_SLUG_MAX_LENGTH = 80

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
_TRAILING_DASHES = re.compile(r"-+$")


def slugify_name(name: str | None, *, max_length: int = PRODUCT_SLUG_MAX_LENGTH) -> str:
    value = (name or "").lower()
    value = _NON_SLUG_RUN.sub("-", value)
    value = _TRAILING_DASHES.sub("", value)
    return value[:max_length]


def unique_slug(base: str, *, exists, max_length: int = PRODUCT_SLUG_MAX_LENGTH) -> str:
    """
    Append -2, -3, ... until exists(candidate) is False.

    Used by admin-side creates only; the importer never renames, it skips.
    """
    base = (base or "item")[:max_length]
    candidate = base
    n = 2
    while exists(candidate):
        suffix = f"-{n}"
        candidate = f"{base[: max_length - len(suffix)]}{suffix}"
        n += 1
    return candidate
