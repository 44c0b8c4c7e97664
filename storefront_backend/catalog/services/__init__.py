from .slugs import PRODUCT_SLUG_MAX_LENGTH, slugify_name, unique_slug

__all__ = [
    "PRODUCT_SLUG_MAX_LENGTH",
    "slugify_name",
    "unique_slug",
]
