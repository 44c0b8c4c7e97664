from .category_matcher import match_category
from .exceptions import EmptyFeedError, FeedError, FeedFetchError, FeedParseError
from .importer import import_from_url, import_from_xml, import_products
from .parser import parse_feed_xml, parse_feed_xml_strict
from .types import FeedItem, ImportResult, SourceRunOutcome, StoreCategory

__all__ = [
    "match_category",
    "EmptyFeedError",
    "FeedError",
    "FeedFetchError",
    "FeedParseError",
    "import_from_url",
    "import_from_xml",
    "import_products",
    "parse_feed_xml",
    "parse_feed_xml_strict",
    "FeedItem",
    "ImportResult",
    "SourceRunOutcome",
    "StoreCategory",
]
