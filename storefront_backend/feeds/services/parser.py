# feeds/services/parser.py

"""
FEED PARSER

Turns raw feed XML into normalized FeedItem objects.

Supported shapes (detected from the document root):
- RSS 2.0 / Google Shopping: <rss><channel><item> with g:-namespaced fields
- Atom: <feed><entry>
- Generic catalog: <products><product> or <catalog><product>
  (only consulted when the RSS/Atom shapes produced nothing)

Anything else, including XML that does not parse, yields [] from
parse_feed_xml(). parse_feed_xml_strict() raises FeedParseError instead of
swallowing malformed XML.

Conventions:
- Atom carries no price data: price=0, in_stock=True
- prices are read by stripping every character outside [0-9.]
  ("£12.34 GBP" -> 12.34); anything unreadable becomes 0
- g: fields are matched by Google Base namespace first, then by bare local
  name (<price>, or g:price under a URI we do not recognise)
- a feed that uses g: without declaring it gets xmlns:g added to its root
  and is parsed again
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterable, Optional
from xml.etree import ElementTree as ET

from feeds.services.exceptions import FeedParseError
from feeds.services.types import FeedItem

GOOGLE_NS = "http://base.google.com/ns/1.0"
GOOGLE_NAMESPACES = (
    GOOGLE_NS,
    "http://base.google.com/cns/1.0",
)
GOOGLE_NS_HOST = "base.google.com"

UNTITLED = "Untitled"
OUT_OF_STOCK_VALUES = {"out of stock", "out_of_stock"}

TWOPLACES = Decimal("0.01")

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"^(\d+(\.\d*)?|\.\d+)")
# First element start tag (skips the XML declaration, comments and doctype).
_ROOT_START = re.compile(rb"<(?![?!])[A-Za-z_][\w.:-]*")
_G_PREFIX_DECLARED = re.compile(rb"xmlns:g\s*=")


# =====================================================
# ELEMENT HELPERS
# =====================================================

def _split_tag(tag) -> tuple[Optional[str], str]:
    # Comments / processing instructions have non-string tags.
    if not isinstance(tag, str):
        return None, ""
    if tag.startswith("{"):
        ns, _, local = tag[1:].partition("}")
        return ns, local
    return None, tag


def _local(elem) -> str:
    return _split_tag(elem.tag)[1]


def _is_google_ns(ns: Optional[str]) -> bool:
    return bool(ns) and (ns in GOOGLE_NAMESPACES or GOOGLE_NS_HOST in ns)


def _children(elem, local: str, *, google: bool = False) -> list:
    """
    Direct children by local name.

    google=True  -> children in a Google Base namespace (g:price); when there
                    are none, any other child with the same local name
                    (<price>, or g:price under an unrecognised URI)
    google=False -> only children with no namespace or a non-Google one
                    (title vs g:title are different fields)
    """
    found = []
    fallback = []
    for child in elem:
        ns, name = _split_tag(child.tag)
        if name != local:
            continue
        if _is_google_ns(ns) == google:
            found.append(child)
        elif google:
            fallback.append(child)
    return found or fallback


def _child(elem, local: str, *, google: bool = False):
    matches = _children(elem, local, google=google)
    return matches[0] if matches else None


def _text(elem) -> str:
    if elem is None:
        return ""
    return "".join(elem.itertext()).strip()


def _field(elem, local: str, *, google: bool = False) -> str:
    return _text(_child(elem, local, google=google))


def _g(elem, local: str) -> str:
    return _field(elem, local, google=True)


def _first(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value:
            return value
    return None


# =====================================================
# NUMBER HELPERS
# =====================================================

def strip_price(raw: Optional[str]) -> str:
    return _NON_PRICE_CHARS.sub("", raw or "")


def parse_number(raw: Optional[str]) -> Optional[Decimal]:
    """
    Leading-number parse ("12.34.5" -> 12.34, "" -> None), 2dp.
    """
    match = _LEADING_NUMBER.match((raw or "").strip())
    if not match:
        return None
    try:
        return Decimal(match.group(1)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def parse_price(raw: Optional[str]) -> Decimal:
    value = parse_number(strip_price(raw))
    return value if value is not None else Decimal("0.00")


# =====================================================
# SHAPES
# =====================================================

def _parse_rss_item(item) -> FeedItem:
    g_price = _g(item, "price")
    g_sale_price = _g(item, "sale_price")

    # price: g:price, else g:sale_price. compare_at only when both are present.
    price = parse_price(strip_price(g_price) or strip_price(g_sale_price) or "0")
    compare_at = parse_number(strip_price(g_price)) if g_price and g_sale_price else None

    enclosure = _child(item, "enclosure")
    enclosure_url = enclosure.get("url") if enclosure is not None else None

    availability = _g(item, "availability").lower()

    return FeedItem(
        name=_first(_field(item, "title"), _g(item, "title")) or UNTITLED,
        description=_first(_field(item, "description"), _g(item, "description")) or "",
        price=price,
        image=_first(_g(item, "image_link"), enclosure_url),
        vendor=_first(_g(item, "brand")),
        in_stock=availability not in OUT_OF_STOCK_VALUES,
        compare_at_price=compare_at,
        feed_category=_first(
            _g(item, "product_type"),
            _g(item, "google_product_category"),
            _field(item, "category"),
        ),
    )


def _parse_atom_entry(entry) -> FeedItem:
    category = _child(entry, "category")
    category_value = None
    if category is not None:
        category_value = _first((category.get("term") or "").strip(), _text(category))

    return FeedItem(
        name=_field(entry, "title") or UNTITLED,
        description=_first(_field(entry, "summary"), _field(entry, "content")) or "",
        price=Decimal("0.00"),
        image=None,
        vendor=None,
        in_stock=True,
        compare_at_price=None,
        feed_category=category_value,
    )


def _parse_generic_product(product) -> FeedItem:
    price = parse_number(_field(product, "price"))
    availability = _field(product, "availability").lower()
    in_stock_flag = _field(product, "in_stock").lower()

    return FeedItem(
        name=_first(_field(product, "name"), _field(product, "title")) or UNTITLED,
        description=_field(product, "description"),
        price=price if price is not None else Decimal("0.00"),
        image=_first(
            _field(product, "image"),
            _field(product, "image_url"),
            _field(product, "image_link"),
        ),
        vendor=_first(_field(product, "brand"), _field(product, "vendor")),
        in_stock=availability not in OUT_OF_STOCK_VALUES and in_stock_flag != "false",
        compare_at_price=parse_number(_field(product, "compare_at_price")),
        feed_category=_first(
            _field(product, "category"),
            _field(product, "product_type"),
            _field(product, "type"),
        ),
    )


def _rss_items(root) -> Iterable:
    if _local(root) != "rss":
        return []
    channel = _child(root, "channel")
    if channel is None:
        return []
    return _children(channel, "item")


def _atom_entries(root) -> Iterable:
    if _local(root) != "feed":
        return []
    return [child for child in root if _local(child) == "entry"]


def _generic_products(root) -> Iterable:
    if _local(root) not in ("products", "catalog"):
        return []
    return [child for child in root if _local(child) == "product"]


def items_from_root(root) -> list[FeedItem]:
    items: list[FeedItem] = []

    items.extend(_parse_rss_item(item) for item in _rss_items(root))
    items.extend(_parse_atom_entry(entry) for entry in _atom_entries(root))

    if not items:
        items.extend(_parse_generic_product(p) for p in _generic_products(root))

    return items


# =====================================================
# PUBLIC API
# =====================================================

def _to_bytes(xml) -> bytes:
    if isinstance(xml, bytes):
        return xml
    # Encoding declarations are only honoured on bytes input.
    return (xml or "").encode("utf-8")


def _declare_google_prefix(data: bytes) -> Optional[bytes]:
    """
    Supplier feeds often use g:price without declaring xmlns:g. Add the
    declaration to the root start tag; None when that cannot help.
    """
    if _G_PREFIX_DECLARED.search(data):
        return None
    match = _ROOT_START.search(data)
    if match is None:
        return None
    declaration = f' xmlns:g="{GOOGLE_NS}"'.encode("ascii")
    return data[: match.end()] + declaration + data[match.end():]


def _parse_root(data: bytes):
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        patched = _declare_google_prefix(data) if "unbound prefix" in str(exc) else None
        if patched is None:
            raise
        return ET.fromstring(patched)


def parse_feed_xml_strict(xml) -> list[FeedItem]:
    data = _to_bytes(xml)
    if not data.strip():
        raise FeedParseError("Feed is empty")
    try:
        root = _parse_root(data)
    except ET.ParseError as exc:
        raise FeedParseError(f"Feed is not well-formed XML: {exc}") from exc
    return items_from_root(root)


def parse_feed_xml(xml) -> list[FeedItem]:
    try:
        return parse_feed_xml_strict(xml)
    except FeedParseError:
        return []
