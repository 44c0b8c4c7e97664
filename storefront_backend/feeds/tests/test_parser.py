# feeds/tests/test_parser.py

from decimal import Decimal

from django.test import SimpleTestCase

from feeds.services.exceptions import FeedParseError
from feeds.services.parser import parse_feed_xml, parse_feed_xml_strict, parse_number, parse_price
from feeds.tests.fixtures import ATOM_FEED, GENERIC_PRODUCTS, GOOGLE_SHOPPING_RSS


class PriceParsingTests(SimpleTestCase):
    def test_currency_noise_is_stripped(self):
        self.assertEqual(parse_price("£12.34 GBP"), Decimal("12.34"))
        self.assertEqual(parse_price("USD 1,299.00"), Decimal("1299.00"))

    def test_unreadable_price_is_zero(self):
        self.assertEqual(parse_price("call us"), Decimal("0.00"))
        self.assertEqual(parse_price(None), Decimal("0.00"))

    def test_leading_number_wins(self):
        self.assertEqual(parse_number("12.34.56"), Decimal("12.34"))
        self.assertIsNone(parse_number(""))


class RssParsingTests(SimpleTestCase):
    """
    Google Shopping / RSS 2.0 shape.
    """

    def setUp(self):
        self.items = parse_feed_xml(GOOGLE_SHOPPING_RSS)

    def test_item_count(self):
        self.assertEqual(len(self.items), 2)

    def test_google_fields(self):
        item = self.items[0]

        self.assertEqual(item.name, "NVIDIA GeForce RTX 4090 24GB")
        self.assertEqual(item.description, "Flagship graphics card")
        self.assertEqual(item.price, Decimal("12.34"))
        self.assertEqual(item.image, "https://cdn.example.com/4090.jpg")
        self.assertEqual(item.vendor, "NVIDIA")
        self.assertTrue(item.in_stock)
        self.assertIsNone(item.compare_at_price)
        self.assertEqual(item.feed_category, "Graphics Cards")

    def test_price_prefers_g_price_and_compare_at_needs_both(self):
        item = self.items[1]

        self.assertEqual(item.price, Decimal("99.95"))
        self.assertEqual(item.compare_at_price, Decimal("99.95"))
        self.assertFalse(item.in_stock)
        self.assertEqual(item.description, "")

    def test_sale_price_alone_is_the_price(self):
        xml = """<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0"><channel>
            <item><title>Arctic P12</title><g:sale_price>4.99 GBP</g:sale_price></item>
        </channel></rss>"""

        (item,) = parse_feed_xml(xml)

        self.assertEqual(item.price, Decimal("4.99"))
        self.assertIsNone(item.compare_at_price)

    def test_bytes_input(self):
        self.assertEqual(len(parse_feed_xml(GOOGLE_SHOPPING_RSS.encode("utf-8"))), 2)

    def test_fallbacks(self):
        xml = """<rss version="2.0" xmlns:g="http://base.google.com/ns/1.0"><channel>
            <item>
              <g:title>From g:title</g:title>
              <enclosure url="https://cdn.example.com/e.jpg" type="image/jpeg"/>
              <g:google_product_category>Memory</g:google_product_category>
            </item>
            <item><description>no title</description></item>
        </channel></rss>"""

        first, second = parse_feed_xml(xml)

        self.assertEqual(first.name, "From g:title")
        self.assertEqual(first.image, "https://cdn.example.com/e.jpg")
        self.assertEqual(first.feed_category, "Memory")
        self.assertEqual(first.price, Decimal("0.00"))
        self.assertEqual(second.name, "Untitled")


class GooglePrefixTests(SimpleTestCase):
    """
    Supplier feeds that get the g: namespace wrong or leave it out.
    """

    def test_undeclared_prefix_still_parses(self):
        xml = '<rss version="2.0"><channel><item><title>Y</title><g:price>12.34 GBP</g:price></item></channel></rss>'

        items = parse_feed_xml(xml)

        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].name, "Y")
        self.assertEqual(items[0].price, Decimal("12.34"))

    def test_undeclared_prefix_after_prolog(self):
        xml = b"""<?xml version="1.0" encoding="UTF-8"?>
<!-- exported nightly -->
<rss version="2.0"><channel><item>
  <title>Z</title><g:brand>MSI</g:brand><g:availability>out of stock</g:availability>
</item></channel></rss>"""

        (item,) = parse_feed_xml_strict(xml)

        self.assertEqual(item.vendor, "MSI")
        self.assertFalse(item.in_stock)

    def test_other_unbound_prefix_is_still_malformed(self):
        xml = "<rss><channel><item><x:price>1</x:price></item></channel></rss>"

        self.assertEqual(parse_feed_xml(xml), [])
        with self.assertRaises(FeedParseError):
            parse_feed_xml_strict(xml)

    def test_unprefixed_fields_are_used(self):
        xml = """<rss version="2.0"><channel><item>
            <title>Plain</title><price>7.50</price><brand>Arctic</brand>
        </item></channel></rss>"""

        (item,) = parse_feed_xml(xml)

        self.assertEqual(item.price, Decimal("7.50"))
        self.assertEqual(item.vendor, "Arctic")

    def test_variant_namespace_uri_keeps_google_fields(self):
        xml = """<rss version="2.0" xmlns:g="http://base.google.com/ns/2.0"><channel><item>
            <title>Variant</title><g:price>19.99 GBP</g:price><g:brand>be quiet!</g:brand>
        </item></channel></rss>"""

        (item,) = parse_feed_xml(xml)

        self.assertEqual(item.price, Decimal("19.99"))
        self.assertEqual(item.vendor, "be quiet!")

    def test_unknown_namespace_uri_falls_back_to_local_name(self):
        xml = """<rss version="2.0" xmlns:g="urn:supplier:shopping"><channel><item>
            <title>Elsewhere</title><g:price>3.00</g:price>
        </item></channel></rss>"""

        (item,) = parse_feed_xml(xml)

        self.assertEqual(item.price, Decimal("3.00"))


class AtomParsingTests(SimpleTestCase):
    def test_atom_entries_have_zero_price_and_are_in_stock(self):
        items = parse_feed_xml(ATOM_FEED)

        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].name, "Corsair Vengeance DDR5 32GB")
        self.assertEqual(items[0].description, "Fast memory kit")
        self.assertEqual(items[0].price, Decimal("0.00"))
        self.assertTrue(items[0].in_stock)
        self.assertEqual(items[0].feed_category, "RAM")


class GenericParsingTests(SimpleTestCase):
    def test_products_document(self):
        items = parse_feed_xml(GENERIC_PRODUCTS)

        self.assertEqual(len(items), 1)
        item = items[0]
        self.assertEqual(item.name, "Samsung 990 Pro 2TB")
        self.assertEqual(item.price, Decimal("149.99"))
        self.assertEqual(item.compare_at_price, Decimal("179.99"))
        self.assertEqual(item.vendor, "Samsung")
        self.assertEqual(item.feed_category, "Storage")
        self.assertFalse(item.in_stock)

    def test_catalog_root_is_accepted(self):
        xml = "<catalog><product><title>Fan</title><price>9.99</price></product></catalog>"
        items = parse_feed_xml(xml)
        self.assertEqual([(i.name, i.price) for i in items], [("Fan", Decimal("9.99"))])


class MalformedInputTests(SimpleTestCase):
    """
    Lenient parse never raises; strict parse reports why.
    """

    def test_malformed_xml_yields_empty_list(self):
        self.assertEqual(parse_feed_xml("<rss><channel><item>"), [])

    def test_unknown_root_yields_empty_list(self):
        self.assertEqual(parse_feed_xml("<html><body>hi</body></html>"), [])

    def test_empty_input(self):
        self.assertEqual(parse_feed_xml(""), [])
        self.assertEqual(parse_feed_xml(b"   "), [])

    def test_strict_raises(self):
        with self.assertRaises(FeedParseError):
            parse_feed_xml_strict("not xml at all <")

        with self.assertRaises(FeedParseError):
            parse_feed_xml_strict("")
