# feeds/tests/test_public_feeds.py

from datetime import date
from decimal import Decimal
from xml.etree import ElementTree as ET

from django.test import TestCase

from catalog.models import Category, Product
from feeds.models import CustomFeed
from feeds.services.generators import SITEMAP_NS, sitemap_xml
from feeds.services.parser import parse_feed_xml

G = "{http://base.google.com/ns/1.0}"


class PublicFeedTests(TestCase):
    """
    Outbound feeds.

    GUARANTEES:
    - served as application/xml without authentication
    - output parses back through the feed parser
    - special characters are escaped
    """

    def setUp(self):
        self.gpu = Category.objects.create(name="Graphics Cards")
        self.discounted = Product.objects.create(
            name="RTX 4080 Super & Co <OC>",
            slug="rtx-4080-super-co-oc",
            price=Decimal("899.00"),
            compare_at_price=Decimal("999.00"),
            category=self.gpu,
            vendor="ASUS",
        )
        self.plain = Product.objects.create(
            name="Generic Case Fan",
            slug="generic-case-fan",
            price=Decimal("7.50"),
            in_stock=False,
        )

    def _get(self, path, **extra):
        res = self.client.get(path, **extra)
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res["Content-Type"], "application/xml; charset=utf-8")
        return res

    def test_google_shopping_feed(self):
        res = self._get(
            "/feeds/google-shopping.xml",
            HTTP_X_FORWARDED_PROTO="https",
            HTTP_X_FORWARDED_HOST="shop.example.com",
        )

        root = ET.fromstring(res.content)
        items = {i.find(f"{G}id").text: i for i in root.iter("item")}

        item = items[str(self.discounted.id)]
        self.assertEqual(item.find("title").text, "RTX 4080 Super & Co <OC>")
        self.assertEqual(item.find("link").text, "https://shop.example.com/product/rtx-4080-super-co-oc")
        # Selling price in both; sale_price marks the product as discounted.
        self.assertEqual(item.find(f"{G}price").text, "899.00 GBP")
        self.assertEqual(item.find(f"{G}sale_price").text, "899.00 GBP")
        self.assertEqual(item.find(f"{G}availability").text, "in_stock")
        self.assertEqual(item.find(f"{G}brand").text, "ASUS")
        self.assertEqual(item.find(f"{G}product_type").text, "Graphics Cards")
        self.assertEqual(item.find(f"{G}identifier_exists").text, "false")

        plain = items[str(self.plain.id)]
        self.assertIsNone(plain.find(f"{G}sale_price"))
        self.assertEqual(plain.find(f"{G}availability").text, "out_of_stock")
        self.assertEqual(plain.find(f"{G}image_link").text, "https://shop.example.com/placeholder-product.png")

    def test_google_shopping_round_trips_through_parser(self):
        res = self._get("/feeds/google-shopping.xml")
        parsed = {i.name: i for i in parse_feed_xml(res.content)}

        item = parsed["RTX 4080 Super & Co <OC>"]
        self.assertEqual(item.price, Decimal("899.00"))
        self.assertEqual(item.compare_at_price, Decimal("899.00"))
        self.assertEqual(item.feed_category, "Graphics Cards")
        self.assertIsNone(parsed["Generic Case Fan"].compare_at_price)
        self.assertFalse(parsed["Generic Case Fan"].in_stock)

    def test_facebook_feed(self):
        res = self._get("/feeds/facebook.xml")
        root = ET.fromstring(res.content)
        availability = {i.find("title").text: i.find("availability").text for i in root.iter("item")}

        self.assertEqual(availability["Generic Case Fan"], "out of stock")
        self.assertEqual(availability["RTX 4080 Super & Co <OC>"], "in stock")

    def test_facebook_feed_prices(self):
        res = self._get("/feeds/facebook.xml")
        items = {i.find("title").text: i for i in ET.fromstring(res.content).iter("item")}

        discounted = items["RTX 4080 Super & Co <OC>"]
        self.assertEqual(discounted.find("price").text, "899.00 GBP")
        self.assertEqual(discounted.find("sale_price").text, "899.00 GBP")
        self.assertIsNone(items["Generic Case Fan"].find("sale_price"))

    def test_products_feed_round_trips_through_parser(self):
        res = self._get("/feeds/products.xml")
        parsed = {i.name: i for i in parse_feed_xml(res.content)}

        item = parsed["RTX 4080 Super & Co <OC>"]
        self.assertEqual(item.price, Decimal("899.00"))
        self.assertEqual(item.compare_at_price, Decimal("999.00"))
        self.assertEqual(item.vendor, "ASUS")
        self.assertFalse(parsed["Generic Case Fan"].in_stock)

    def test_sitemap(self):
        res = self._get("/sitemap.xml")
        root = ET.fromstring(res.content)
        locs = [el.text for el in root.iter(f"{{{SITEMAP_NS}}}loc")]

        self.assertEqual(locs[0], "http://testserver/")
        self.assertIn("http://testserver/category/graphics-cards", locs)
        self.assertIn("http://testserver/product/generic-case-fan", locs)

    def test_sitemap_priorities(self):
        xml = sitemap_xml([self.plain], [self.gpu], "https://shop.example.com", today=date(2024, 1, 2))
        root = ET.fromstring(xml)
        urls = root.findall(f"{{{SITEMAP_NS}}}url")

        rows = [
            (u.find(f"{{{SITEMAP_NS}}}changefreq").text, u.find(f"{{{SITEMAP_NS}}}priority").text)
            for u in urls
        ]
        self.assertEqual(rows, [("daily", "1.0"), ("daily", "0.8"), ("weekly", "0.6")])
        self.assertEqual(urls[0].find(f"{{{SITEMAP_NS}}}lastmod").text, "2024-01-02")

    def test_custom_feed_served_verbatim(self):
        content = '<rss version="2.0"><channel><title>Deals</title></channel></rss>'
        CustomFeed.objects.create(name="Deals", slug="deals", content=content)

        res = self._get("/feeds/custom/deals.xml")
        self.assertEqual(res.content.decode("utf-8"), content)

    def test_unknown_custom_feed_is_404(self):
        res = self.client.get("/feeds/custom/missing.xml")
        self.assertEqual(res.status_code, 404)

    def test_index(self):
        CustomFeed.objects.create(name="Deals", slug="deals", content="<x/>")

        res = self.client.get("/feeds/")

        self.assertEqual(res.status_code, 200)
        data = res.json()
        self.assertEqual(data["feeds"]["sitemap"], "http://testserver/sitemap.xml")
        self.assertEqual(data["custom"], [{"name": "Deals", "url": "http://testserver/feeds/custom/deals.xml"}])
