# feeds/tests/test_matcher.py

from django.test import SimpleTestCase

from feeds.services.category_matcher import match_category
from feeds.services.keywords import DEFAULT_KEYWORDS_FILE, load_keyword_table_from
from feeds.services.types import StoreCategory

CATEGORIES = [
    StoreCategory(id=1, name="Graphics Cards", slug="graphics-cards"),
    StoreCategory(id=2, name="Processors", slug="processors"),
    StoreCategory(id=3, name="Memory", slug="memory"),
    StoreCategory(id=4, name="Storage", slug="storage"),
    StoreCategory(id=5, name="Cooling", slug="cooling"),
]


class CategoryMatcherTests(SimpleTestCase):
    """
    GUARANTEES:
    - exact name / slug matches win
    - substring either way is the second tier
    - the keyword table is the last resort
    """

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.table = load_keyword_table_from(DEFAULT_KEYWORDS_FILE)

    def match(self, value):
        return match_category(value, CATEGORIES, self.table)

    def test_exact_name(self):
        self.assertEqual(self.match("Graphics Cards"), 1)
        self.assertEqual(self.match("  graphics cards "), 1)

    def test_exact_slug(self):
        self.assertEqual(self.match("processors"), 2)

    def test_substring_either_direction(self):
        self.assertEqual(self.match("Components > Memory"), 3)
        self.assertEqual(self.match("Stor"), 4)

    def test_keyword_fallback(self):
        self.assertEqual(self.match("RTX 4090 GPU"), 1)
        self.assertEqual(self.match("NVMe SSD"), 4)
        self.assertEqual(self.match("AIO Liquid"), 5)

    def test_no_match(self):
        self.assertIsNone(self.match("Garden Furniture"))
        self.assertIsNone(self.match(""))
        self.assertIsNone(self.match(None))

    def test_categories_without_table_entry_only_use_first_tiers(self):
        cats = [StoreCategory(id=9, name="Bundles", slug="bundles")]
        self.assertIsNone(match_category("RTX 4090 GPU", cats, self.table))

    def test_first_category_in_order_wins(self):
        cats = [
            StoreCategory(id=20, name="Memory", slug="memory"),
            StoreCategory(id=10, name="Memory Kits", slug="memory-kits"),
        ]
        self.assertEqual(match_category("memory kits ddr5", cats, self.table), 20)
