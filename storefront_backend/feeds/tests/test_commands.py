# feeds/tests/test_commands.py

from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from catalog.models import Category, Product
from feeds.apps import _should_autostart
from feeds.models import FeedSource
from feeds.tests.fixtures import GOOGLE_SHOPPING_RSS


@patch("feeds.services.importer.fetch_feed")
class FeedCommandTests(TestCase):
    def setUp(self):
        Category.objects.create(name="Graphics Cards")
        Category.objects.create(name="Cooling")

    def test_run_feed_scheduler_once(self, mock_fetch):
        mock_fetch.return_value = GOOGLE_SHOPPING_RSS.encode("utf-8")
        source = FeedSource.objects.create(name="Supplier", url="https://s.example.com/f.xml")
        out = StringIO()

        call_command("run_feed_scheduler", "--once", stdout=out)

        self.assertIn("Supplier: imported 2", out.getvalue())
        source.refresh_from_db()
        self.assertEqual(source.last_import_count, 2)

    def test_run_feed_scheduler_once_without_sources(self, mock_fetch):
        out = StringIO()
        call_command("run_feed_scheduler", "--once", stdout=out)
        self.assertIn("No enabled feed sources", out.getvalue())

    def test_import_feed_url(self, mock_fetch):
        mock_fetch.return_value = GOOGLE_SHOPPING_RSS.encode("utf-8")
        out = StringIO()

        call_command("import_feed", "https://s.example.com/f.xml", stdout=out)

        self.assertIn("Imported 2", out.getvalue())
        self.assertEqual(Product.objects.count(), 2)

    def test_import_feed_needs_url_or_source(self, mock_fetch):
        with self.assertRaises(CommandError):
            call_command("import_feed", stdout=StringIO())


@patch("feeds.services.fetcher.urlopen")
class ImportFeedPreviewTests(TestCase):
    def test_preview_imports_nothing(self, mock_urlopen):
        response = mock_urlopen.return_value.__enter__.return_value
        response.status = 200
        response.read.return_value = GOOGLE_SHOPPING_RSS.encode("utf-8")
        out = StringIO()

        call_command("import_feed", "https://s.example.com/f.xml", "--preview", stdout=out)

        self.assertIn("2 item(s).", out.getvalue())
        self.assertEqual(Product.objects.count(), 0)


class AutostartRulesTests(TestCase):
    def test_disabled_by_default(self):
        self.assertFalse(_should_autostart(["manage.py", "runserver"]))

    def test_runserver_child_only(self):
        with self.settings(FEED_SCHEDULER_AUTOSTART=True):
            with patch.dict("os.environ", {"RUN_MAIN": "true"}):
                self.assertTrue(_should_autostart(["manage.py", "runserver"]))
            with patch.dict("os.environ", {}, clear=True):
                self.assertFalse(_should_autostart(["manage.py", "runserver"]))
            self.assertFalse(_should_autostart(["manage.py", "migrate"]))
            self.assertTrue(_should_autostart(["gunicorn", "backend.wsgi"]))
