# feeds/management/commands/import_feed.py

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from feeds.models import FeedSource
from feeds.services.exceptions import FeedError
from feeds.services.fetcher import fetch_feed
from feeds.services.importer import import_from_url
from feeds.services.parser import parse_feed_xml_strict
from feeds.services.runner import run_feed_source


class Command(BaseCommand):
    help = "Import products from a feed URL, or run one configured FeedSource now."

    def add_arguments(self, parser):
        parser.add_argument("url", nargs="?", help="Feed URL (RSS / Google Shopping / Atom / <products>).")
        parser.add_argument("--category", type=int, default=None, help="Fallback category id.")
        parser.add_argument("--source", type=int, default=None, help="FeedSource id to run instead of a URL.")
        parser.add_argument(
            "--preview",
            action="store_true",
            help="Parse and list items without importing.",
        )

    def handle(self, *args, **options):
        url = options.get("url")
        source_id = options.get("source")

        if bool(url) == bool(source_id):
            raise CommandError("Provide exactly one of <url> or --source.")

        if source_id:
            source = FeedSource.objects.filter(pk=source_id).first()
            if source is None:
                raise CommandError(f"FeedSource {source_id} does not exist.")
            try:
                _, result = run_feed_source(source, raise_errors=True)
            except FeedError as exc:
                raise CommandError(str(exc)) from exc
            self._report(result)
            return

        if options.get("preview"):
            try:
                items = parse_feed_xml_strict(fetch_feed(url))
            except FeedError as exc:
                raise CommandError(str(exc)) from exc
            for item in items:
                self.stdout.write(f"{item.name} | {item.price} | {item.feed_category or '-'}")
            self.stdout.write(f"{len(items)} item(s).")
            return

        try:
            result = import_from_url(url, options.get("category"))
        except FeedError as exc:
            raise CommandError(str(exc)) from exc
        self._report(result)

    def _report(self, result):
        self.stdout.write(
            self.style.SUCCESS(
                f"Imported {result.imported}, skipped {result.skipped}, "
                f"categories matched {result.categories_matched}."
            )
        )
        for name in result.skipped_names:
            self.stdout.write(f"  skipped: {name}")
