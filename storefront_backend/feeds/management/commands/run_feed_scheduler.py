# feeds/management/commands/run_feed_scheduler.py

from __future__ import annotations

from django.core.management.base import BaseCommand

from feeds.services.scheduler import FeedScheduler
from feeds.services.types import SourceRunOutcome


class Command(BaseCommand):
    help = "Run the feed scheduler in the foreground (Ctrl+C to stop)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--once",
            action="store_true",
            help="Run a single tick and exit (cron-friendly).",
        )
        parser.add_argument(
            "--tick",
            type=int,
            default=None,
            help="Seconds between ticks (defaults to FEED_SCHEDULER_TICK_SECONDS).",
        )

    def handle(self, *args, **options):
        scheduler = FeedScheduler(tick_seconds=options.get("tick"))

        if options.get("once"):
            self._report(scheduler.run_once())
            return

        self.stdout.write(f"Feed scheduler running every {scheduler.tick_seconds}s. Ctrl+C to stop.")
        scheduler.start()
        try:
            scheduler.wait()
        except KeyboardInterrupt:
            self.stdout.write("Stopping feed scheduler...")
        finally:
            scheduler.stop()

    def _report(self, outcomes):
        if not outcomes:
            self.stdout.write("No enabled feed sources.")
            return

        for o in outcomes:
            if o.status == SourceRunOutcome.STATUS_IMPORTED:
                self.stdout.write(
                    self.style.SUCCESS(
                        f"{o.name}: imported {o.imported}, skipped {o.skipped}, "
                        f"categories matched {o.categories_matched}"
                    )
                )
            elif o.status == SourceRunOutcome.STATUS_FAILED:
                self.stdout.write(self.style.ERROR(f"{o.name}: {o.error}"))
            else:
                self.stdout.write(f"{o.name}: not due")
