# feeds/apps.py

"""
FEEDS APP CONFIG

Product feed import pipeline + outbound feeds.

Scheduler ownership:
- When FEED_SCHEDULER_AUTOSTART is on, this config owns the one FeedScheduler
  for the process (FeedsConfig.scheduler) and starts it from ready().
- Under `runserver` only the autoreloader's child process starts it.
- Otherwise run `manage.py run_feed_scheduler` as its own process.
"""

import logging
import os
import sys

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

# Management commands that must never spin up a background loop.
_NO_SCHEDULER_COMMANDS = {
    "makemigrations",
    "migrate",
    "collectstatic",
    "shell",
    "test",
    "check",
    "run_feed_scheduler",
    "import_feed",
}


def _should_autostart(argv) -> bool:
    if not getattr(settings, "FEED_SCHEDULER_AUTOSTART", False):
        return False
    command = argv[1] if len(argv) > 1 else ""
    if command in _NO_SCHEDULER_COMMANDS:
        return False
    if command == "runserver" and os.environ.get("RUN_MAIN") != "true":
        return False
    return True


class FeedsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "feeds"
    verbose_name = "Product Feeds"

    scheduler = None

    def ready(self):
        if not _should_autostart(sys.argv):
            return

        from feeds.services.scheduler import FeedScheduler

        if FeedsConfig.scheduler is None:
            FeedsConfig.scheduler = FeedScheduler()
        if FeedsConfig.scheduler.start():
            logger.info("Feed scheduler autostarted (pid=%s)", os.getpid())
