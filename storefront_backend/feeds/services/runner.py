# feeds/services/runner.py

"""
FEED SOURCE RUNNER

One import attempt for one FeedSource, with the outcome written back onto the
row. Shared by the scheduler tick and the admin "run now" action so both
record runs identically:

- success: last_import_at=now, last_import_count=imported, last_error=None
- failure: last_import_at=now, last_import_count=0, last_error=<message>
"""

from __future__ import annotations

import logging

from django.utils import timezone

from feeds.models import FeedSource
from feeds.services.importer import import_from_url
from feeds.services.types import ImportResult, SourceRunOutcome

logger = logging.getLogger(__name__)


def run_feed_source(
    source: FeedSource,
    *,
    now=None,
    raise_errors: bool = False,
) -> tuple[SourceRunOutcome, ImportResult | None]:
    """
    raise_errors=False (scheduler): failures are recorded and reported in the
    outcome. raise_errors=True (manual run): recorded, then re-raised.
    """
    now = now or timezone.now()

    logger.info("Importing from: %s (%s)", source.name, source.url)

    try:
        result = import_from_url(source.url, source.category_id)
    except Exception as exc:
        message = str(exc) or exc.__class__.__name__
        source.record_run(now=now, count=0, error=message)
        logger.error("%s error: %s", source.name, message)
        if raise_errors:
            raise
        return (
            SourceRunOutcome(
                source_id=source.id,
                name=source.name,
                status=SourceRunOutcome.STATUS_FAILED,
                error=message,
            ),
            None,
        )

    source.record_run(now=now, count=result.imported, error=None)
    logger.info(
        "%s: imported %d, skipped %d, categories matched %d",
        source.name,
        result.imported,
        result.skipped,
        result.categories_matched,
    )
    return (
        SourceRunOutcome(
            source_id=source.id,
            name=source.name,
            status=SourceRunOutcome.STATUS_IMPORTED,
            imported=result.imported,
            skipped=result.skipped,
            categories_matched=result.categories_matched,
        ),
        result,
    )
