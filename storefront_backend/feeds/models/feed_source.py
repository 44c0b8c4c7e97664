# feeds/models/feed_source.py

from datetime import timedelta

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from catalog.models import Category


class FeedSource(models.Model):
    """
    A supplier/marketing feed URL imported on a schedule.

    RUN BOOKKEEPING:
    - last_import_at is stamped on every attempt (success OR failure)
    - last_import_count is the number of products created by the last attempt
    - last_error is cleared on success, set to the failure message otherwise
    - category is the FALLBACK used when an item's feed category can't be matched
    """

    name = models.CharField(max_length=255)
    url = models.CharField(max_length=2048)

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="feed_sources",
    )

    interval_hours = models.PositiveIntegerField(
        default=6,
        validators=[MinValueValidator(1)],
    )
    enabled = models.BooleanField(default=True)

    last_import_at = models.DateTimeField(null=True, blank=True)
    last_import_count = models.IntegerField(null=True, blank=True)
    last_error = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"{self.name} ({self.url})"

    @property
    def interval(self) -> timedelta:
        return timedelta(hours=int(self.interval_hours or 0))

    def is_due(self, now=None) -> bool:
        """
        Due when never imported, or when at least interval_hours have elapsed.
        """
        if self.last_import_at is None:
            return True
        now = now or timezone.now()
        return now - self.last_import_at >= self.interval

    def record_run(self, *, now, count: int, error: str | None = None) -> None:
        self.last_import_at = now
        self.last_import_count = count
        self.last_error = error
        self.save(update_fields=["last_import_at", "last_import_count", "last_error"])
