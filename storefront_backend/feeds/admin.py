"""
=====================================================
PATH: feeds/admin.py
=====================================================

Django admin for feed sources and custom feeds.

- "Run import now" runs the selected sources through the same path as the
  scheduler, so last_import_* is recorded identically.
"""

from __future__ import annotations

from django.contrib import admin, messages

from feeds.models import CustomFeed, FeedSource
from feeds.services.runner import run_feed_source
from feeds.services.types import SourceRunOutcome


@admin.register(FeedSource)
class FeedSourceAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "url",
        "category",
        "interval_hours",
        "enabled",
        "last_import_at",
        "last_import_count",
        "last_error",
    )
    list_filter = ("enabled", "category")
    search_fields = ("name", "url")
    readonly_fields = ("last_import_at", "last_import_count", "last_error", "created_at")
    actions = ["run_import_now"]

    @admin.action(description="Run import now")
    def run_import_now(self, request, queryset):
        for source in queryset.order_by("id"):
            outcome, _ = run_feed_source(source)
            if outcome.status == SourceRunOutcome.STATUS_IMPORTED:
                self.message_user(
                    request,
                    f"{source.name}: imported {outcome.imported}, skipped {outcome.skipped}",
                    messages.SUCCESS,
                )
            else:
                self.message_user(request, f"{source.name}: {outcome.error}", messages.ERROR)


@admin.register(CustomFeed)
class CustomFeedAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "updated_at")
    search_fields = ("name", "slug")
    prepopulated_fields = {"slug": ("name",)}
