# feeds/services/scheduler.py

"""
FEED SCHEDULER

A single polling loop that imports every enabled FeedSource whose interval
has elapsed.

Lifecycle (explicit handle, no module globals):
    scheduler = FeedScheduler()
    scheduler.start()     # idempotent: second call while running is a no-op
    ...
    scheduler.stop()      # False if the current tick outlived the timeout

start() refuses while a previous loop is still alive, so at most one
"feed-scheduler" thread exists per FeedScheduler.

Loop rules:
- fixed tick (settings.FEED_SCHEDULER_TICK_SECONDS, default 5 minutes);
  the first tick happens one interval after start()
- sources are processed sequentially; a slow fetch delays the rest of the tick
- one source failing never stops the tick; a failing tick never stops the loop
- run_once() performs a single tick synchronously (tests, --once, cron)
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from django.conf import settings
from django.db import close_old_connections
from django.utils import timezone

from feeds.models import FeedSource
from feeds.services.runner import run_feed_source
from feeds.services.types import SourceRunOutcome

logger = logging.getLogger(__name__)

DEFAULT_TICK_SECONDS = 5 * 60


def _default_tick_seconds() -> int:
    return int(getattr(settings, "FEED_SCHEDULER_TICK_SECONDS", DEFAULT_TICK_SECONDS) or DEFAULT_TICK_SECONDS)


class FeedScheduler:
    def __init__(
        self,
        *,
        tick_seconds: Optional[int] = None,
        clock: Callable = timezone.now,
    ):
        self.tick_seconds = int(tick_seconds or _default_tick_seconds())
        self._clock = clock
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # -------------------------------------------------
    # lifecycle
    # -------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """
        Returns True if a loop was started, False if one is still alive
        (including a stopped loop that has not finished its current tick).
        """
        with self._lock:
            if self.is_running:
                return False

            # One event per loop thread.
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._loop,
                args=(stop_event,),
                name="feed-scheduler",
                daemon=True,
            )
            self._thread.start()

        logger.info(
            "Started - checking every %s for feeds due for import",
            _describe_seconds(self.tick_seconds),
        )
        return True

    def stop(self, timeout: float = 5.0) -> bool:
        """
        Signal the loop and join it. Returns True once no loop is alive.

        If the join times out the handle is kept, so start() keeps refusing
        until the in-flight tick returns and the thread exits.
        """
        with self._lock:
            thread = self._thread
            self._stop_event.set()

        if thread is None:
            return True

        thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning("Stop requested; still finishing current tick")
            return False

        with self._lock:
            if self._thread is thread:
                self._thread = None
        logger.info("Stopped")
        return True

    def wait(self) -> None:
        """
        Block the calling thread until stop() (foreground mode).
        """
        while self.is_running:
            self._stop_event.wait(1.0)

    # -------------------------------------------------
    # ticking
    # -------------------------------------------------
    def _loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.tick_seconds):
            self._safe_tick()

    def _safe_tick(self) -> None:
        close_old_connections()
        try:
            self.run_once()
        except Exception:
            logger.exception("Scheduler tick failed")
        finally:
            close_old_connections()

    def run_once(self, now=None) -> list[SourceRunOutcome]:
        now = now or self._clock()
        outcomes: list[SourceRunOutcome] = []

        sources = list(FeedSource.objects.filter(enabled=True).order_by("id"))

        for source in sources:
            if not source.is_due(now):
                outcomes.append(
                    SourceRunOutcome(
                        source_id=source.id,
                        name=source.name,
                        status=SourceRunOutcome.STATUS_NOT_DUE,
                    )
                )
                continue

            try:
                outcome, _ = run_feed_source(source, now=now)
            except Exception as exc:
                # Recording the failure itself failed (e.g. DB hiccup).
                logger.exception("%s: could not record import outcome", source.name)
                outcome = SourceRunOutcome(
                    source_id=source.id,
                    name=source.name,
                    status=SourceRunOutcome.STATUS_FAILED,
                    error=str(exc),
                )
            outcomes.append(outcome)

        return outcomes


def _describe_seconds(seconds: int) -> str:
    if seconds % 60 == 0:
        minutes = seconds // 60
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    return f"{seconds} seconds"
