"""Centralized failure reporting.

The reporter is the terminal sink for failures: it classifies them, logs them with
the location they were reported from and keeps the latest one for the UI until it
is acknowledged with ``clear()``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import RLock

from barbuddy.config import ERROR_LOGGER_NAME
from barbuddy.core.errors import FailureCategory, classify
from barbuddy.core.events.event_bus import EventBus, Subscription
from barbuddy.core.events.events import FailureChanged
from barbuddy.core.observability.source_location import SourceLocation


class ErrorReporter:
    """Classifies, logs and exposes the most recent unhandled failure.

    One instance per process, owned by the composition root and passed to whoever
    needs to report or observe failures. Only one failure is pending at a time:
    a new report overwrites an unacknowledged one.

    State changes and the matching ``FailureChanged`` publication happen under one
    re-entrant lock, so observers see transitions in order and may call ``clear()``
    from their handler.
    """

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._lock = RLock()
        self._bus = event_bus if event_bus is not None else EventBus()
        self._log = logger if logger is not None else logging.getLogger(ERROR_LOGGER_NAME)
        self._current: FailureCategory | None = None

    @property
    def current_failure(self) -> FailureCategory | None:
        with self._lock:
            return self._current

    @property
    def event_bus(self) -> EventBus:
        return self._bus

    def report(self, failure: object, location: SourceLocation | None = None) -> None:
        """Record ``failure`` as the current one. Never raises.

        ``location`` defaults to the caller's file and line.
        """
        if location is None:
            location = SourceLocation.here(depth=1)
        classified = classify(failure)
        self._write_log(classified, location)
        with self._lock:
            previous = self._current
            self._current = classified
            self._bus.publish(
                FailureChanged(current=classified, previous=previous, location=location)
            )

    def clear(self) -> None:
        """Acknowledge the current failure. Safe to call when nothing is pending."""
        with self._lock:
            previous = self._current
            if previous is None:
                return
            self._current = None
            self._bus.publish(FailureChanged(current=None, previous=previous))

    def subscribe(self, handler: Callable[[FailureChanged], None]) -> Subscription:
        return self._bus.subscribe(FailureChanged, handler)

    def subscribe_weak(self, handler: Callable[[FailureChanged], None]) -> Subscription:
        return self._bus.subscribe_weak(FailureChanged, handler)

    def unsubscribe(self, subscription: Subscription) -> None:
        self._bus.unsubscribe(subscription)

    def _write_log(self, failure: FailureCategory, location: SourceLocation) -> None:
        try:
            self._log.error(
                "Error at %s:%d - %s",
                location.file_name,
                location.line,
                failure.summary,
                extra={
                    "event": "failure_reported",
                    "failure_kind": failure.kind,
                    "source_file": location.file_name,
                    "source_line": location.line,
                },
            )
        except Exception:
            # Reporting must not fail because a log handler did.
            return
