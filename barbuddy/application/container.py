"""Composition root / DI container.

Owns the process-wide collaborators (event bus, error reporter) and wires the
watch lifecycle with platform ports injected by the host.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from barbuddy.application.ports import (
    BackgroundRefreshPort,
    ComplicationServerPort,
    PhoneSyncPort,
)
from barbuddy.application.watch_lifecycle import WatchLifecycle
from barbuddy.config import PROJECT_ROOT
from barbuddy.core.events import EventBus
from barbuddy.core.observability.error_reporter import ErrorReporter

if TYPE_CHECKING:
    from barbuddy.ui.infrastructure.notifications import NotificationCenter


class Container:
    """Resolves application services. Single place to swap implementations if needed."""

    def __init__(self) -> None:
        self._event_bus: EventBus | None = None
        self._error_reporter: ErrorReporter | None = None
        self._watch_lifecycle: WatchLifecycle | None = None
        self._notifications: NotificationCenter | None = None

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus()
        return self._event_bus

    @property
    def error_reporter(self) -> ErrorReporter:
        """The one reporter of this process. Pass it to anything that reports or observes failures."""
        if self._error_reporter is None:
            self._error_reporter = ErrorReporter(self.event_bus)
        return self._error_reporter

    def configure_watch(
        self,
        sync: PhoneSyncPort,
        complications: ComplicationServerPort,
        scheduler: BackgroundRefreshPort,
    ) -> WatchLifecycle:
        """Bind the watch platform ports. Call once from the watch extension entry point."""
        self._watch_lifecycle = WatchLifecycle(
            sync, complications, scheduler, reporter=self.error_reporter
        )
        return self._watch_lifecycle

    @property
    def watch_lifecycle(self) -> WatchLifecycle:
        if self._watch_lifecycle is None:
            raise RuntimeError("Watch ports must be configured with configure_watch()")
        return self._watch_lifecycle

    @property
    def notifications(self) -> NotificationCenter:
        if self._notifications is None:
            raise RuntimeError("NotificationCenter must be injected from UI")
        return self._notifications

    @notifications.setter
    def notifications(self, notifications: NotificationCenter) -> None:
        self._notifications = notifications

    # --- Paths ---
    @property
    def project_root(self) -> Path:
        return PROJECT_ROOT
