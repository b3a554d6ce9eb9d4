"""
Thread-safe signal bridge: failures reported from any thread reach the main thread.
Views connect to ``failure_changed`` instead of subscribing to the reporter directly.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from barbuddy.core.events import FailureChanged, Subscription
from barbuddy.core.observability.error_reporter import ErrorReporter


class FailureSignals(QObject):
    """Emit from any thread; slots of main-thread objects run on the main thread."""

    failure_changed = Signal(object)  # FailureCategory or None after clear()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._subscription: Subscription | None = None
        self._reporter: ErrorReporter | None = None

    def bind(self, reporter: ErrorReporter) -> None:
        """Forward every transition of ``reporter.current_failure`` to ``failure_changed``."""
        self.unbind()
        self._reporter = reporter
        self._subscription = reporter.subscribe(self._on_failure_changed)

    def unbind(self) -> None:
        if self._reporter is not None and self._subscription is not None:
            self._reporter.unsubscribe(self._subscription)
        self._reporter = None
        self._subscription = None

    def _on_failure_changed(self, event: FailureChanged) -> None:
        self.failure_changed.emit(event.current)
