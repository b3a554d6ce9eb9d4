from __future__ import annotations

import logging
from typing import Protocol

from barbuddy.core.errors import FailureCategory
from barbuddy.core.events import FailureChanged, Subscription
from barbuddy.core.observability.error_reporter import ErrorReporter

try:
    from PySide6.QtWidgets import QMessageBox
except ImportError:  # pragma: no cover
    QMessageBox = None  # type: ignore[assignment,misc]

log = logging.getLogger(__name__)


class NotificationCenter:
    """Very small notification helper.

    Shows a short status message when the host window has a status bar and falls
    back to QMessageBox for errors.
    """

    def __init__(self, window) -> None:
        self._window = window

    def _status(self, text: str, *, ms: int = 4500) -> None:
        try:
            sb = getattr(self._window, "statusBar", None)
            if callable(sb):
                sb = sb()
            if sb is not None and hasattr(sb, "showMessage"):
                sb.showMessage(text, ms)
        except Exception:
            log.debug("Notification display failed", exc_info=True)

    @staticmethod
    def _join_message(title_or_message: str, message: str | None = None) -> str:
        if message is None:
            return title_or_message
        return f"{title_or_message}: {message}" if title_or_message else message

    def info(self, title_or_message: str, message: str | None = None) -> None:
        self._status(self._join_message(title_or_message, message))

    def warning(self, title_or_message: str, message: str | None = None) -> None:
        self._status(self._join_message(title_or_message, message))

    def error(self, title_or_message: str, message: str | None = None) -> None:
        text = self._join_message(title_or_message, message)
        self._status(text)
        if QMessageBox is None or self._window is None:
            return
        try:
            QMessageBox.critical(self._window, "Error", text)
        except Exception:
            log.debug("Error dialog failed", exc_info=True)


class SupportsError(Protocol):
    def error(self, title_or_message: str, message: str | None = None) -> None: ...


class FailurePresenter:
    """Shows each reported failure once, then acknowledges it on the reporter.

    Subscribed directly to the reporter, the presenter runs in the reporting thread.
    In the Qt app connect ``present`` to ``FailureSignals.failure_changed`` instead
    so dialogs open on the main thread.
    """

    def __init__(self, reporter: ErrorReporter, notifications: SupportsError) -> None:
        self._reporter = reporter
        self._notifications = notifications
        self._subscription: Subscription | None = None

    def attach(self) -> None:
        if self._subscription is None:
            self._subscription = self._reporter.subscribe_weak(self._on_failure_changed)

    def detach(self) -> None:
        if self._subscription is not None:
            self._reporter.unsubscribe(self._subscription)
            self._subscription = None

    def present(self, failure: FailureCategory | None) -> None:
        if failure is None:
            return
        # Newer failure already replaced this one; it gets its own call.
        if self._reporter.current_failure is not failure:
            return
        self._notifications.error(failure.label, failure.message)
        self._reporter.clear()

    def _on_failure_changed(self, event: FailureChanged) -> None:
        self.present(event.current)
