"""
Entry point for the BarBuddy desktop shell.

Run: python main.py
Requires: pip install -e .

Wires the error reporter into the Qt host: failures reported from any thread are
shown by the notification center and acknowledged afterwards.
"""
from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QMainWindow

from barbuddy.application.container import Container
from barbuddy.config import APP_NAME
from barbuddy.core.observability.logging_config import setup_logging
from barbuddy.core.version import get_version_string
from barbuddy.ui.infrastructure import (
    FailurePresenter,
    FailureSignals,
    NotificationCenter,
    create_application,
    install_error_boundary,
)
from barbuddy.ui.infrastructure.application import run_application


def main() -> None:
    setup_logging()
    logging.getLogger(__name__).info("Starting %s %s", APP_NAME, get_version_string())
    app = create_application()

    container = Container()
    reporter = container.error_reporter
    # Hooks go in before the window so failures during UI construction are reported too.
    install_error_boundary(reporter)

    window = QMainWindow()
    window.setWindowTitle(APP_NAME)
    window.statusBar()
    window.show()

    notifications = NotificationCenter(window)
    container.notifications = notifications

    # Queued through Qt so dialogs always open on the main thread.
    signals = FailureSignals(window)
    signals.bind(reporter)
    presenter = FailurePresenter(reporter, notifications)
    signals.failure_changed.connect(presenter.present)

    run_application(app)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
