from __future__ import annotations

import logging
import sys
import threading
import traceback

from barbuddy.core.observability.error_reporter import ErrorReporter
from barbuddy.core.observability.source_location import SourceLocation


def install_error_boundary(reporter: ErrorReporter, notifications=None) -> None:  # type: ignore[no-untyped-def]
    """Install global exception hooks.

    Uncaught exceptions on the main thread and in background threads are logged
    with their traceback and become the reporter's current failure, so the UI can
    show them instead of crashing silently.

    Pass ``notifications`` only when no FailurePresenter is attached; it then gets
    a generic hint pointing at the logs.
    """

    log = logging.getLogger(__name__)

    def _handle(exc_type, exc, tb) -> None:  # type: ignore[no-untyped-def]
        try:
            msg = "".join(traceback.format_exception(exc_type, exc, tb))
            log.error("Unhandled exception\n%s", msg)
            if exc is not None:
                reporter.report(exc, SourceLocation.from_traceback(tb))
            if notifications is not None:
                notifications.error("An unexpected error occurred. Check the application logs.")
        finally:
            # Keep default behavior in console
            try:
                sys.__excepthook__(exc_type, exc, tb)
            except Exception:
                return

    sys.excepthook = _handle

    def _thread_hook(args: threading.ExceptHookArgs) -> None:
        if args.exc_type is SystemExit:
            return
        _handle(args.exc_type, args.exc_value, args.exc_traceback)

    threading.excepthook = _thread_hook
