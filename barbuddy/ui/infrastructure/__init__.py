"""Infrastructure: application bootstrap, failure signal bridge, notifications, error boundary.

Keep this package import lightweight: do not import Qt GUI modules at import time.
Headless CI environments may have PySide6 installed but miss runtime GUI libs
(e.g. ``libGL.so.1``). Lazy exports below allow importing the presenter and the
error boundary without triggering Qt GUI initialization.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "create_application",
    "run_application",
    "FailurePresenter",
    "FailureSignals",
    "NotificationCenter",
    "install_error_boundary",
]

_EXPORTS = {
    "create_application": "barbuddy.ui.infrastructure.application",
    "run_application": "barbuddy.ui.infrastructure.application",
    "FailurePresenter": "barbuddy.ui.infrastructure.notifications",
    "NotificationCenter": "barbuddy.ui.infrastructure.notifications",
    "FailureSignals": "barbuddy.ui.infrastructure.signals",
    "install_error_boundary": "barbuddy.ui.infrastructure.error_boundary",
}


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)
