"""
QApplication setup: High DPI, organization and app name for QSettings.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from barbuddy.config import APP_NAME, ORGANIZATION_NAME
from barbuddy.core.version import get_build_info


def create_application() -> QApplication:
    """Create and configure QApplication. Call before any Qt widgets."""
    QGuiApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationVersion(get_build_info()["version"])
    return app


def run_application(app: QApplication) -> NoReturn:
    """Run the event loop. Does not return until app quits."""
    sys.exit(app.exec())
