"""Application configuration and constants.

Project root, the fixed logger used by the error reporter and the timing of
watch background refreshes.
"""

from datetime import timedelta
from pathlib import Path

# Base paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Error reporting. Log records from the reporter are filtered by this name.
ERROR_LOGGER_NAME = "barbuddy.errors"

# Watch background refresh
BACKGROUND_REFRESH_INTERVAL = timedelta(minutes=15)
SNAPSHOT_EXPIRATION = timedelta(hours=1)

# Qt application identity (QSettings path, window titles)
APP_NAME = "BarBuddy"
ORGANIZATION_NAME = "BarBuddy"
