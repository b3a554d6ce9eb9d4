"""Application port for background refresh scheduling and refresh tasks."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Protocol

ScheduleCallback = Callable[[BaseException | None], None]


class RefreshTaskKind(str, Enum):
    APP_REFRESH = "app_refresh"
    SNAPSHOT = "snapshot"
    URL_SESSION = "url_session"
    RELEVANT_SHORTCUT = "relevant_shortcut"
    INTENT_DID_RUN = "intent_did_run"
    OTHER = "other"


class RefreshTask(Protocol):
    kind: RefreshTaskKind

    def complete(self, *, snapshot: bool = False) -> None:
        """Mark the task done; ``snapshot`` asks for a new UI snapshot."""

    def complete_snapshot(self, *, restored_default_state: bool, expires_at: datetime) -> None:
        """Finish a snapshot task."""


class BackgroundRefreshPort(Protocol):
    def schedule_refresh(self, preferred_date: datetime, on_done: ScheduleCallback) -> None:
        """Request a background refresh around ``preferred_date``.

        ``on_done`` receives None on success or the scheduling error.
        """
