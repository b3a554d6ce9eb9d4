from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

from barbuddy.application.ports import (
    BackgroundRefreshPort,
    ComplicationServerPort,
    PhoneSyncPort,
    RefreshTask,
    RefreshTaskKind,
)
from barbuddy.config import BACKGROUND_REFRESH_INTERVAL, SNAPSHOT_EXPIRATION
from barbuddy.core.errors import FailureCategory, PeerConnectivityFailure, describe
from barbuddy.core.observability.error_reporter import ErrorReporter
from barbuddy.core.observability.source_location import SourceLocation

logger = logging.getLogger(__name__)


class WatchLifecycle:
    """
    Watch app lifecycle logic that must not live in the platform delegate.

    Responsibilities:
    - Activate the phone session on launch
    - Pull fresh drink data and reload complications whenever the app becomes active
    - Keep a background refresh scheduled for complications
    - Complete every background task it is handed

    Failures of the platform ports are routed to the error reporter, never raised.
    """

    def __init__(
        self,
        sync: PhoneSyncPort,
        complications: ComplicationServerPort,
        scheduler: BackgroundRefreshPort,
        reporter: ErrorReporter,
        *,
        refresh_interval: timedelta = BACKGROUND_REFRESH_INTERVAL,
        snapshot_expiration: timedelta = SNAPSHOT_EXPIRATION,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._sync = sync
        self._complications = complications
        self._scheduler = scheduler
        self._reporter = reporter
        self._refresh_interval = refresh_interval
        self._snapshot_expiration = snapshot_expiration
        self._clock = clock

    # --- Lifecycle ---
    def did_finish_launching(self) -> None:
        try:
            self._sync.activate_session()
        except Exception as e:  # noqa: BLE001
            self._report_peer_failure(e)
        self.schedule_background_refresh()

    def did_become_active(self) -> None:
        self.request_phone_data()
        self.update_all_complications()

    # --- Background tasks ---
    def handle_background_tasks(self, tasks: Iterable[RefreshTask]) -> None:
        for task in tasks:
            if task.kind is RefreshTaskKind.APP_REFRESH:
                self.request_phone_data()
                self.update_all_complications()
                self.schedule_background_refresh()
            try:
                self._complete(task)
            except Exception as e:  # noqa: BLE001
                self._reporter.report(e, SourceLocation.from_traceback(e.__traceback__))

    def _complete(self, task: RefreshTask) -> None:
        if task.kind is RefreshTaskKind.SNAPSHOT:
            task.complete_snapshot(
                restored_default_state=True,
                expires_at=self._clock() + self._snapshot_expiration,
            )
        else:
            # app refresh, url session, relevant shortcut, intent-did-run and anything new
            task.complete(snapshot=False)

    # --- Sync / complications ---
    def request_phone_data(self) -> None:
        try:
            self._sync.request_drink_data()
        except Exception as e:  # noqa: BLE001
            self._report_peer_failure(e)

    def update_all_complications(self) -> int:
        """Reload the timeline of every active complication. Returns how many were reloaded."""
        try:
            active = list(self._complications.active_complications() or [])
        except Exception as e:  # noqa: BLE001
            self._reporter.report(e, SourceLocation.from_traceback(e.__traceback__))
            return 0
        reloaded = 0
        for complication in active:
            try:
                self._complications.reload_timeline(complication)
            except Exception as e:  # noqa: BLE001
                self._reporter.report(e, SourceLocation.from_traceback(e.__traceback__))
                continue
            reloaded += 1
        return reloaded

    def schedule_background_refresh(self) -> datetime:
        """Ask the platform for the next refresh; returns the preferred date."""
        refresh_date = self._clock() + self._refresh_interval

        def _on_done(error: BaseException | None) -> None:
            if error is not None:
                logger.warning("Failed to schedule background refresh: %s", describe(error))
                self._reporter.report(error, SourceLocation.from_traceback(error.__traceback__))
                return
            logger.info("Scheduled next complication update for %s", refresh_date.isoformat())

        try:
            self._scheduler.schedule_refresh(refresh_date, _on_done)
        except Exception as e:  # noqa: BLE001
            _on_done(e)
        return refresh_date

    def _report_peer_failure(self, error: Exception) -> None:
        # Already classified failures (e.g. a network timeout) keep their category.
        failure = error if isinstance(error, FailureCategory) else PeerConnectivityFailure(
            describe(error), cause=error
        )
        self._reporter.report(failure, SourceLocation.from_traceback(error.__traceback__))
