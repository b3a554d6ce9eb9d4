from __future__ import annotations

import logging

import pytest

from barbuddy.config import ERROR_LOGGER_NAME
from barbuddy.core.errors import DataFailure, GeneralFailure, NetworkFailure
from barbuddy.core.events import EventBus, FailureChanged
from barbuddy.core.observability.error_reporter import ErrorReporter
from barbuddy.core.observability.source_location import SourceLocation

LOC = SourceLocation(file="/src/barbuddy/sync/session.py", line=42)


def test_starts_without_failure() -> None:
    assert ErrorReporter().current_failure is None


def test_categorized_failure_is_stored_as_is() -> None:
    reporter = ErrorReporter()
    failure = NetworkFailure("timeout")

    reporter.report(failure, LOC)

    assert reporter.current_failure is failure


def test_foreign_failure_is_wrapped_as_general() -> None:
    reporter = ErrorReporter()

    reporter.report(RuntimeError("disk full"), LOC)

    assert reporter.current_failure == GeneralFailure("disk full")


def test_report_logs_file_line_and_summary(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger=ERROR_LOGGER_NAME)
    reporter = ErrorReporter()

    reporter.report(NetworkFailure("timeout"), LOC)

    records = [r for r in caplog.records if r.name == ERROR_LOGGER_NAME]
    assert len(records) == 1
    message = records[0].getMessage()
    assert message == "Error at session.py:42 - Network Error: timeout"
    assert records[0].levelno == logging.ERROR
    assert records[0].failure_kind == "network"
    assert records[0].source_file == "session.py"
    assert records[0].source_line == 42
    assert reporter.current_failure == NetworkFailure("timeout")


def test_last_report_wins() -> None:
    reporter = ErrorReporter()

    reporter.report(DataFailure("a"), LOC)
    reporter.report(NetworkFailure("b"), LOC)

    assert reporter.current_failure == NetworkFailure("b")


def test_same_failure_is_not_deduplicated(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger=ERROR_LOGGER_NAME)
    reporter = ErrorReporter()

    reporter.report(DataFailure("a"), LOC)
    reporter.report(DataFailure("a"), LOC)

    assert len([r for r in caplog.records if r.name == ERROR_LOGGER_NAME]) == 2


def test_clear_after_report() -> None:
    reporter = ErrorReporter()
    reporter.report(DataFailure("a"), LOC)

    reporter.clear()

    assert reporter.current_failure is None


def test_clear_is_idempotent() -> None:
    reporter = ErrorReporter()
    reporter.clear()
    reporter.clear()
    assert reporter.current_failure is None


def test_location_defaults_to_caller(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger=ERROR_LOGGER_NAME)
    reporter = ErrorReporter()

    reporter.report(DataFailure("x"))

    record = next(r for r in caplog.records if r.name == ERROR_LOGGER_NAME)
    assert record.source_file == "test_error_reporter.py"


def test_observers_receive_each_transition() -> None:
    bus = EventBus()
    reporter = ErrorReporter(bus)
    events: list[FailureChanged] = []
    reporter.subscribe(events.append)

    reporter.report(DataFailure("a"), LOC)
    reporter.report(NetworkFailure("b"), LOC)
    reporter.clear()
    reporter.clear()

    assert [e.current for e in events] == [DataFailure("a"), NetworkFailure("b"), None]
    assert [e.previous for e in events] == [None, DataFailure("a"), NetworkFailure("b")]
    assert events[0].location == LOC
    assert events[-1].cleared


def test_unsubscribed_observer_gets_nothing() -> None:
    reporter = ErrorReporter()
    events: list[FailureChanged] = []
    sub = reporter.subscribe(events.append)
    reporter.unsubscribe(sub)

    reporter.report(DataFailure("a"), LOC)

    assert events == []


def test_failing_observer_does_not_break_report() -> None:
    reporter = ErrorReporter()

    def broken(_event: FailureChanged) -> None:
        raise RuntimeError("observer bug")

    reporter.subscribe(broken)
    reporter.report(DataFailure("a"), LOC)

    assert reporter.current_failure == DataFailure("a")


def test_observer_may_clear_from_handler() -> None:
    reporter = ErrorReporter()
    seen: list[object] = []

    def acknowledge(event: FailureChanged) -> None:
        seen.append(event.current)
        if event.current is not None:
            reporter.clear()

    reporter.subscribe(acknowledge)
    reporter.report(DataFailure("a"), LOC)

    assert reporter.current_failure is None
    assert seen == [DataFailure("a"), None]


def test_broken_log_handler_never_propagates() -> None:
    class _Exploding(logging.Handler):
        def handle(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
            raise OSError("log sink unavailable")

    logger = logging.getLogger("barbuddy.tests.exploding")
    logger.propagate = False
    handler = _Exploding()
    logger.addHandler(handler)
    try:
        reporter = ErrorReporter(logger=logger)
        reporter.report(NetworkFailure("timeout"), LOC)
    finally:
        logger.removeHandler(handler)

    assert reporter.current_failure == NetworkFailure("timeout")


class _UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("str() broken")


def test_failure_with_broken_str_is_reported_by_type_name() -> None:
    reporter = ErrorReporter()

    reporter.report(_UnprintableError(), LOC)

    assert reporter.current_failure == GeneralFailure("_UnprintableError")
