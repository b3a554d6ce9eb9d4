from __future__ import annotations

import gc
from dataclasses import dataclass

from barbuddy.core.events.event_bus import EventBus


@dataclass(frozen=True)
class _Evt:
    value: int


def test_publish_continues_when_one_handler_raises() -> None:
    bus = EventBus()
    received: list[int] = []

    def broken(_evt: _Evt) -> None:
        raise RuntimeError("boom")

    def healthy(evt: _Evt) -> None:
        received.append(evt.value)

    bus.subscribe(_Evt, broken)
    bus.subscribe(_Evt, healthy)

    bus.publish(_Evt(7))

    assert received == [7]


def test_events_of_other_types_are_not_delivered() -> None:
    bus = EventBus()
    received: list[object] = []
    bus.subscribe(_Evt, received.append)

    bus.publish("not an _Evt")

    assert received == []


def test_unsubscribe_twice_is_harmless() -> None:
    bus = EventBus()
    sub = bus.subscribe(_Evt, lambda _e: None)
    bus.unsubscribe(sub)
    bus.unsubscribe(sub)
    assert bus.subscriber_count(_Evt) == 0


def test_weak_subscription_drops_collected_owner() -> None:
    bus = EventBus()
    received: list[int] = []

    class Owner:
        def on_event(self, evt: _Evt) -> None:
            received.append(evt.value)

    owner = Owner()
    bus.subscribe_weak(_Evt, owner.on_event)
    bus.publish(_Evt(1))

    del owner
    gc.collect()
    bus.publish(_Evt(2))

    assert received == [1]
    assert bus.subscriber_count(_Evt) == 0


def test_clear_removes_all_subscriptions() -> None:
    bus = EventBus()
    bus.subscribe(_Evt, lambda _e: None)
    bus.clear()
    assert bus.subscriber_count(_Evt) == 0


@dataclass(frozen=True)
class _SubEvt(_Evt):
    note: str = ""


def test_base_class_subscribers_see_subclass_events_after_specific_ones() -> None:
    bus = EventBus()
    order: list[str] = []
    bus.subscribe(object, lambda _e: order.append("tap"))
    bus.subscribe(_Evt, lambda _e: order.append("base"))
    bus.subscribe(_SubEvt, lambda _e: order.append("sub"))

    bus.publish(_SubEvt(1, "x"))
    bus.publish(_Evt(2))

    assert order == ["sub", "base", "tap", "base", "tap"]


def test_object_tap_sees_reporter_transitions() -> None:
    from barbuddy.core.errors import DataFailure
    from barbuddy.core.events import FailureChanged
    from barbuddy.core.observability.error_reporter import ErrorReporter
    from barbuddy.core.observability.source_location import SourceLocation

    bus = EventBus()
    seen: list[object] = []
    bus.subscribe(object, seen.append)
    reporter = ErrorReporter(bus)

    reporter.report(DataFailure("x"), SourceLocation("a.py", 1))
    reporter.clear()

    assert [type(e) for e in seen] == [FailureChanged, FailureChanged]
