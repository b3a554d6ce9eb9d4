from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from threading import RLock
from typing import Any, TypeVar, cast
from weakref import WeakMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Subscription:
    event_type: type[object]
    handler: Callable[[object], None]


TEvent = TypeVar("TEvent")


class EventBus:
    """Synchronous, in-process event bus.

    - Thread-safe subscribe/unsubscribe/publish.
    - Handlers are called in the publisher's thread, in subscription order.
      Qt observers re-dispatch to the main thread through signals.
    - Subscribing to a base class receives every subclass event; ``object``
      taps the whole stream (diagnostics, tests).
    - A failing handler is logged and never stops delivery to the rest.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: defaultdict[type[object], list[Callable[[object], None]]] = defaultdict(list)

    def subscribe(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        # Handlers are stored object-typed; the wrapper keeps the typed signature
        # for callers.
        def _wrapped(event: object) -> None:
            handler(cast(TEvent, event))

        with self._lock:
            self._subs[event_type].append(_wrapped)
        return Subscription(event_type=event_type, handler=_wrapped)

    def subscribe_weak(
        self, event_type: type[TEvent], handler: Callable[[TEvent], None]
    ) -> Subscription:
        """Subscribe a bound method without keeping its owner alive.

        Intended for presenters and Qt objects. Once the owner is garbage-collected
        the subscription removes itself on the next publish. Plain functions fall
        back to a strong subscription.
        """

        wm: WeakMethod | None
        try:
            wm = WeakMethod(cast(Any, handler))
        except TypeError:
            wm = None

        if wm is None:
            return self.subscribe(event_type, handler)

        sub: Subscription

        def _wrapped(event: object) -> None:
            alive = wm()
            if alive is None:
                self.unsubscribe(sub)
                return
            alive(cast(TEvent, event))

        sub = Subscription(event_type=event_type, handler=_wrapped)
        with self._lock:
            self._subs[event_type].append(_wrapped)
        return sub

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            handlers = self._subs.get(subscription.event_type)
            if not handlers:
                return
            try:
                handlers.remove(subscription.handler)
            except ValueError:
                return

    def subscriber_count(self, event_type: type[object]) -> int:
        with self._lock:
            return len(self._subs.get(event_type, []))

    def publish(self, event: object) -> None:
        # Snapshot handlers under lock so handlers may (un)subscribe while running.
        # Most specific type first: FailureChanged handlers run before object taps.
        with self._lock:
            handlers = [h for cls in type(event).__mro__ for h in self._subs.get(cls, ())]
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    extra={"event": type(event).__name__, "handler": repr(handler)},
                )

    def clear(self) -> None:
        """Remove all subscriptions."""
        with self._lock:
            self._subs.clear()
