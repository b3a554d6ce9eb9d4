"""Lightweight in-process event bus.

Services publish events; observers (UI bridges, presenters) subscribe.
"""

from .event_bus import EventBus, Subscription
from .events import FailureChanged

__all__ = [
    "EventBus",
    "Subscription",
    "FailureChanged",
]
