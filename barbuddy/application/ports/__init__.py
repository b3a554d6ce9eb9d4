"""Application ports for the watch platform.

The lifecycle service depends on these interfaces; the platform bindings
(connectivity session, complication server, background scheduler) implement them.
"""

from .background import BackgroundRefreshPort, RefreshTask, RefreshTaskKind, ScheduleCallback
from .complications import ComplicationServerPort
from .connectivity import PhoneSyncPort

__all__ = [
    "BackgroundRefreshPort",
    "ComplicationServerPort",
    "PhoneSyncPort",
    "RefreshTask",
    "RefreshTaskKind",
    "ScheduleCallback",
]
