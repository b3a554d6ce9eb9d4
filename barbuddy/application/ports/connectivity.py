"""Application port for the phone connectivity session."""

from __future__ import annotations

from typing import Protocol


class PhoneSyncPort(Protocol):
    def activate_session(self) -> None:
        """Activate the session with the paired phone."""

    def request_drink_data(self) -> None:
        """Ask the phone to send the current drink data. Fire-and-forget."""
