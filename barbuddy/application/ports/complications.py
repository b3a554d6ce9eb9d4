"""Application port for the watch complication server."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class ComplicationServerPort(Protocol):
    def active_complications(self) -> Sequence[Any]:
        """Complications currently on the user's watch faces (may be empty)."""

    def reload_timeline(self, complication: Any) -> None:
        """Discard and rebuild the timeline of ``complication``."""
