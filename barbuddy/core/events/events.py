from __future__ import annotations

from dataclasses import dataclass

from barbuddy.core.errors import FailureCategory
from barbuddy.core.observability.source_location import SourceLocation


@dataclass(frozen=True, slots=True)
class FailureChanged:
    """Published by the error reporter on every transition of the current failure.

    ``current`` is None after a clear; ``location`` is None for clears.
    """

    current: FailureCategory | None
    previous: FailureCategory | None
    location: SourceLocation | None = None

    @property
    def cleared(self) -> bool:
        return self.current is None
