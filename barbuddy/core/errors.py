"""Failure taxonomy.

Every failure the app shows to the user belongs to one of five categories. Anything
else is coerced into ``GeneralFailure`` at the reporting boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(eq=True)
class FailureCategory(Exception):
    """Base of the closed failure taxonomy.

    Equality is by concrete type and message; ``cause`` is informational only.
    """

    kind: ClassVar[str] = ""
    label: ClassVar[str] = ""

    message: str
    cause: BaseException | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        # Keep ``args`` populated so pickling and traceback rendering behave.
        Exception.__init__(self, self.message)

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __str__(self) -> str:
        return self.summary

    @property
    def summary(self) -> str:
        return f"{self.label}: {self.message}"


class DataFailure(FailureCategory):
    """Data processing or persistence failed."""

    kind = "data"
    label = "Data Error"


class NetworkFailure(FailureCategory):
    """A network operation failed."""

    kind = "network"
    label = "Network Error"


class PermissionFailure(FailureCategory):
    """The user has not granted a required permission."""

    kind = "permission"
    label = "Permission Error"


class PeerConnectivityFailure(FailureCategory):
    """Talking to the paired phone/watch failed."""

    kind = "peer"
    label = "Watch Error"


class GeneralFailure(FailureCategory):
    """Anything that doesn't fit the other categories."""

    kind = "general"
    label = "Error"


FAILURE_CATEGORIES: tuple[type[FailureCategory], ...] = (
    DataFailure,
    NetworkFailure,
    PermissionFailure,
    PeerConnectivityFailure,
    GeneralFailure,
)


def describe(failure: object) -> str:
    """Human readable text of an arbitrary failure value."""
    if isinstance(failure, FailureCategory):
        return failure.message
    try:
        text = str(failure)
    except Exception:
        text = ""
    if text:
        return text
    return type(failure).__name__


def classify(failure: object) -> FailureCategory:
    """Return ``failure`` itself when already classified, else wrap it as general."""
    if isinstance(failure, FailureCategory):
        return failure
    cause = failure if isinstance(failure, BaseException) else None
    return GeneralFailure(describe(failure), cause=cause)
