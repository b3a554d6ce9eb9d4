from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import PurePath
from types import TracebackType


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """File/line of the code that reported a failure."""

    file: str
    line: int

    @property
    def file_name(self) -> str:
        # Handle both separators: locations may come from another platform's logs.
        return PurePath(self.file.replace("\\", "/")).name or self.file

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line}"

    @classmethod
    def here(cls, depth: int = 0) -> SourceLocation:
        """Location of the caller, ``depth`` frames further up."""
        try:
            frame = sys._getframe(depth + 1)
        except ValueError:
            return UNKNOWN_LOCATION
        return cls(file=frame.f_code.co_filename, line=frame.f_lineno)

    @classmethod
    def from_traceback(cls, tb: TracebackType | None) -> SourceLocation:
        """Location of the innermost frame of ``tb`` (where the exception was raised)."""
        if tb is None:
            return UNKNOWN_LOCATION
        while tb.tb_next is not None:
            tb = tb.tb_next
        return cls(file=tb.tb_frame.f_code.co_filename, line=tb.tb_lineno)


UNKNOWN_LOCATION = SourceLocation(file="<unknown>", line=0)
