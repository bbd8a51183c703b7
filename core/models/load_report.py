"""PropStore Load Report Model - Diagnostics collected while loading a stream.

A lenient load skips malformed data lines instead of failing. Each skipped
line is recorded as a ``LineError`` so callers can inspect what was dropped.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..types import LineNumber
from ..exceptions import ParsingError


@dataclass(frozen=True)
class LineError:
    """A malformed line skipped during a lenient load.

    Attributes:
        line_number: 1-based position of the line in the stream
        line: The line content, without its terminator
        reason: Why the line was rejected
    """

    line_number: LineNumber
    line: str
    reason: str

    @classmethod
    def from_parsing_error(cls, error: ParsingError) -> "LineError":
        """Create a LineError from a ParsingError raised by the codec."""
        return cls(
            line_number=LineNumber(error.line_number or 0),
            line=error.line,
            reason=error.reason or error.message,
        )

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.reason}: {self.line!r}"


@dataclass(frozen=True)
class LoadReport:
    """Summary of one ``load`` call.

    Attributes:
        loaded: Number of entries set in the store
        skipped: Number of blank and comment lines ignored
        errors: Malformed lines that were skipped, in stream order
    """

    loaded: int = 0
    skipped: int = 0
    errors: Tuple[LineError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        """Return True if no malformed line was encountered."""
        return not self.errors

    @property
    def lines(self) -> int:
        """Total number of lines read."""
        return self.loaded + self.skipped + len(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary representation."""
        return {
            "loaded": self.loaded,
            "skipped": self.skipped,
            "errors": [
                {"line_number": e.line_number, "line": e.line, "reason": e.reason}
                for e in self.errors
            ],
        }
