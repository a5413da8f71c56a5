"""Core data models shared across pyreek components."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, order=True)
class SourceLocation:
    """Start of an expression: 1-based line, 0-based column."""

    line: int
    column: int = 0


@dataclass(frozen=True)
class SmellWarning:
    """A single finding reported by a smell detector."""

    smell_type: str
    message: str
    context: str
    lines: Tuple[int, ...] = field(default_factory=tuple)
    source: str = "string"

    @property
    def sort_key(self) -> Tuple[str, str, Tuple[int, ...], str]:
        return (self.smell_type, self.context, self.lines, self.message)
