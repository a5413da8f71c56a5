"""Leading comments of definitions and the ``:reek:`` directives they carry."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

DIRECTIVE_PATTERN = re.compile(r":reek:(?P<detector>\w+)(?::?\s*(?P<options>\{.*?\}))?")

# A comment needs at least this many words (directives excluded) to describe a module.
MINIMUM_CONTENT_LENGTH = 2


@dataclass(frozen=True)
class Directive:
    """One ``:reek:Detector { options }`` occurrence inside a comment."""

    detector_name: str
    raw_options: Optional[str]


class CodeComment:
    """The comment block written directly above an expression."""

    def __init__(self, text: str) -> None:
        self.text = text

    def directives(self) -> List[Directive]:
        return [
            Directive(
                detector_name=match.group("detector"),
                raw_options=match.group("options"),
            )
            for match in DIRECTIVE_PATTERN.finditer(self.text)
        ]

    def sanitized(self) -> str:
        """Comment text without directives or comment markers."""
        stripped = DIRECTIVE_PATTERN.sub("", self.text)
        lines = []
        for line in stripped.splitlines():
            line = line.strip()
            if line in {"=begin", "=end"}:
                continue
            lines.append(line.lstrip("#").strip())
        return " ".join(part for part in lines if part)

    @property
    def descriptive(self) -> bool:
        return len(self.sanitized().split()) >= MINIMUM_CONTENT_LENGTH

    def __bool__(self) -> bool:
        return bool(self.text.strip())

    def __repr__(self) -> str:
        return f"CodeComment({self.text!r})"


__all__ = ["CodeComment", "DIRECTIVE_PATTERN", "Directive", "MINIMUM_CONTENT_LENGTH"]
