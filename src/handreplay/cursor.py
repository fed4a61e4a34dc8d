"""Forward-only cursor over the lines of a hand history."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import UnexpectedEndOfInput


@dataclass
class LineCursor:
    """Walks trimmed lines one at a time.

    Blank lines are kept; callers decide whether they matter.
    """

    lines: tuple[str, ...]
    line_number: int = 0

    @classmethod
    def from_text(cls, text: str) -> LineCursor:
        return cls(lines=tuple(line.strip() for line in text.strip().splitlines()))

    def current_line(self) -> str:
        if self.line_number >= len(self.lines):
            raise UnexpectedEndOfInput()
        return self.lines[self.line_number]

    def peek(self) -> str | None:
        """Current line, or None at the end."""
        if self.line_number >= len(self.lines):
            return None
        return self.lines[self.line_number]

    def advance(self) -> None:
        self.line_number += 1

    def has_more(self) -> bool:
        return self.line_number < len(self.lines)

    def seek(self, index: int) -> None:
        """Jump to an absolute line index (used for the summary re-scan)."""
        self.line_number = max(0, min(index, len(self.lines)))
