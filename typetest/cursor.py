"""Cursor model over wrapped lines.

The typed-character index is linear, but the text is shown as several
wrapped lines. The cursor tracks which line and which column within it the
next character lives on, so stepping backwards across a line boundary lands
on the last character of the previous line.
"""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class LinePosition:
    """Screen origin and plain length of one wrapped line."""
    row: int
    column: int
    length: int


class CursorModel:
    """Line/offset cursor over a fixed set of lines."""

    def __init__(self, lines: Sequence[LinePosition]):
        if not lines:
            raise ValueError("Cursor needs at least one line")
        if any(line.length < 1 for line in lines):
            raise ValueError("Every line must hold at least one character")
        self.lines = list(lines)
        self.current_line = 0
        self.current_offset = 0

    @classmethod
    def from_lengths(cls, lengths: Sequence[int]) -> "CursorModel":
        """Build a cursor whose lines are stacked from the top-left corner."""
        return cls([LinePosition(row=i, column=0, length=n) for i, n in enumerate(lengths)])

    @property
    def position(self) -> tuple[int, int]:
        return (self.current_line, self.current_offset)

    @property
    def index(self) -> int:
        """Index of the cursor in the flat character stream."""
        before = sum(line.length for line in self.lines[:self.current_line])
        return before + self.current_offset

    def is_at_start(self) -> bool:
        return self.current_line == 0 and self.current_offset == 0

    def is_at_end(self) -> bool:
        last = len(self.lines) - 1
        return (self.current_line == last
                and self.current_offset == self.lines[last].length - 1)

    def absolute_position(self) -> tuple[int, int]:
        """Return the (row, column) where the terminal cursor belongs."""
        line = self.lines[self.current_line]
        return (line.row, line.column + self.current_offset)

    def advance(self) -> tuple[int, int]:
        """Move to the next character, wrapping onto the next line.

        Stays put on the last character of the last line.
        """
        line = self.lines[self.current_line]
        if self.current_offset < line.length - 1:
            self.current_offset += 1
        elif self.current_line + 1 < len(self.lines):
            self.current_line += 1
            self.current_offset = 0
        return self.absolute_position()

    def retreat(self) -> tuple[int, int]:
        """Move to the previous character, wrapping onto the previous line.

        Stays put on the first character of the first line.
        """
        if self.current_offset > 0:
            self.current_offset -= 1
        elif self.current_line > 0:
            self.current_line -= 1
            self.current_offset = self.lines[self.current_line].length - 1
        return self.absolute_position()
