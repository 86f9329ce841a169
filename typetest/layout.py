"""Word wrapping and placement of the test text on screen."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import GameConstants
from .cursor import CursorModel, LinePosition
from .errors import LayoutError
from .text import StyledText, pending, total_length

logger = logging.getLogger(__name__)


def wrap_words(words: Sequence[str], max_line_width: int,
               max_words_per_line: int = GameConstants.MAX_WORDS_PER_LINE) -> list[str]:
    """Wrap a word sequence into display lines.

    Every word counts its length plus one separator towards the line width.
    A line is closed when it already holds ``max_words_per_line`` words or
    when the next word would push it past ``max_line_width``; closed lines
    keep a trailing space because the user types one after the last word.
    The final line has no trailing space. A word wider than the bound is
    put on a line of its own.

    Args:
        words: Words to wrap, none containing spaces
        max_line_width: Width bound in characters
        max_words_per_line: Word count bound per line

    Returns:
        Line strings whose concatenation is the text to type
    """
    if not words:
        raise ValueError("Cannot lay out an empty word sequence")
    if max_words_per_line < 1:
        raise ValueError("max_words_per_line must be at least 1")

    lines: list[str] = []
    line: list[str] = []
    current_len = 0
    for word in words:
        new_len = current_len + len(word) + 1
        if not line or (len(line) < max_words_per_line and new_len <= max_line_width):
            line.append(word)
            current_len = new_len
        else:
            lines.append(" ".join(line) + " ")
            line = [word]
            current_len = len(word) + 1
    lines.append(" ".join(line))
    return lines


def check_fits(lines: Sequence[str], words: Sequence[str], width: int, height: int,
               footer_lines: int = GameConstants.FOOTER_LINES) -> None:
    """Raise LayoutError if the wrapped lines do not fit the terminal.

    The height check comes first since it depends on the wrapped line count.
    The results page shown after the run must fit as well.
    """
    required_lines = max(len(lines) + footer_lines, GameConstants.RESULTS_PAGE_LINES)
    if required_lines > height:
        raise LayoutError("lines", required_lines, height)
    longest = max((len(w) for w in words), default=0)
    required_columns = max(longest + GameConstants.WORD_MARGIN, GameConstants.MIN_LINE_WIDTH)
    if required_columns > width:
        raise LayoutError("columns", required_columns, width)


@dataclass
class Layout:
    """Result of displaying a word sequence."""
    words: list[str]
    lines: list[str]
    cursor: CursorModel

    @property
    def target_text(self) -> str:
        return "".join(self.lines)


class TextLayoutEngine:
    """Wraps words and draws them centered on a rendering surface."""

    def __init__(self, surface,
                 max_words_per_line: int = GameConstants.MAX_WORDS_PER_LINE,
                 width_percent: int = GameConstants.LINE_WIDTH_PERCENT):
        self.surface = surface
        self.max_words_per_line = max_words_per_line
        self.width_percent = width_percent

    def max_line_width(self, terminal_width: int) -> int:
        return terminal_width * self.width_percent // 100

    def display(self, words: Sequence[str]) -> Layout:
        """Wrap, validate and draw the words in the not-yet-typed style.

        Nothing is drawn if the terminal is too small.

        Returns:
            Layout holding the line texts and a cursor on the first character
        """
        width, height = self.surface.query_dimensions()
        lines = wrap_words(words, self.max_line_width(width), self.max_words_per_line)
        check_fits(lines, words, width, height)
        logger.debug("Wrapped %d words into %d lines for a %dx%d terminal",
                     len(words), len(lines), width, height)

        self.surface.clear_and_home()
        positions = self.print_centered([[pending(line)] for line in lines],
                                        dimensions=(width, height))
        cursor = CursorModel(positions)
        self.surface.move_cursor_to(*cursor.absolute_position())
        self.surface.flush()
        return Layout(words=list(words), lines=lines, cursor=cursor)

    def print_centered(self, lines: Sequence[Sequence[StyledText]],
                       dimensions: Optional[tuple[int, int]] = None) -> list[LinePosition]:
        """Draw lines of fragments centered around the middle of the screen.

        Args:
            lines: Each line is a sequence of styled fragments
            dimensions: Terminal (width, height); queried when omitted

        Returns:
            Origin and plain length of every drawn line, top to bottom
        """
        width, height = dimensions or self.surface.query_dimensions()
        line_offset = len(lines) // 2
        positions = []
        for line_no, fragments in enumerate(lines):
            length = total_length(fragments)
            row = max(0, height // 2 + line_no - line_offset)
            column = max(0, width // 2 - length // 2)
            self.surface.move_cursor_to(row, column)
            for fragment in fragments:
                self.surface.write_styled(fragment)
            positions.append(LinePosition(row=row, column=column, length=length))
        self.surface.flush()
        return positions
