"""Styled text fragments.

A fragment pairs plain characters with a presentation style. Only the
terminal turns a style into escape sequences, so the length of a fragment
is always the number of plain characters it holds.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Style(Enum):
    """Presentation of a fragment."""
    PLAIN = "plain"
    PENDING = "pending"  # Not yet typed (dim)
    CORRECT = "correct"
    INCORRECT = "incorrect"  # Underlined, shows the expected character
    ACCENT = "accent"
    SPEED = "speed"


@dataclass(frozen=True)
class StyledText:
    """A run of characters sharing one style."""
    text: str
    style: Style = Style.PLAIN

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def length(self) -> int:
        """Plain length, independent of styling."""
        return len(self.text)


def plain(text: str) -> StyledText:
    return StyledText(text, Style.PLAIN)


def pending(text: str) -> StyledText:
    return StyledText(text, Style.PENDING)


def total_length(fragments: Iterable[StyledText]) -> int:
    """Sum of the plain lengths of a sequence of fragments."""
    return sum(f.length for f in fragments)
