"""Keystroke processing for a typing run.

The processor owns the typed-input buffer and the lifetime counters of one
run. It echoes feedback through a rendering surface but keeps no terminal
state of its own, so it can be driven from tests with a fake surface.
"""

import logging
from enum import Enum

from .cursor import CursorModel
from .keyboard import TypingAction, TypingKey
from .text import Style, StyledText

logger = logging.getLogger(__name__)


class RunStatus(Enum):
    """State of a typing run."""
    RUNNING = "running"
    FINISHED = "finished"
    ABORTED = "aborted"
    RESTART_REQUESTED = "restart_requested"


class InputProcessor:
    """State machine consuming one classified keystroke at a time."""

    def __init__(self, surface, cursor: CursorModel, target: str):
        if not target:
            raise ValueError("Target text must not be empty")
        self.surface = surface
        self.cursor = cursor
        self.target = target
        self.typed: list[str] = []
        self.chars_typed = 0
        self.errors = 0
        self.status = RunStatus.RUNNING

    @property
    def typed_text(self) -> str:
        return "".join(self.typed)

    def handle_key(self, key: TypingKey) -> RunStatus:
        """Apply one keystroke and return the resulting status.

        Keys arriving after the run has left RUNNING are ignored.
        """
        if self.status != RunStatus.RUNNING:
            return self.status

        action = key.action
        if action == TypingAction.QUIT:
            self.status = RunStatus.ABORTED
        elif action == TypingAction.RESTART:
            self.status = RunStatus.RESTART_REQUESTED
        elif action == TypingAction.DELETE_WORD:
            self._delete_word()
        elif action == TypingAction.CHARACTER:
            self._type_char(key.char)
        elif action == TypingAction.BACKSPACE:
            self._backspace()

        if self.status == RunStatus.RUNNING:
            self.surface.flush()
        else:
            logger.debug("Run ended with %s after %d characters, %d errors",
                         self.status.value, self.chars_typed, self.errors)
        return self.status

    def _type_char(self, c: str):
        self.typed.append(c)
        if len(self.typed) >= len(self.target):
            self.status = RunStatus.FINISHED
            return

        self.chars_typed += 1
        expected = self.target[len(self.typed) - 1]
        if c == expected:
            self._restyle(StyledText(c, Style.CORRECT))
        else:
            self._restyle(StyledText(expected, Style.INCORRECT))
            self.errors += 1
        self.cursor.advance()
        self.surface.move_cursor_to(*self.cursor.absolute_position())

    def _backspace(self):
        if not self.typed:
            return
        self._pop()

    def _delete_word(self):
        while self.typed and self.typed[-1] != ' ':
            self._pop()

    def _pop(self):
        self.typed.pop()
        self.cursor.retreat()
        self._restyle(StyledText(self.target[len(self.typed)], Style.PENDING))
        self.surface.move_cursor_to(*self.cursor.absolute_position())

    def _restyle(self, fragment: StyledText):
        """Rewrite the glyph under the cursor."""
        self.surface.move_cursor_to(*self.cursor.absolute_position())
        self.surface.write_styled(fragment)
