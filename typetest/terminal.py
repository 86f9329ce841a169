"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from typing import Optional
import logging
import sys
import termios
from collections import deque

from curtsies import Input, events

from .text import Style, StyledText

logger = logging.getLogger(__name__)


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    This is the only place where styles become escape sequences. The
    terminal is acquired by ``setup()`` and always restored by
    ``cleanup()``; using the interface as a context manager does both.
    """
    
    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        # Keys unpacked from a curtsies paste event, oldest first
        self._pending_keys: deque[str] = deque()

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False
        
    def setup(self):
        """Enter fullscreen mode and start reading raw keys."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            # Enter cbreak mode immediately so reads work
            try:
                self._curtsies_input = Input(keynames='curtsies')
                self._curtsies_input.__enter__()
            except (OSError, ValueError, termios.error) as e:
                self._curtsies_input = None
                self.cleanup()
                raise OSError(f"Cannot read keys from this terminal: {e}") from e
        
    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.clear, end='')
            print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def style_sequence(self, style: Style) -> str:
        """Return the escape sequence that starts a style."""
        if style == Style.PENDING:
            return self.term.dim
        if style == Style.CORRECT:
            return self.term.bright_green
        if style == Style.INCORRECT:
            return self.term.red + self.term.underline
        if style == Style.ACCENT:
            return self.term.blue
        if style == Style.SPEED:
            return self.term.green
        return ''

    def format_styled(self, fragment: StyledText) -> str:
        """Wrap a fragment's characters in its style."""
        start = self.style_sequence(fragment.style)
        if not start:
            return fragment.text
        return start + fragment.text + self.term.normal
            
    def clear_and_home(self):
        """Clear the entire screen and move the cursor to the top left."""
        print(self.term.home + self.term.clear, end='')

    def write_styled(self, fragment: StyledText):
        """Write a fragment at the current cursor position."""
        print(self.format_styled(fragment), end='')
    
    def move_cursor_to(self, row: int, column: int):
        """Move the cursor to a position without redrawing the screen."""
        print(self.term.move(row, column), end='')

    def hide_cursor(self):
        print(self.term.hide_cursor, end='', flush=True)

    def show_cursor(self):
        print(self.term.normal_cursor, end='', flush=True)

    def flush(self):
        sys.stdout.flush()

    def query_dimensions(self) -> tuple[int, int]:
        """Return the terminal (width, height)."""
        return (self.term.width, self.term.height)
        
    def get_key(self):
        """Block until the user presses a key.

        Returns:
            The curtsies key name, or None before setup()
        """
        if self._curtsies_input is None:
            logger.debug("Key requested before terminal setup")
            return None
        if self._pending_keys:
            return self._pending_keys.popleft()
        evt = next(self._curtsies_input)  # blocks
        # Fast typing can arrive as a single paste event
        if isinstance(evt, events.PasteEvent):
            self._pending_keys.extend(str(e) for e in evt.events)
            return self._pending_keys.popleft() if self._pending_keys else None
        return str(evt)
    
    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width
        
    @property  
    def height(self):
        """Terminal height in rows."""
        return self.term.height
