"""Typing session controller: run loop, results page and restarts."""

import logging
import time
from typing import Callable, Optional, Sequence

from .constants import GameConstants
from .errors import LayoutError
from .keyboard import KeyboardHandler, TypingAction, TypingKey
from .layout import Layout, TextLayoutEngine
from .processor import InputProcessor, RunStatus
from .results import GameResults, compute_results
from .text import StyledText, plain

logger = logging.getLogger(__name__)


class TypingSession:
    """Runs typing tests on a terminal until the user quits.

    Args:
        terminal: Rendering surface and key source (TerminalInterface)
        word_source: Called once per run for a fresh word sequence
        keyboard: Key parser; defaults to one reading from ``terminal``
        clock: Monotonic clock in seconds
    """

    def __init__(self, terminal, word_source: Callable[[], Sequence[str]],
                 keyboard: Optional[KeyboardHandler] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.terminal = terminal
        self.word_source = word_source
        self.keyboard = keyboard or KeyboardHandler(terminal)
        self.engine = TextLayoutEngine(terminal)
        self.clock = clock
        self.layout: Optional[Layout] = None

    def restart(self) -> Layout:
        """Pick new words and draw them."""
        words = list(self.word_source())
        self.layout = self.engine.display(words)
        return self.layout

    def next_key(self) -> TypingKey:
        """Block until a key arrives; Ctrl-C delivered as a signal quits."""
        try:
            key = None
            while key is None:
                key = self.keyboard.get_typing_key()
            return key
        except KeyboardInterrupt:
            return TypingKey(TypingAction.QUIT)

    def run(self) -> tuple[RunStatus, Optional[GameResults]]:
        """Run one test on the current layout.

        The timer starts at the first keystroke and stops at the keystroke
        that ends the run.

        Returns:
            Final status, and the results if the text was finished
        """
        if self.layout is None:
            self.restart()
        layout = self.layout
        processor = InputProcessor(self.terminal, layout.cursor, layout.target_text)

        key = self.next_key()
        started_at = self.clock()
        status = processor.handle_key(key)
        while status == RunStatus.RUNNING:
            status = processor.handle_key(self.next_key())
        ended_at = self.clock()

        if status != RunStatus.FINISHED:
            return status, None
        results = compute_results(
            processor.typed, layout.target_text,
            total_words=len(layout.words),
            chars_typed=processor.chars_typed,
            errors=processor.errors,
            started_at=started_at,
            ended_at=ended_at,
        )
        logger.debug("Finished %d words in %.2fs: %.1f wpm, %.1f%% accuracy",
                     results.total_words, results.duration, results.wpm,
                     results.accuracy * 100)
        return status, results

    def display_results(self, results: GameResults) -> bool:
        """Show the results page and wait for restart or quit.

        Returns:
            True if the user asked for another test

        Raises:
            LayoutError: if the page no longer fits the terminal
        """
        lines: list[list[StyledText]] = results.summary_lines()
        lines.append([])
        lines.append([plain(GameConstants.RESULTS_HELP_MESSAGE)])
        # The terminal may have shrunk since the text was laid out
        width, height = self.terminal.query_dimensions()
        if len(lines) > height:
            raise LayoutError("lines", len(lines), height)
        self.terminal.clear_and_home()
        self.engine.print_centered(lines, dimensions=(width, height))
        # No cursor on the results page
        self.terminal.hide_cursor()
        try:
            while True:
                action = self.next_key().action
                if action == TypingAction.RESTART:
                    return True
                if action == TypingAction.QUIT:
                    return False
        finally:
            self.terminal.show_cursor()

    def play(self) -> list[GameResults]:
        """Run tests until the user quits.

        Returns:
            Results of every finished test, oldest first
        """
        finished = []
        while True:
            self.restart()
            status, results = self.run()
            if status == RunStatus.FINISHED:
                finished.append(results)
                if self.display_results(results):
                    continue
                return finished
            if status == RunStatus.RESTART_REQUESTED:
                continue
            return finished
