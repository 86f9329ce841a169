"""Accuracy and speed metrics for a finished run."""

from dataclasses import dataclass
from typing import Sequence

from .text import Style, StyledText, plain


@dataclass(frozen=True)
class GameResults:
    """Counters and timing of one run.

    Timestamps are ``time.monotonic()`` samples in seconds: the first one
    taken at the first keystroke, the second at the finishing keystroke.
    """
    total_words: int
    total_chars_typed: int
    total_chars_in_text: int
    total_char_errors: int
    final_chars_typed_correctly: int
    final_uncorrected_errors: int
    started_at: float
    ended_at: float

    @property
    def duration(self) -> float:
        """Seconds between the first and the finishing keystroke."""
        return max(0.0, self.ended_at - self.started_at)

    @property
    def accuracy(self) -> float:
        """Fraction of the final buffer that matches the text, 0.0 if empty."""
        if self.total_chars_in_text == 0:
            return 0.0
        return self.final_chars_typed_correctly / self.total_chars_in_text

    @property
    def wpm(self) -> float:
        """Displayed words per minute, 0.0 for a zero-length run."""
        minutes = self.duration / 60.0
        if minutes <= 0:
            return 0.0
        return self.total_words / minutes

    def summary_lines(self) -> list[list[StyledText]]:
        """Lines of the results page."""
        return [
            [plain(f"Took {int(self.duration)}s for {self.total_words} words")],
            [StyledText(f"Accuracy: {self.accuracy * 100:.1f}%", Style.ACCENT)],
            [plain(f"Mistakes: {self.total_char_errors} out of "
                   f"{self.total_chars_in_text} characters")],
            [
                plain("Speed: "),
                StyledText(f"{self.wpm:.1f} wpm", Style.SPEED),
                plain(" (words per minute)"),
            ],
        ]


def compare_typed(typed: Sequence[str], target: Sequence[str]) -> tuple[int, int]:
    """Count matching and mismatching characters over the common prefix.

    Returns:
        Tuple of (correct, incorrect)
    """
    correct = 0
    incorrect = 0
    for typed_char, target_char in zip(typed, target):
        if typed_char == target_char:
            correct += 1
        else:
            incorrect += 1
    return correct, incorrect


def compute_results(typed: Sequence[str], target: Sequence[str], total_words: int,
                    chars_typed: int, errors: int,
                    started_at: float, ended_at: float) -> GameResults:
    """Build the results record from the final buffer and run counters."""
    correct, incorrect = compare_typed(typed, target)
    return GameResults(
        total_words=total_words,
        total_chars_typed=chars_typed,
        total_chars_in_text=len(typed),
        total_char_errors=errors,
        final_chars_typed_correctly=correct,
        final_uncorrected_errors=incorrect,
        started_at=started_at,
        ended_at=ended_at,
    )
