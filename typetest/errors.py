"""Exceptions raised by the typing test engine."""

from .constants import GameConstants


class TypeTestError(Exception):
    """Base class for errors that end the current run."""


class LayoutError(TypeTestError):
    """The terminal is too small to display the wrapped text.

    Attributes:
        dimension: Either ``"lines"`` or ``"columns"``
        required: Minimum size needed along that dimension
        available: Size the terminal actually has
    """

    def __init__(self, dimension: str, required: int, available: int):
        self.dimension = dimension
        self.required = required
        self.available = available
        if dimension == "lines":
            template = GameConstants.HEIGHT_TOO_SHORT_MESSAGE
        else:
            template = GameConstants.WIDTH_TOO_LOW_MESSAGE
        super().__init__(template.format(required, available))


class CorpusTooSmallError(TypeTestError):
    """A corpus needs at least three tokens to build a transition."""

    def __init__(self, token_count: int):
        self.token_count = token_count
        super().__init__(
            f"Corpus has {token_count} tokens; at least 3 are needed to generate text"
        )
