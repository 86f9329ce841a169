"""typetest - A terminal typing-speed test."""

from .cursor import CursorModel, LinePosition
from .errors import CorpusTooSmallError, LayoutError, TypeTestError
from .layout import Layout, TextLayoutEngine, wrap_words
from .markov import MarkovGenerator, build_transitions
from .processor import InputProcessor, RunStatus
from .results import GameResults, compute_results

__all__ = [
    'CursorModel',
    'LinePosition',
    'CorpusTooSmallError',
    'LayoutError',
    'TypeTestError',
    'Layout',
    'TextLayoutEngine',
    'wrap_words',
    'MarkovGenerator',
    'build_transitions',
    'InputProcessor',
    'RunStatus',
    'GameResults',
    'compute_results',
]
