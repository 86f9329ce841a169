"""Order-2 Markov chain text generation.

Each pair of adjacent corpus words maps to every word that followed it,
duplicates kept, so frequent continuations are picked proportionally more
often.
"""

import logging
import random
from typing import Optional, Sequence

from .errors import CorpusTooSmallError

logger = logging.getLogger(__name__)

SEPARATOR = " "


def make_key(first: str, second: str) -> str:
    return f"{first}{SEPARATOR}{second}"


def build_transitions(tokens: Sequence[str]) -> dict[str, list[str]]:
    """Build the transition table of a token sequence.

    Raises:
        CorpusTooSmallError: if there are fewer than three tokens
    """
    if len(tokens) < 3:
        raise CorpusTooSmallError(len(tokens))
    table: dict[str, list[str]] = {}
    for i in range(len(tokens) - 2):
        key = make_key(tokens[i], tokens[i + 1])
        table.setdefault(key, []).append(tokens[i + 2])
    return table


class MarkovGenerator:
    """Random word sequences that imitate a corpus."""

    def __init__(self, tokens: Sequence[str], rng: Optional[random.Random] = None):
        self.transitions = build_transitions(tokens)
        self.rng = rng or random.Random()
        logger.debug("Built %d Markov contexts from %d tokens",
                     len(self.transitions), len(tokens))

    def generate(self, num_words: int) -> list[str]:
        """Generate up to ``num_words`` words.

        Stops early when the chain reaches a context the corpus never
        continued.
        """
        output: list[str] = []
        if num_words <= 0:
            return output

        # Sort for a deterministic seed choice under a seeded generator
        seed_key = self.rng.choice(sorted(self.transitions))
        first_word, second_word = seed_key.split(SEPARATOR)

        for _ in range(num_words):
            options = self.transitions.get(make_key(first_word, second_word))
            if not options:
                logger.debug("Markov chain hit a terminal context after %d words", len(output))
                break
            new_word = self.rng.choice(options)
            output.append(first_word)
            first_word, second_word = second_word, new_word
        return output
