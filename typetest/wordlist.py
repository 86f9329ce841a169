"""Word sources for the typing test."""

import random
from typing import Optional, Sequence

# Frequent English words used when no word file is given
COMMON_WORDS = (
    "the be to of and a in that have it for not on with he as you do at this "
    "but his by from they we say her she or an will my one all would there "
    "their what so up out if about who get which go me when make can like "
    "time no just him know take people into year your good some could them "
    "see other than then now look only come its over think also back after "
    "use two how our work first well way even new want because any these "
    "give day most us great between need large under never each same another "
    "family own leave put old while mean keep student why let world begin "
    "country point city play small number off always move night live write "
    "state home hand turn group place where tell might should still school "
    "face program become thing right seem feel high find help ask show try "
    "call last long little man very through down life child many before must "
    "around house word head public follow end change set part form "
    "water plan open example late hold real stand early line system learn"
).split()


def tokenize(text: str) -> list[str]:
    """Split text on whitespace, dropping empty tokens."""
    return text.split()


def load_words(path: str) -> list[str]:
    """Load whitespace-separated tokens from a UTF-8 file.

    Raises:
        OSError: if the file cannot be read
        ValueError: if the file holds no words
    """
    with open(path, "r", encoding="utf-8") as f:
        words = tokenize(f.read())
    if not words:
        raise ValueError(f"No words found in {path}")
    return words


def random_words(num_words: int, words: Optional[Sequence[str]] = None,
                 rng: Optional[random.Random] = None) -> list[str]:
    """Pick ``num_words`` words uniformly, with replacement."""
    pool = list(words) if words is not None else list(COMMON_WORDS)
    if not pool:
        raise ValueError("Cannot pick words from an empty list")
    rng = rng or random.Random()
    return [rng.choice(pool) for _ in range(num_words)]
