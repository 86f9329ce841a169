"""typetest CLI entry point.

Allows running via `python -m typetest` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import Callable, Optional, Sequence

from .constants import GameConstants
from .errors import TypeTestError
from .version import get_version_string

logger = logging.getLogger(__name__)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def run_keyboard_test() -> None:
    """Print parsed and classified key events until ESC is pressed."""
    from .terminal import TerminalInterface
    from .keyboard import KeyboardHandler, KeyType, classify_key

    print("Keyboard test mode - press keys to see parsed events.")
    print("Quit with ESC.")

    term = TerminalInterface()
    kb = KeyboardHandler(term)
    with term:
        while True:
            ev = kb.get_key_event()
            if not ev:
                continue
            if ev.key_type == KeyType.SPECIAL and ev.value == 'escape':
                break
            typing_key = classify_key(ev)
            parts = [
                f"type={ev.key_type.value}",
                f"value={ev.value}",
                f"raw='{_escape_bytes(ev.raw)}'",
                f"action={typing_key.action.value}",
            ]
            print(' '.join(parts), end='\r\n', flush=True)
    print("Exiting keyboard test.")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typetest",
        description="Terminal typing-speed test.",
        epilog="Keys: ctrl-c quit, ctrl-r restart, ctrl-w delete word",
    )
    parser.add_argument("-n", "--words", type=int, default=None,
                        help=f"number of words to type (default {GameConstants.DEFAULT_WORD_COUNT})")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-f", "--word-file", default=None,
                        help="pick random words from this whitespace-separated word list")
    source.add_argument("-m", "--markov", dest="corpus_file", default=None,
                        help="generate text with a Markov chain trained on this file")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random word choice")
    parser.add_argument("--log", dest="log_file", default=None,
                        help="write debug logging to this file")
    parser.add_argument("--save-defaults", action="store_true",
                        help="remember -n/-f/-m as defaults for future runs")
    parser.add_argument("-V", "--version", action="store_true",
                        help="print the version and exit")
    parser.add_argument("--keytest", "--keyboard-test", dest="keytest", action="store_true",
                        help="show how key presses are parsed")
    return parser.parse_args(argv)


def resolve_options(args: argparse.Namespace, stored: dict) -> dict:
    """Merge command line options over the stored defaults."""
    options = {
        'word_count': stored.get('word_count') or GameConstants.DEFAULT_WORD_COUNT,
        'word_file': stored.get('word_file'),
        'corpus_file': stored.get('corpus_file'),
    }
    if args.words is not None:
        if not GameConstants.MIN_WORD_COUNT <= args.words <= GameConstants.MAX_WORD_COUNT:
            raise ValueError(
                f"Word count must be between {GameConstants.MIN_WORD_COUNT} "
                f"and {GameConstants.MAX_WORD_COUNT}"
            )
        options['word_count'] = args.words
    if args.word_file is not None:
        options['word_file'] = args.word_file
        options['corpus_file'] = None
    if args.corpus_file is not None:
        options['corpus_file'] = args.corpus_file
        options['word_file'] = None
    return options


def settings_to_store(options: dict) -> dict:
    """Options as saved defaults, with file paths made absolute."""
    stored = dict(options)
    for key in ('word_file', 'corpus_file'):
        if stored.get(key):
            stored[key] = os.path.abspath(stored[key])
    return stored


def build_word_source(options: dict, rng: random.Random) -> Callable[[], list[str]]:
    """Return a callable producing a fresh word sequence per run.

    Files are read once, up front, so a bad file fails before the terminal
    is taken over.
    """
    from .markov import MarkovGenerator
    from .wordlist import load_words, random_words

    num_words = options['word_count']
    if options.get('corpus_file'):
        generator = MarkovGenerator(load_words(options['corpus_file']), rng=rng)
        return lambda: generator.generate(num_words)
    if options.get('word_file'):
        words = load_words(options['word_file'])
        return lambda: random_words(num_words, words, rng=rng)
    return lambda: random_words(num_words, rng=rng)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=logging.DEBUG,
                            format="%(asctime)s %(name)s %(levelname)s %(message)s")
    if args.keytest:
        run_keyboard_test()
        return 0

    from .settings_persistence import get_persistence
    persistence = get_persistence()
    try:
        options = resolve_options(args, persistence.load_settings())
        source = build_word_source(options, random.Random(args.seed))
    except (OSError, ValueError, TypeTestError) as e:
        print(f"typetest: {e}", file=sys.stderr)
        return 1
    if args.save_defaults and not persistence.save_settings(settings_to_store(options)):
        print(f"typetest: could not save defaults to {persistence.settings_file}",
              file=sys.stderr)

    # Lazy import to avoid importing terminal deps for --version
    from .terminal import TerminalInterface
    from .session import TypingSession

    terminal = TerminalInterface()
    try:
        with terminal:
            TypingSession(terminal, source).play()
    except (TypeTestError, OSError) as e:
        logger.debug("Session ended with an error", exc_info=True)
        print(f"typetest: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
