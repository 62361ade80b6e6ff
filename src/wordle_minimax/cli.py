#!/usr/bin/env python3
"""
cli.py

A Wordle helper that suggests the guess leaving the fewest candidates in the
worst case. You play Wordle elsewhere; after each guess you type the feedback
pattern here.

Feedback format:
- 5 chars of: g (green), y (yellow), . (miss)
  Example: "g..y."
- A guess with a repeated letter: if the game shows one copy green or
  yellow and the other grey, mark every copy g or y anyway. A letter
  marked both present and missing rules out every candidate.

Usage:
  wordle-minimax --words wordlist_guesses.txt --answers wordlist_solutions.txt
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, List, Optional, Tuple

from .errors import InconsistentFeedback, InvalidWord, MalformedFeedback, VocabularyFormat
from .session import DEFAULT_FIRST_GUESS, Session
from .selector import NARROW_BELOW
from .words import Word, load_words_from_file

LogFn = Callable[[str], None]

FEEDBACK_HELP = (
    "Feedback is 5 chars of g (green), y (yellow) or . (miss), e.g. g..y. "
    "Mark every occurrence of a present letter g or y, even where the game greys out a repeat."
)


def make_loggers(verbose: bool, debug: bool) -> Tuple[LogFn, LogFn]:
    start_t = time.time()

    def log(msg: str) -> None:
        if not (verbose or debug):
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=sys.stderr)

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}", file=sys.stderr)

    return log, log_debug


def add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--words", type=str, required=True,
                    help="Path to allowed guess words (5-letter). One per line.")
    ap.add_argument("--answers", type=str, default=None,
                    help="Path to possible answer words (5-letter). One per line. If omitted, uses --words list.")
    ap.add_argument("--first-guess", type=str, default=DEFAULT_FIRST_GUESS,
                    help=f"Opening guess (default: {DEFAULT_FIRST_GUESS}). Use 'auto' to compute it.")
    ap.add_argument("--narrow-below", type=int, default=NARROW_BELOW,
                    help="Only guess remaining candidates once this many or fewer are left.")
    ap.add_argument("--jobs", type=int, default=1, help="Worker processes for guess scoring.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")


def load_vocabulary(words_path: str, answers_path: Optional[str]) -> Tuple[List[Word], List[Word]]:
    """Load guess and answer lists. Raises VocabularyFormat/OSError."""
    allowed = load_words_from_file(words_path)
    answers = load_words_from_file(answers_path) if answers_path else allowed
    return allowed, answers


def first_guess_arg(value: Optional[str]) -> Optional[str]:
    if value is None or value.strip().lower() == "auto":
        return None
    return value


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle minimax solver (interactive CLI).", epilog=FEEDBACK_HELP)
    add_common_args(ap)
    ap.add_argument("--verbose", action="store_true", help="Print solver progress to stderr.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    args = ap.parse_args(argv)

    log, log_debug = make_loggers(args.verbose, args.debug)

    try:
        allowed, answers = load_vocabulary(args.words, args.answers)
    except (OSError, VocabularyFormat) as e:
        print(f"Could not load word lists: {e}", file=sys.stderr)
        return 2
    if not allowed or not answers:
        print("Loaded 0 usable words. Check the word lists.", file=sys.stderr)
        return 2
    log(f"solver: loaded allowed={len(allowed)} answers={len(answers)}")

    try:
        session = Session(
            allowed,
            answers,
            first_guess=first_guess_arg(args.first_guess),
            narrow_below=args.narrow_below,
            show_progress=not args.no_progress,
            jobs=args.jobs,
            log=log,
        )
    except InvalidWord as e:
        print(f"Bad --first-guess: {e}", file=sys.stderr)
        return 2

    print(FEEDBACK_HELP)
    while not session.solved:
        print(f"# {session.guess} to refine {session.summary()}")
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line or line.strip().lower() == "quit":
            print()
            return 0

        log_debug(f"input: {line.strip()!r}")
        try:
            session.apply(line)
        except MalformedFeedback as e:
            print(f"{e}; use 5 chars of g, y or '.'")
            continue
        except InconsistentFeedback as e:
            print(f"No candidates left: {e}. A feedback pattern was probably mistyped.", file=sys.stderr)
            return 1

    print(f"only solution remaining is {session.solution}")
    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
