#!/usr/bin/env python3
"""simulate.py

Self-play: the solver is fed the true feedback for each secret in a word list
until it guesses it, and we report how quickly the candidate pool collapses.

Examples:
  wordle-minimax-sim --words wordlist_guesses.txt --answers wordlist_solutions.txt --limit 200
  wordle-minimax-sim --words wordlist_guesses.txt --plot pools.png

Notes:
- --plot needs matplotlib (pip install wordle-minimax[plot]).
"""

from __future__ import annotations

import argparse
import statistics
import sys
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import tqdm

from .cli import add_common_args, first_guess_arg, load_vocabulary
from .errors import InconsistentFeedback, InvalidWord, VocabularyFormat
from .feedback import Feedback
from .selector import NARROW_BELOW
from .session import DEFAULT_FIRST_GUESS, Session
from .words import Word, load_words_from_file


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    turns: int
    final_candidates: int
    first_guess: str
    # candidates still open at the start of each turn played
    pool_sizes: Tuple[int, ...] = ()


# simulate_game plays one game against a known secret, the secret itself acting as the oracle
def simulate_game(
    *,
    secret: Word,
    guesses: Sequence[Word],
    solutions: Sequence[Word],
    first_guess: Optional[str] = DEFAULT_FIRST_GUESS,
    narrow_below: int = NARROW_BELOW,
    max_turns: int = 6,
    jobs: int = 1,
) -> GameResult:
    session = Session(guesses, solutions, first_guess=first_guess, narrow_below=narrow_below, jobs=jobs)
    opener = str(session.guess)
    sizes: List[int] = []

    def result(solved: bool, turns: int, left: int) -> GameResult:
        return GameResult(str(secret), solved, turns, left, opener, tuple(sizes))

    for turn in range(1, max_turns + 1):
        sizes.append(len(session.candidates))
        score = Feedback.simulate(secret, session.guess)
        if score.is_solved:
            return result(True, turn, len(session.candidates))
        try:
            session.apply(score.code)
        except InconsistentFeedback:
            # only happens when the secret isn't in the solution list
            return result(False, turn, 0)

    return result(False, max_turns, len(session.candidates))


# summarize reports turns to solve and how hard the opener and later guesses cut the pool
def summarize(results: Iterable[GameResult]) -> str:
    results = list(results)
    if not results:
        return "No results."

    solved = [r for r in results if r.solved]
    unsolved = [r for r in results if not r.solved]
    n = len(results)

    lines = [f"Games: {n}", f"Solved: {len(solved)}/{n} ({len(solved) / n * 100:.2f}%)"]

    if solved:
        turns = [r.turns for r in solved]
        hardest = max(solved, key=lambda r: r.turns)
        by_turns = Counter(turns)
        lines.append(f"Mean turns: {statistics.mean(turns):.3f} (hardest: {hardest.secret} in {hardest.turns})")
        lines.append("Solved on turn: " + " ".join(f"{t}={by_turns[t]}" for t in sorted(by_turns)))

    after_opener = [r.pool_sizes[1] for r in results if len(r.pool_sizes) > 1]
    if after_opener:
        lines.append(
            f"Left after {results[0].first_guess}: "
            f"mean {statistics.mean(after_opener):.1f}, worst {max(after_opener)}"
        )

    if unsolved:
        shown = ", ".join(f"{r.secret}({r.final_candidates} left)" for r in unsolved[:10])
        lines.append(f"Unsolved: {shown}")

    return "\n".join(lines)


# pool_curve gives, per turn, the mean and the largest pool over games that reached that turn
def pool_curve(results: Sequence[GameResult]) -> List[Tuple[int, float, int]]:
    longest = max((len(r.pool_sizes) for r in results), default=0)
    curve = []
    for t in range(longest):
        sizes = [r.pool_sizes[t] for r in results if len(r.pool_sizes) > t]
        curve.append((t + 1, statistics.mean(sizes), max(sizes)))
    return curve


def plot_results(*, results: Sequence[GameResult], out_path: str) -> None:
    # matplotlib is optional; only import it when a plot is asked for
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    curve = pool_curve(results)
    turns = [t for t, _, _ in curve]

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(turns, [mean for _, mean, _ in curve], marker="o", label="mean")
    ax.plot(turns, [worst for _, _, worst in curve], marker="s", linestyle="--", color="C3", label="worst")
    ax.set_yscale("log")
    ax.set_title(f"Candidates remaining ({len(results)} games)")
    ax.set_xlabel("Turn")
    ax.set_ylabel("Candidates before guessing")
    ax.set_xticks(turns)
    ax.legend(loc="upper right")
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Play the minimax solver against known secrets and report statistics.")
    add_common_args(ap)
    ap.add_argument("--secrets", type=str, default=None,
                    help="Secrets to play against (defaults to the answer list).")
    ap.add_argument("--limit", type=int, default=0, help="Only play the first N secrets (0 = all).")
    ap.add_argument("--max-turns", type=int, default=6, help="Give up after this many guesses.")
    ap.add_argument("--plot", type=str, default=None, help="Write a candidates-per-turn chart to this PNG.")
    args = ap.parse_args(argv)

    try:
        allowed, answers = load_vocabulary(args.words, args.answers)
        secrets = load_words_from_file(args.secrets) if args.secrets else answers
    except (OSError, VocabularyFormat) as e:
        print(f"Could not load word lists: {e}", file=sys.stderr)
        return 2
    if not allowed or not answers:
        print("Loaded 0 usable words. Check the word lists.", file=sys.stderr)
        return 2

    first_guess = first_guess_arg(args.first_guess)
    if first_guess is not None:
        try:
            Word.from_str(first_guess)
        except InvalidWord as e:
            print(f"Bad --first-guess: {e}", file=sys.stderr)
            return 2

    answer_set = set(answers)
    playable = [s for s in secrets if s in answer_set]
    if len(playable) < len(secrets):
        print(f"Skipped {len(secrets) - len(playable)} secrets not in possible answers.")
    if args.limit > 0:
        playable = playable[: args.limit]

    games = tqdm.tqdm(playable, desc="Simulating", unit="game") if not args.no_progress else playable
    results = [
        simulate_game(
            secret=secret,
            guesses=allowed,
            solutions=answers,
            first_guess=first_guess,
            narrow_below=args.narrow_below,
            max_turns=args.max_turns,
            jobs=args.jobs,
        )
        for secret in games
    ]
    print(summarize(results))

    if args.plot and results:
        try:
            plot_results(results=results, out_path=args.plot)
        except ImportError as e:
            print(f"--plot needs matplotlib ({e}).", file=sys.stderr)
            return 2
        print(f"Wrote plot: {args.plot}")

    return 0


def cli() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
