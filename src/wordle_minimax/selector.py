"""
Minimax guess selection.

For every guess we pretend each remaining candidate is the answer, work out
the feedback that guess would get, and count how many candidates would still
be consistent with it. The worst of those counts is the guess's score and the
guess with the smallest score wins.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Dict, List, Sequence, Tuple

import tqdm

from .errors import EmptyPool
from .feedback import Feedback
from .words import Word

# Below this many candidates, only the candidates themselves are tried as guesses.
NARROW_BELOW = 3


# worst_case_remaining counts the solutions that can survive `guess` when the answer is as unhelpful as possible
def worst_case_remaining(guess: Word, solutions: Sequence[Word]) -> int:
    if not solutions:
        raise EmptyPool("no solutions to score guess against")
    # different answers often give identical feedback; count each one once
    counts: Dict[Feedback, int] = {}
    worst = 0
    for s in solutions:
        score = Feedback.simulate(s, guess)
        n = counts.get(score)
        if n is None:
            n = counts[score] = sum(1 for w in solutions if score.matches(w))
        if n > worst:
            worst = n
    return worst


# rank_guesses scores every guess, keeping guess-pool order
def rank_guesses(
    solutions: Sequence[Word],
    guesses: Sequence[Word],
    show_progress: bool = False,
    jobs: int = 1,
) -> List[Tuple[Word, int]]:
    if not solutions:
        raise EmptyPool("solution pool is empty")
    if not guesses:
        raise EmptyPool("guess pool is empty")

    score = partial(worst_case_remaining, solutions=list(solutions))
    if jobs > 1 and len(guesses) > 1:
        with ProcessPoolExecutor(max_workers=jobs) as pool:
            chunk = max(1, len(guesses) // (jobs * 4))
            results = pool.map(score, guesses, chunksize=chunk)
            if show_progress:
                results = tqdm.tqdm(results, total=len(guesses), desc="Scoring guesses", unit="word")
            # map() yields in submission order, so the ranking stays deterministic
            return list(zip(guesses, results))

    iterator = tqdm.tqdm(guesses, desc="Scoring guesses", unit="word") if show_progress else guesses
    return [(g, score(g)) for g in iterator]


def best_guess(
    solutions: Sequence[Word],
    guesses: Sequence[Word],
    show_progress: bool = False,
    jobs: int = 1,
) -> Word:
    """
    Return the guess which minimises the maximum number of possible solutions
    remaining after that guess. Ties go to the earliest guess in the pool.
    """
    scored = rank_guesses(solutions, guesses, show_progress=show_progress, jobs=jobs)
    # min() keeps the first of equal keys
    return min(scored, key=lambda item: item[1])[0]


# guess_pool is the full guess list while many candidates remain, else just the candidates
def guess_pool(
    solutions: Sequence[Word],
    guesses: Sequence[Word],
    narrow_below: int = NARROW_BELOW,
) -> Sequence[Word]:
    return guesses if len(solutions) > narrow_below else solutions
