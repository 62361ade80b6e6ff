"""Round-by-round solver state: suggest a guess, take feedback, narrow the pool."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from .errors import EmptyPool, InconsistentFeedback
from .feedback import Feedback, filter_candidates
from .selector import NARROW_BELOW, best_guess, guess_pool
from .words import Word

LogFn = Callable[[str], None]

DEFAULT_FIRST_GUESS = "arise"
SUMMARY_LIMIT = 10


# summarise_words lists the words when there are few, else just counts them
def summarise_words(words: Sequence[Word], limit: int = SUMMARY_LIMIT) -> str:
    if len(words) > limit:
        return f"{len(words)} words"
    return ",".join(str(w) for w in words)


class Session:
    def __init__(
        self,
        guesses: Sequence[Word],
        solutions: Sequence[Word],
        first_guess: Optional[str] = DEFAULT_FIRST_GUESS,
        narrow_below: int = NARROW_BELOW,
        show_progress: bool = False,
        jobs: int = 1,
        log: Optional[LogFn] = None,
    ):
        self.guesses: List[Word] = list(guesses)
        self.candidates: List[Word] = list(solutions)
        self.narrow_below = narrow_below
        self.show_progress = show_progress
        self.jobs = jobs
        self.history: List[Tuple[Word, str]] = []
        self._log = log

        if not self.candidates:
            raise EmptyPool("no possible solutions to start from")
        if len(self.candidates) == 1:
            self.guess = self.candidates[0]
        elif first_guess is not None:
            self.guess = Word.from_str(first_guess)
        else:
            self.guess = self._next_guess()

    def _info(self, msg: str) -> None:
        if self._log is not None:
            self._log(msg)

    @property
    def round(self) -> int:
        return len(self.history)

    @property
    def solved(self) -> bool:
        return len(self.candidates) == 1

    @property
    def solution(self) -> Optional[Word]:
        return self.candidates[0] if self.solved else None

    def summary(self) -> str:
        return summarise_words(self.candidates)

    def _next_guess(self) -> Word:
        pool = guess_pool(self.candidates, self.guesses, self.narrow_below)
        self._info(f"solver: scoring {len(pool)} guesses against {len(self.candidates)} candidates")
        return best_guess(self.candidates, pool, show_progress=self.show_progress, jobs=self.jobs)

    # apply narrows the pool with `code` for the current guess and returns the next guess.
    # Bad codes raise MalformedFeedback and leave the session as it was.
    def apply(self, code: str) -> Word:
        score = Feedback.parse(code, self.guess)
        remaining = filter_candidates(self.candidates, score)
        self._info(f"solver: filtered candidates {len(self.candidates)} -> {len(remaining)}")
        if not remaining:
            msg = f"feedback {score.code} for {self.guess} rules out every candidate"
            clash = score.present & score.absent
            if clash:
                letters = "".join(chr(i + ord("a")) for i in range(26) if clash >> i & 1)
                msg += (
                    f" ({letters!r} marked both present and missing;"
                    " mark every occurrence of a present letter g or y)"
                )
            raise InconsistentFeedback(msg)

        self.history.append((self.guess, score.code))
        self.candidates = remaining
        if self.solved:
            self.guess = remaining[0]
        else:
            self.guess = self._next_guess()
        return self.guess
