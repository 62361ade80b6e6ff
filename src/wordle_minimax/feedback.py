"""
Feedback engine.

A Feedback records what a guess told us about the solution: which letters
are present or absent, and which (letter, position) pairs were green or
yellow. It can be simulated from a hypothetical solution or parsed from
what the player typed, and either way it is tested against candidates with
matches().

Known limitation: simulate() decides "present" from the solution's letter
set alone, with no per-occurrence accounting. A guess with a repeated letter
reports every occurrence as present (green or yellow) when the solution has
that letter at all, where the real game would grey out the extras.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .errors import MalformedFeedback
from .words import WORD_LENGTH, Word

LetterPos = Tuple[int, int]  # (letter index, position)

GREEN = "g"
YELLOW = "y"
MISS = "."


@dataclass(frozen=True)
class Feedback:
    present: int
    absent: int
    correct_position: Tuple[LetterPos, ...]
    wrong_position: Tuple[LetterPos, ...]

    @classmethod
    def simulate(cls, solution: Word, guess: Word) -> "Feedback":
        """Feedback the game would give for `guess` if the answer were `solution`."""
        present = absent = 0
        good: List[LetterPos] = []
        bad: List[LetterPos] = []
        for pos, ch in enumerate(guess.letters):
            if solution.mask >> ch & 1:
                if solution.letters[pos] == ch:
                    good.append((ch, pos))
                else:
                    bad.append((ch, pos))
                present |= 1 << ch
            else:
                absent |= 1 << ch
        return cls(present, absent, tuple(good), tuple(bad))

    @classmethod
    def parse(cls, code: str, guess: Union[Word, str]) -> "Feedback":
        """
        Build feedback from a code like "g..y." typed after playing `guess`.

        g (green) for letter in correct spot
        y (yellow) for letter in wrong spot
        . for letter not in the word
        """
        if isinstance(guess, str):
            guess = Word.from_str(guess)
        s = code.strip().lower()
        if len(s) != WORD_LENGTH:
            raise MalformedFeedback(f"expected {WORD_LENGTH} chars, got {len(s)}")
        bad_chars = sorted({c for c in s if c not in (GREEN, YELLOW, MISS)})
        if bad_chars:
            raise MalformedFeedback(
                f"feedback may only use 'g', 'y' and '.', got {''.join(bad_chars)!r}"
            )

        present = absent = 0
        good: List[LetterPos] = []
        bad: List[LetterPos] = []
        for pos, (c, ch) in enumerate(zip(s, guess.letters)):
            if c == GREEN:
                good.append((ch, pos))
                present |= 1 << ch
            elif c == YELLOW:
                bad.append((ch, pos))
                present |= 1 << ch
            else:
                absent |= 1 << ch
        return cls(present, absent, tuple(good), tuple(bad))

    @property
    def code(self) -> str:
        out = [MISS] * WORD_LENGTH
        for _, pos in self.correct_position:
            out[pos] = GREEN
        for _, pos in self.wrong_position:
            out[pos] = YELLOW
        return "".join(out)

    @property
    def is_solved(self) -> bool:
        return len(self.correct_position) == WORD_LENGTH

    def matches(self, w: Word) -> bool:
        return (
            w.has_all(self.present)
            and w.has_none(self.absent)
            and all(w.letters[pos] == ch for ch, pos in self.correct_position)
            and not any(w.letters[pos] == ch for ch, pos in self.wrong_position)
        )


def filter_candidates(words: Iterable[Word], feedback: Feedback) -> List[Word]:
    """Words consistent with `feedback`, in their original order."""
    return [w for w in words if feedback.matches(w)]
