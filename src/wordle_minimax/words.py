"""
Word model and word list loading.

A Word keeps its five letters as indices 0-25 plus a 26-bit mask of the
distinct letters it contains, so containment checks against other letter
sets are single bit operations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from .errors import InvalidWord, VocabularyFormat

WORD_LENGTH = 5
ALPHABET_SIZE = 26

_WORD_RE = re.compile(r"[a-z]{5}")


# letter_index maps a-z (either case) to 0..25
def letter_index(ch: str) -> int:
    if len(ch) != 1 or not "a" <= ch.lower() <= "z":
        raise InvalidWord(f"not a letter: {ch!r}")
    return ord(ch.lower()) - ord("a")


def letter_mask(indices: Iterable[int]) -> int:
    mask = 0
    for i in indices:
        mask |= 1 << i
    return mask


@dataclass(frozen=True)
class Word:
    letters: Tuple[int, ...]
    # derived from letters; never passed in
    mask: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.letters) != WORD_LENGTH:
            raise InvalidWord(f"expected {WORD_LENGTH} letters, got {len(self.letters)}")
        for i in self.letters:
            if not isinstance(i, int) or not 0 <= i < ALPHABET_SIZE:
                raise InvalidWord(f"letter index out of range: {i!r}")
        object.__setattr__(self, "mask", letter_mask(self.letters))

    @classmethod
    def from_str(cls, text: str) -> "Word":
        s = text.strip().lower()
        if not _WORD_RE.fullmatch(s):
            raise InvalidWord(f"expected {WORD_LENGTH} letters a-z, got {text!r}")
        return cls(tuple(ord(ch) - ord("a") for ch in s))

    def __str__(self) -> str:
        return "".join(chr(i + ord("a")) for i in self.letters)

    def contains(self, letter: Union[int, str]) -> bool:
        if isinstance(letter, str):
            letter = letter_index(letter)
        return bool(self.mask >> letter & 1)

    def has_all(self, mask: int) -> bool:
        """True if every letter in `mask` occurs in this word."""
        return mask & ~self.mask == 0

    def has_none(self, mask: int) -> bool:
        """True if no letter in `mask` occurs in this word."""
        return mask & self.mask == 0


# parse_words turns lines into Words, skipping blanks and dropping duplicates (first wins).
# Anything else that is not a five-letter word raises VocabularyFormat.
def parse_words(lines: Iterable[str], path: Optional[str] = None) -> List[Word]:
    words: List[Word] = []
    seen = set()
    for n, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            continue
        try:
            w = Word.from_str(text)
        except InvalidWord:
            raise VocabularyFormat(text, n, path) from None
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words


# load_words_from_file loads a list of 5-letter words from a file, one per line
def load_words_from_file(path: str) -> List[Word]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_words(f, path=str(path))
