"""Exceptions raised by the solver."""

from __future__ import annotations

from typing import Optional


class WordleError(Exception):
    """Base class for everything the solver raises on purpose."""


class InvalidWord(WordleError, ValueError):
    pass


class VocabularyFormat(WordleError, ValueError):
    """A word list line is not a usable five-letter word."""

    def __init__(self, text: str, line_number: int, path: Optional[str] = None):
        self.text = text
        self.line_number = line_number
        self.path = path
        where = f"{path}:{line_number}" if path else f"line {line_number}"
        super().__init__(f"{where}: not a five-letter word: {text!r}")


class MalformedFeedback(WordleError, ValueError):
    """Feedback code is not 5 chars of [g, y, .]. The round can be retried."""


class EmptyPool(WordleError, RuntimeError):
    """Guess selection was asked to work on an empty word pool."""


class InconsistentFeedback(EmptyPool):
    """The feedback history rules out every remaining candidate."""
