"""Minimax Wordle solver package."""

from .errors import (
    EmptyPool,
    InconsistentFeedback,
    InvalidWord,
    MalformedFeedback,
    VocabularyFormat,
    WordleError,
)
from .feedback import Feedback, filter_candidates
from .selector import best_guess, guess_pool, rank_guesses, worst_case_remaining
from .session import Session, summarise_words
from .words import Word, load_words_from_file, parse_words

__all__ = [
    "EmptyPool",
    "Feedback",
    "InconsistentFeedback",
    "InvalidWord",
    "MalformedFeedback",
    "Session",
    "VocabularyFormat",
    "Word",
    "WordleError",
    "best_guess",
    "filter_candidates",
    "guess_pool",
    "load_words_from_file",
    "parse_words",
    "rank_guesses",
    "summarise_words",
    "worst_case_remaining",
]
