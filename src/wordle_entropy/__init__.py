"""Wordle player and entropy solver."""

from .errors import (
    InvalidArgument,
    InvalidHintFormat,
    InvalidWordFormat,
    NothingToUndo,
    WordleError,
    WordListLoadError,
)
from .feedback import Hint, Mark, format_hint, normalize_word, parse_hint, wordle_feedback
from .filtering import filter_candidates, is_consistent, replay
from .ranking import top_n
from .scoring import GuessScore, entropy_from_counts, partition, score_guess, score_guesses
from .session import GuessRecord, SolverConfig, SolverSession
from .words import load_words_from_file

__all__ = [
    "GuessRecord",
    "GuessScore",
    "Hint",
    "InvalidArgument",
    "InvalidHintFormat",
    "InvalidWordFormat",
    "Mark",
    "NothingToUndo",
    "SolverConfig",
    "SolverSession",
    "WordListLoadError",
    "WordleError",
    "entropy_from_counts",
    "filter_candidates",
    "format_hint",
    "is_consistent",
    "load_words_from_file",
    "normalize_word",
    "parse_hint",
    "partition",
    "replay",
    "score_guess",
    "score_guesses",
    "top_n",
    "wordle_feedback",
]
