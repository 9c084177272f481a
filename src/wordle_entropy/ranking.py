from typing import Iterable, List, Optional

from .errors import InvalidArgument
from .scoring import GuessScore


def _rank_key(s: GuessScore):
    # highest entropy first, ties broken alphabetically
    return (-s.entropy, s.word)


def rank(scores: Iterable[GuessScore]) -> List[GuessScore]:
    return sorted(scores, key=_rank_key)


# suggest top n guesses by entropy
def top_n(scores: Iterable[GuessScore], n: int) -> List[GuessScore]:
    if n < 0:
        raise InvalidArgument(f"Number of guesses must not be negative, got {n}.")
    return rank(scores)[:n]


def rank_of(ranked: List[GuessScore], word: str) -> Optional[int]:
    """1-based position of word in an already ranked list, or None."""
    for i, s in enumerate(ranked, start=1):
        if s.word == word:
            return i
    return None
