"""Candidate filter: keep only the words that would have produced a given hint."""

from typing import Iterable, Sequence, Tuple

from .feedback import Hint, wordle_feedback


# a candidate is still possible iff guessing against it yields the observed hint
def is_consistent(candidate: str, guess: str, hint: Hint) -> bool:
    return wordle_feedback(guess, candidate) == tuple(hint)


# filter candidates based on guess and hint, keeping their order
def filter_candidates(words: Iterable[str], guess: str, hint: Hint) -> Tuple[str, ...]:
    hint = tuple(hint)  # type: ignore
    return tuple(w for w in words if wordle_feedback(guess, w) == hint)


def replay(words: Sequence[str], records: Iterable[Tuple[str, Hint]]) -> Tuple[str, ...]:
    """Apply every (guess, hint) pair in order to the full word list."""
    pool = tuple(words)
    for guess, hint in records:
        pool = filter_candidates(pool, guess, hint)
    return pool
