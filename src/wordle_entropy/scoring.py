"""Entropy scorer.

A guess splits the candidate pool into classes of words that would all give
the same hint. The score is the Shannon entropy of that split, in bits: the
expected information the guess reveals when every candidate is equally likely.
"""

import math
import multiprocessing
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import tqdm

from .feedback import Hint, wordle_feedback

LogFn = Callable[[str], None]


# compute Shannon entropy from counts
# H(X) = - sum(p(x) * log2(p(x))) over all x in X
# here X is the set of hints a guess can produce and the inputs are
# how many candidates produce each hint
def entropy_from_counts(counts: Iterable[int], total: int) -> float:
    """Shannon entropy in bits, from bucket counts"""
    if total <= 1:
        return 0.0
    h = 0.0
    # sorted so that equal partitions always sum in the same order
    for c in sorted(counts):
        if c:
            p = c / total
            h -= p * math.log2(p)
    return h


@dataclass(frozen=True)
class GuessScore:
    word: str
    entropy: float
    worst_case: int
    total: int

    @property
    def expected_reduction(self) -> float:
        """Percent of the pool a guess is expected to eliminate, from its entropy."""
        return (1.0 - 2.0 ** -self.entropy) * 100.0

    @property
    def worst_case_reduction(self) -> float:
        if self.total == 0:
            return 0.0
        return (1.0 - self.worst_case / self.total) * 100.0


# group candidates by the hint the guess would get if each were the secret
def partition(guess: str, candidates: Iterable[str]) -> Dict[Hint, List[str]]:
    groups: Dict[Hint, List[str]] = defaultdict(list)
    for secret in candidates:
        groups[wordle_feedback(guess, secret)].append(secret)
    return groups


def score_guess(guess: str, candidates: Sequence[str]) -> GuessScore:
    buckets: Dict[Hint, int] = defaultdict(int)
    for secret in candidates:
        buckets[wordle_feedback(guess, secret)] += 1

    total = len(candidates)
    return GuessScore(
        word=guess,
        entropy=entropy_from_counts(buckets.values(), total=total),
        worst_case=max(buckets.values(), default=0),
        total=total,
    )


# ---------- worker globals for multiprocessing ----------
_WORKER_CANDIDATES: Tuple[str, ...] = ()


def _init_worker(candidates: Tuple[str, ...]) -> None:
    # set once per worker so each task only ships the guess
    global _WORKER_CANDIDATES
    _WORKER_CANDIDATES = candidates


def _score_in_worker(guess: str) -> GuessScore:
    return score_guess(guess, _WORKER_CANDIDATES)


def score_guesses(
    guesses: Sequence[str],
    candidates: Sequence[str],
    *,
    workers: int = 1,
    show_progress: bool = False,
    log: Optional[LogFn] = None,
) -> List[GuessScore]:
    """Score every guess against the candidates. Output order follows `guesses`."""
    candidates = tuple(candidates)
    if log is not None:
        log(f"scoring: {len(guesses)} guesses x {len(candidates)} candidates (workers={workers})")

    if workers <= 1 or len(guesses) < 2:
        iterator = tqdm.tqdm(guesses, desc="Scoring guesses", unit="word") if show_progress else guesses
        return [score_guess(g, candidates) for g in iterator]

    chunksize = max(1, len(guesses) // (workers * 8))
    with multiprocessing.Pool(processes=workers, initializer=_init_worker, initargs=(candidates,)) as pool:
        results = pool.imap(_score_in_worker, guesses, chunksize=chunksize)
        if show_progress:
            results = tqdm.tqdm(results, total=len(guesses), desc="Scoring guesses", unit="word")
        return list(results)
