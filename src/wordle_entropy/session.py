"""Solver session: the candidate pool and the guess history that produced it.

The pool is always the loaded word list filtered by every recorded guess, in
order. Each step keeps its own immutable snapshot; undo drops the last record
and replays the rest from the loaded list.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidArgument, NothingToUndo
from .feedback import Hint, format_hint, normalize_word, parse_hint
from .filtering import filter_candidates
from .ranking import rank, rank_of, top_n
from .scoring import GuessScore, LogFn, score_guess, score_guesses

GUESS_SPACES = ("allowed", "candidates")


@dataclass(frozen=True)
class GuessRecord:
    word: str
    hint: Hint

    def hint_text(self) -> str:
        return format_hint(self.word, self.hint)


@dataclass(frozen=True)
class HistoryStep:
    record: GuessRecord
    before: int
    after: int

    @property
    def removed(self) -> int:
        return self.before - self.after

    @property
    def removed_pct(self) -> float:
        return self.removed * 100.0 / self.before if self.before else 0.0


@dataclass
class SolverConfig:
    # "allowed": any loaded word not yet guessed may be suggested as a probe
    # "candidates": only words still consistent with the feedback
    guess_space: str = "allowed"
    workers: int = 1
    show_progress: bool = False


class SolverSession:
    def __init__(
        self,
        words: Sequence[str],
        config: Optional[SolverConfig] = None,
        log: Optional[LogFn] = None,
    ):
        self.config = config if config is not None else SolverConfig()
        if self.config.guess_space not in GUESS_SPACES:
            raise InvalidArgument(f"Unknown guess space '{self.config.guess_space}'.")
        self.words: Tuple[str, ...] = tuple(words)
        self._log = log
        self._records: List[GuessRecord] = []
        # _pools[k] is the candidate pool after k records
        self._pools: List[Tuple[str, ...]] = [self.words]
        self._score_cache: Dict[str, List[GuessScore]] = {}

    @property
    def candidates(self) -> Tuple[str, ...]:
        return self._pools[-1]

    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._records)

    def steps(self) -> List[HistoryStep]:
        return [
            HistoryStep(record=r, before=len(self._pools[i]), after=len(self._pools[i + 1]))
            for i, r in enumerate(self._records)
        ]

    def submit_guess(self, word: str, hint_text: str) -> HistoryStep:
        # validate everything before touching state
        guess = normalize_word(word)
        hint = parse_hint(hint_text, guess)
        record = GuessRecord(word=guess, hint=hint)

        before = self.candidates
        after = filter_candidates(before, guess, hint)
        self._records.append(record)
        self._pools.append(after)
        self._score_cache.clear()
        if self._log is not None:
            self._log(f"session: {guess} {record.hint_text()} filtered {len(before)} -> {len(after)}")
        return HistoryStep(record=record, before=len(before), after=len(after))

    def undo(self) -> GuessRecord:
        if not self._records:
            raise NothingToUndo("Nothing to undo.")
        record = self._records[-1]
        remaining = self._records[:-1]

        # rebuild every snapshot from the loaded list rather than patching
        pools = [self.words]
        for r in remaining:
            pools.append(filter_candidates(pools[-1], r.word, r.hint))

        self._records = remaining
        self._pools = pools
        self._score_cache.clear()
        if self._log is not None:
            self._log(f"session: undid {record.word}, pool back to {len(self.candidates)}")
        return record

    def guess_pool(self, guess_space: Optional[str] = None) -> Tuple[str, ...]:
        space = guess_space or self.config.guess_space
        if space not in GUESS_SPACES:
            raise InvalidArgument(f"Unknown guess space '{space}'.")
        if space == "candidates":
            return self.candidates
        guessed = {r.word for r in self._records}
        return tuple(w for w in self.words if w not in guessed)

    def score_word(self, word: str) -> GuessScore:
        return score_guess(normalize_word(word), self.candidates)

    def ranked(self, guess_space: Optional[str] = None) -> List[GuessScore]:
        """Every word of the guess pool scored and ranked; cached until the pool changes."""
        space = guess_space or self.config.guess_space
        if space not in self._score_cache:
            scores = score_guesses(
                self.guess_pool(space),
                self.candidates,
                workers=self.config.workers,
                show_progress=self.config.show_progress,
                log=self._log,
            )
            self._score_cache[space] = rank(scores)
        return self._score_cache[space]

    def top_guesses(self, n: int, guess_space: Optional[str] = None) -> List[GuessScore]:
        if n < 0:
            raise InvalidArgument(f"Number of guesses must not be negative, got {n}.")
        return top_n(self.ranked(guess_space), n)

    def rank_of(self, word: str, guess_space: Optional[str] = None) -> Optional[int]:
        return rank_of(self.ranked(guess_space), normalize_word(word))
