"""Solve-mode commands: parsing a REPL line and dispatching it to the session.

Commands are a closed set of small dataclasses. `dispatch` maps each one to a
single session call and returns an outcome object for the REPL to render.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import InvalidArgument
from .scoring import GuessScore
from .session import GuessRecord, HistoryStep, SolverSession

HELP_MESSAGE = """\
top <n> [strict]       Print the n best guesses given the remaining possible
                       answers, with their entropy in bits, the expected share
                       of answers eliminated and the worst-case share. With
                       'strict', only words that are still possible answers
                       are considered.

score <word>           Print the scores of one word against the remaining
                       possible answers.

guessed <word> <hint>  Record a guess and the feedback it got.
                       Here is how to type <hint>:
                       - green (right letter, right spot): retype the letter
                       - yellow (in the word, wrong spot): '*'
                       - grey (not in the word): '_'
                       Example: 'guessed hello h*ll_'

history                Print the guesses so far and how much each narrowed the list.

undo                   Forget the last guess and restore the word list.

help                   Print this message.

exit                   Leave the solver."""


@dataclass(frozen=True)
class Top:
    n: int
    strict: bool = False


@dataclass(frozen=True)
class Score:
    word: str


@dataclass(frozen=True)
class Guessed:
    word: str
    hint: str


@dataclass(frozen=True)
class History:
    pass


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Exit:
    pass


Command = Union[Top, Score, Guessed, History, Undo, Help, Exit]


@dataclass(frozen=True)
class TopOutcome:
    scores: List[GuessScore]
    guess_space: str
    remaining: int


@dataclass(frozen=True)
class ScoreOutcome:
    score: GuessScore
    rank: Optional[int]


@dataclass(frozen=True)
class GuessOutcome:
    step: HistoryStep
    candidates: Tuple[str, ...]


@dataclass(frozen=True)
class HistoryOutcome:
    initial: int
    steps: List[HistoryStep]


@dataclass(frozen=True)
class UndoOutcome:
    record: GuessRecord
    remaining: int


@dataclass(frozen=True)
class HelpOutcome:
    text: str = HELP_MESSAGE


@dataclass(frozen=True)
class ExitOutcome:
    pass


Outcome = Union[TopOutcome, ScoreOutcome, GuessOutcome, HistoryOutcome, UndoOutcome, HelpOutcome, ExitOutcome]

_NO_ARGS = {"history": History, "undo": Undo, "help": Help, "exit": Exit, "quit": Exit}


def _expect_args(args: Tuple[str, ...], usage: str, counts: Tuple[int, ...]) -> None:
    if len(args) not in counts:
        raise InvalidArgument(f"Usage: {usage}")


def parse_command(line: str) -> Optional[Command]:
    """Tokenize a REPL line. Blank lines give None."""
    tokens = line.split()
    if not tokens:
        return None
    name, args = tokens[0].lower(), tuple(tokens[1:])

    if name in _NO_ARGS:
        _expect_args(args, name, (0,))
        return _NO_ARGS[name]()

    if name == "top":
        _expect_args(args, "top <n> [strict]", (1, 2))
        try:
            n = int(args[0])
        except ValueError:
            raise InvalidArgument(f"'{args[0]}' is not a number.")
        if n < 0:
            raise InvalidArgument(f"Number of guesses must not be negative, got {n}.")
        strict = False
        if len(args) == 2:
            if args[1].lower() != "strict":
                raise InvalidArgument(f"Unknown option '{args[1]}'. Usage: top <n> [strict]")
            strict = True
        return Top(n=n, strict=strict)

    if name == "score":
        _expect_args(args, "score <word>", (1,))
        return Score(word=args[0])

    if name == "guessed":
        _expect_args(args, "guessed <word> <hint>", (2,))
        return Guessed(word=args[0], hint=args[1])

    raise InvalidArgument(f"Bad command '{tokens[0]}'. Type 'help' for commands.")


def dispatch(session: SolverSession, command: Command) -> Outcome:
    if isinstance(command, Top):
        space = "candidates" if command.strict else session.config.guess_space
        return TopOutcome(
            scores=session.top_guesses(command.n, guess_space=space),
            guess_space=space,
            remaining=len(session.candidates),
        )
    if isinstance(command, Score):
        score = session.score_word(command.word)
        return ScoreOutcome(score=score, rank=session.rank_of(score.word))
    if isinstance(command, Guessed):
        step = session.submit_guess(command.word, command.hint)
        return GuessOutcome(step=step, candidates=session.candidates)
    if isinstance(command, History):
        return HistoryOutcome(initial=len(session.words), steps=session.steps())
    if isinstance(command, Undo):
        record = session.undo()
        return UndoOutcome(record=record, remaining=len(session.candidates))
    if isinstance(command, Help):
        return HelpOutcome()
    if isinstance(command, Exit):
        return ExitOutcome()
    raise InvalidArgument(f"Unsupported command {command!r}.")
