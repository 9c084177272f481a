"""Solve mode: read a command, run it against the session, print the outcome."""

from typing import Callable, Optional

from rich.console import Console
from rich.text import Text

from .commands import (
    ExitOutcome,
    GuessOutcome,
    HelpOutcome,
    HistoryOutcome,
    Outcome,
    ScoreOutcome,
    TopOutcome,
    UndoOutcome,
    dispatch,
    parse_command,
)
from .errors import WordleError
from .render import hint_tiles, history_line, score_table
from .scoring import LogFn
from .session import SolverSession

ReadLine = Callable[[str], str]

PROMPT = "> "


def render_outcome(console: Console, outcome: Outcome) -> None:
    if isinstance(outcome, TopOutcome):
        if outcome.remaining == 0:
            console.print("No candidates left. Either the word list doesn't match the game's dictionary,")
            console.print("or a hint was mistyped. Try 'undo'.")
            return
        if not outcome.scores:
            console.print("No guesses to suggest.")
            return
        console.print(f"Scoring from '{outcome.guess_space}' against {outcome.remaining} possible answers:")
        console.print(score_table(outcome.scores))

    elif isinstance(outcome, ScoreOutcome):
        s = outcome.score
        if outcome.rank is not None:
            console.print(f"Rank: {outcome.rank}")
        else:
            console.print("Rank: not in the current guess pool")
        console.print(f"Entropy: {s.entropy:.3f} bits")
        console.print(f"Expected: {s.expected_reduction:.3f}%")
        console.print(f"Worst-Case: {s.worst_case_reduction:.3f}% ({s.worst_case} of {s.total} left)")

    elif isinstance(outcome, GuessOutcome):
        step = outcome.step
        console.print(hint_tiles(step.record.word, step.record.hint))
        console.print(f"Removed {step.removed} words.")
        console.print(f"{step.after} possible answers remaining.")
        if step.after == 0:
            console.print("No candidates left. Check the hint you typed, or 'undo'.")
        elif step.after == 1:
            console.print(f"There's only one word left, the answer is {outcome.candidates[0]}!")
        elif step.after <= 20:
            console.print("Candidates: " + " ".join(outcome.candidates))

    elif isinstance(outcome, HistoryOutcome):
        console.print(f"Starting with {outcome.initial} words")
        for i, step in enumerate(outcome.steps, start=1):
            console.print(history_line(i, step))

    elif isinstance(outcome, UndoOutcome):
        line = Text("Undoing last guess: ")
        line.append_text(hint_tiles(outcome.record.word, outcome.record.hint))
        console.print(line)
        console.print(f"Restored word list to {outcome.remaining} words.")

    elif isinstance(outcome, HelpOutcome):
        console.print(outcome.text, markup=False)

    elif isinstance(outcome, ExitOutcome):
        console.print("Exiting solver...")


def run_repl(
    session: SolverSession,
    *,
    console: Console,
    read_line: Optional[ReadLine] = None,
    log: Optional[LogFn] = None,
) -> None:
    read = read_line if read_line is not None else console.input

    console.print("Starting Wordle Solver REPL. Type 'help' for commands.")
    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            console.print("Exiting solver...")
            return

        # errors are reported and the session is left as it was
        try:
            command = parse_command(line)
            if command is None:
                continue
            if log is not None:
                log(f"repl: {command!r}")
            outcome = dispatch(session, command)
        except WordleError as e:
            console.print(f"Error: {e}", markup=False)
            continue

        render_outcome(console, outcome)
        if isinstance(outcome, ExitOutcome):
            return
