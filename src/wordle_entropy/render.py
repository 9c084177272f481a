"""Terminal rendering with rich: coloured tiles, score tables, history lines."""

from typing import List

from rich.table import Table
from rich.text import Text

from .feedback import Hint, Mark
from .scoring import GuessScore
from .session import HistoryStep

MARK_STYLES = {
    Mark.HIT: "bold green",
    Mark.MISPLACED: "bold yellow",
    Mark.MISS: "bold white",
}


def hint_tiles(word: str, hint: Hint) -> Text:
    text = Text()
    for ch, mark in zip(word, hint):
        text.append(ch.upper(), style=MARK_STYLES[Mark(mark)])
    return text


def score_table(scores: List[GuessScore]) -> Table:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Rank", justify="right")
    table.add_column("Word")
    table.add_column("Bits", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Worst-Case", justify="right")
    for i, s in enumerate(scores, start=1):
        table.add_row(
            str(i),
            s.word,
            f"{s.entropy:.3f}",
            f"{s.expected_reduction:.3f}%",
            f"{s.worst_case_reduction:.3f}%",
        )
    return table


def history_line(index: int, step: HistoryStep) -> Text:
    line = Text(f"{index}: ")
    line.append_text(hint_tiles(step.record.word, step.record.hint))
    line.append(
        f" - Removed {step.removed} of {step.before} ({step.removed_pct:.2f}%). {step.after} Remaining."
    )
    return line
