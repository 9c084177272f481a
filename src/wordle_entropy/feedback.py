"""Feedback model: comparing a guess against a secret and the hint text format.

Hint text is 5 characters aligned with the guess:
  _  miss (letter not in the secret, or all its copies already accounted for)
  *  misplaced (letter is in the secret at another position)
  a letter  hit (retype the guessed letter, case-insensitive)

Example: guessing "hello" and typing "h*ll_".
"""

from collections import Counter
from enum import IntEnum
from typing import Optional, Tuple

from .errors import InvalidHintFormat, InvalidWordFormat

WORD_LENGTH = 5


class Mark(IntEnum):
    MISS = 0
    MISPLACED = 1
    HIT = 2


Hint = Tuple[Mark, Mark, Mark, Mark, Mark]

ALL_HITS: Hint = (Mark.HIT,) * WORD_LENGTH  # type: ignore


# normalize_word lowercases a word and checks it is exactly 5 letters
def normalize_word(text: str) -> str:
    w = text.strip().lower()
    if len(w) != WORD_LENGTH or not w.isalpha():
        raise InvalidWordFormat(f"'{text.strip()}' is not a {WORD_LENGTH}-letter word.")
    return w


# compute Wordle-style feedback for guess given the secret word
def wordle_feedback(guess: str, secret: str) -> Hint:
    """
    Two passes so repeated letters are not over-counted:
    hits first consume their letter from the secret, then misplaced marks
    consume whatever is left, left to right.
    """
    res = [Mark.MISS] * WORD_LENGTH
    secret_counts = Counter(secret)

    # first pass: hits
    for i, (g_ch, s_ch) in enumerate(zip(guess, secret)):
        if g_ch == s_ch:
            res[i] = Mark.HIT
            secret_counts[g_ch] -= 1

    # second pass: misplaced (only for non-hits)
    for i, g_ch in enumerate(guess):
        if res[i] == Mark.MISS and secret_counts[g_ch] > 0:
            res[i] = Mark.MISPLACED
            secret_counts[g_ch] -= 1

    return tuple(res)  # type: ignore


# parse_hint converts a string like 'h*ll_' into a Hint tuple
def parse_hint(text: str, guess: Optional[str] = None) -> Hint:
    """When the guess is given, letters must retype the guessed letter at that position."""
    s = text.strip()
    if len(s) != WORD_LENGTH:
        raise InvalidHintFormat(
            f"Hint must be {WORD_LENGTH} characters of '_', '*' or the guessed letter, got '{s}'."
        )
    marks = []
    for i, ch in enumerate(s):
        if ch == "_":
            marks.append(Mark.MISS)
        elif ch == "*":
            marks.append(Mark.MISPLACED)
        elif ch.isalpha():
            if guess is not None and ch.lower() != guess[i]:
                raise InvalidHintFormat(
                    f"Hint letter '{ch}' at position {i + 1} does not match the guessed letter '{guess[i]}'."
                )
            marks.append(Mark.HIT)
        else:
            raise InvalidHintFormat(f"Invalid hint character '{ch}' at position {i + 1}.")
    return tuple(marks)  # type: ignore


def format_hint(guess: str, hint: Hint) -> str:
    chars = []
    for ch, mark in zip(guess, hint):
        if mark == Mark.HIT:
            chars.append(ch)
        elif mark == Mark.MISPLACED:
            chars.append("*")
        else:
            chars.append("_")
    return "".join(chars)


def is_solved(hint: Hint) -> bool:
    return tuple(hint) == ALL_HITS
