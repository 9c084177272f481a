"""Play mode: guess a hidden word drawn from the word list."""

import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rich.console import Console

from .errors import InvalidWordFormat
from .feedback import is_solved, normalize_word, wordle_feedback
from .filtering import filter_candidates
from .render import hint_tiles
from .scoring import LogFn

ReadLine = Callable[[str], str]


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    turns: int


def play_game(
    words: Sequence[str],
    *,
    console: Console,
    secret: Optional[str] = None,
    rng: Optional[random.Random] = None,
    max_attempts: int = 6,
    hard: bool = False,
    read_line: Optional[ReadLine] = None,
    log: Optional[LogFn] = None,
) -> GameResult:
    """
    Invalid guesses are reported and do not use up an attempt. In hard mode a
    guess must also fit every hint shown so far.
    """
    read = read_line if read_line is not None else console.input
    if secret is None:
        secret = (rng or random.Random()).choice(list(words))
    word_set = set(words)
    pool = tuple(words)

    console.print(f"Welcome to Wordle! Guess the 5-letter word. You have {max_attempts} attempts.\n")
    console.print("Letters are marked grey if they don't appear in the word.")
    console.print("Letters are marked [bold yellow]yellow[/] if they are in the wrong position.")
    console.print("Letters are marked [bold green]green[/] if they are in the correct position.\n")

    attempts = 0
    while attempts < max_attempts:
        console.print(f"You have {max_attempts - attempts} attempts left.")
        try:
            line = read("Enter your guess: ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return GameResult(secret=secret, solved=False, turns=attempts)

        try:
            guess = normalize_word(line)
        except InvalidWordFormat as e:
            console.print(f"{e}\n", markup=False)
            continue

        if guess not in word_set:
            console.print("Invalid word. Please try again.\n")
            continue

        if hard and guess not in pool:
            console.print(f"Hard mode: '{guess}' does not fit the hints so far.\n", markup=False)
            continue

        hint = wordle_feedback(guess, secret)
        attempts += 1
        console.print(hint_tiles(guess, hint))
        console.print()

        if is_solved(hint):
            console.print(f"[bold green]Congratulations! You guessed the word in {attempts}![/]")
            return GameResult(secret=secret, solved=True, turns=attempts)

        pool = filter_candidates(pool, guess, hint)
        if log is not None:
            log(f"play: {len(pool)} words still fit the hints")

    console.print(f"[bold red]Game Over![/] The correct word was: [bold green]{secret.upper()}[/]")
    return GameResult(secret=secret, solved=False, turns=attempts)
