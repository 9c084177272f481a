"""wordle-entropy

Play Wordle in the terminal, or get guesses that maximize expected
information gain (entropy) while you play it elsewhere.

Usage:
  wordle-entropy play --words words.txt
  wordle-entropy solve --words words.txt --guess-space candidates
"""

import argparse
import os
import random
import sys
import time
from typing import List, Optional

from rich.console import Console

from .errors import InvalidWordFormat, WordListLoadError
from .feedback import normalize_word
from .play import play_game
from .repl import run_repl
from .session import GUESS_SPACES, SolverConfig, SolverSession
from .words import load_words_from_file


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle game and entropy solver.")
    ap.add_argument("mode", choices=["play", "solve"], help="Play a game, or start the solver REPL.")
    ap.add_argument("--words", type=str, default="words.txt",
                    help="Word list file, one 5-letter word per line.")
    ap.add_argument("--max-attempts", type=int, default=6, help="Attempts allowed in play mode.")
    ap.add_argument("--hard", action="store_true",
                    help="Hard mode: guesses must fit all hints so far (solve mode suggests only candidates).")
    ap.add_argument("--seed", type=int, default=None, help="Random seed for picking the secret in play mode.")
    ap.add_argument("--secret", type=str, default=None, help="Use this secret word in play mode.")
    ap.add_argument("--guess-space", choices=list(GUESS_SPACES), default="allowed",
                    help="Score guesses from all loaded words or only remaining candidates.")
    ap.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                    help="Processes used for scoring (1 = no process pool).")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    ap.add_argument("--verbose", action="store_true", help="Print detailed progress to stderr.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    args = ap.parse_args(argv)

    if args.max_attempts < 1:
        ap.error("--max-attempts must be at least 1")
    if args.workers < 1:
        ap.error("--workers must be at least 1")

    verbose = bool(args.verbose or args.debug)
    debug = bool(args.debug)

    start_t = time.time()

    def log(msg: str) -> None:
        if not verbose:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}", file=sys.stderr)

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}", file=sys.stderr)

    try:
        words = load_words_from_file(args.words)
    except WordListLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    log(f"words: loaded {len(words)} unique words from {args.words}")

    console = Console(highlight=False)

    if args.mode == "play":
        secret = None
        if args.secret is not None:
            try:
                secret = normalize_word(args.secret)
            except InvalidWordFormat as e:
                print(f"Error: {e}", file=sys.stderr)
                return 2
        result = play_game(
            words,
            console=console,
            secret=secret,
            rng=random.Random(args.seed),
            max_attempts=args.max_attempts,
            hard=args.hard,
            log=log_debug,
        )
        log(f"play: solved={result.solved} turns={result.turns}")
        return 0

    config = SolverConfig(
        guess_space="candidates" if args.hard else args.guess_space,
        workers=args.workers,
        show_progress=not args.no_progress,
    )
    log(f"solver: guess_space={config.guess_space} workers={config.workers}")
    session = SolverSession(words, config=config, log=log)
    run_repl(session, console=console, log=log_debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
