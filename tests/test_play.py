import random

from wordle_entropy.play import play_game

WORDS = ["crane", "slate", "pious", "frank"]


def test_win_after_invalid_guesses(console, scripted):
    result = play_game(WORDS, console=console, secret="crane", read_line=scripted(["cr", "zzzzz", "slate", "crane"]))
    assert result.solved
    assert result.turns == 2
    out = console.file.getvalue()
    assert "is not a 5-letter word" in out
    assert "Invalid word. Please try again." in out
    assert "Congratulations!" in out


def test_out_of_attempts(console, scripted):
    result = play_game(WORDS, console=console, secret="crane", max_attempts=1, read_line=scripted(["slate"]))
    assert not result.solved
    assert result.turns == 1
    assert "Game Over! The correct word was: CRANE" in console.file.getvalue()


def test_hard_mode_rejects_inconsistent_guess(console, scripted):
    result = play_game(
        WORDS,
        console=console,
        secret="crane",
        hard=True,
        read_line=scripted(["slate", "pious", "crane"]),
    )
    assert result.solved
    assert result.turns == 2
    assert "Hard mode: 'pious' does not fit the hints so far." in console.file.getvalue()


def test_end_of_input(console, scripted):
    result = play_game(WORDS, console=console, rng=random.Random(7), read_line=scripted([]))
    assert not result.solved
    assert result.turns == 0
    assert result.secret in WORDS
