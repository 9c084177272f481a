from wordle_entropy.repl import run_repl
from wordle_entropy.session import SolverSession

WORDS = ["hello", "world", "halle", "jelly", "belly", "shell", "cello", "helps"]


def test_repl_session(console, scripted):
    session = SolverSession(WORDS)
    lines = [
        "help",
        "guessed hello h*ll_",
        "history",
        "undo",
        "undo",
        "bogus",
        "top -1",
        "",
        "top 2 strict",
        "score hello",
        "exit",
        "guessed world _____",
    ]
    run_repl(session, console=console, read_line=scripted(lines))
    out = console.file.getvalue()

    assert "guessed <word> <hint>" in out
    assert "the answer is halle" in out
    assert "1: HELLO - Removed 7 of 8 (87.50%). 1 Remaining." in out
    assert "Undoing last guess: HELLO" in out
    assert "Restored word list to 8 words." in out
    assert "Error: Nothing to undo." in out
    assert "Error: Bad command 'bogus'" in out
    assert "Error: Number of guesses must not be negative" in out
    assert "Rank:" in out
    assert out.rstrip().endswith("Exiting solver...")
    # nothing after exit was run
    assert session.history() == ()
    assert session.candidates == tuple(WORDS)


def test_repl_exits_on_eof(console, scripted):
    session = SolverSession(WORDS)
    run_repl(session, console=console, read_line=scripted(["guessed hello _ell_"]))
    out = console.file.getvalue()
    assert "Candidates: jelly belly" in out
    assert "Exiting solver..." in out
    assert len(session.history()) == 1


def test_repl_bad_hint_leaves_state(console, scripted):
    session = SolverSession(WORDS)
    run_repl(session, console=console, read_line=scripted(["guessed hello h*l_", "guessed hel h*ll_"]))
    out = console.file.getvalue()
    assert out.count("Error:") == 2
    assert session.history() == ()
