import pytest

from wordle_entropy.cli import main


@pytest.fixture
def feed_input(monkeypatch, scripted):
    def _feed(lines):
        read = scripted(lines)
        monkeypatch.setattr("builtins.input", lambda prompt="": read(prompt))

    return _feed


def test_missing_word_list_is_fatal(tmp_path, capsys):
    assert main(["solve", "--words", str(tmp_path / "missing.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_malformed_word_list_is_fatal(words_file, capsys):
    assert main(["play", "--words", words_file("crane\ncr@ne\n")]) == 1
    assert ":2:" in capsys.readouterr().err


def test_play(words_file, feed_input, capsys):
    feed_input(["slate", "crane"])
    path = words_file("crane\nslate\npious\n")
    assert main(["play", "--words", path, "--secret", "CRANE"]) == 0
    assert "Congratulations!" in capsys.readouterr().out


def test_play_bad_secret(words_file, capsys):
    assert main(["play", "--words", words_file("crane\n"), "--secret", "abc"]) == 2


def test_solve(words_file, feed_input, capsys):
    feed_input(["top 1", "guessed crane _____", "exit"])
    path = words_file("crane\nslate\npious\n")
    assert main(["solve", "--words", path, "--workers", "1", "--no-progress", "--verbose"]) == 0
    captured = capsys.readouterr()
    assert "Exiting solver..." in captured.out
    assert "words: loaded 3 unique words" in captured.err
    assert "the answer is pious" in captured.out
