import pytest

from wordle_entropy.errors import WordListLoadError
from wordle_entropy.words import load_words_from_file


def test_loads_and_normalizes(words_file):
    path = words_file("Crane\n  slate \n\nCRANE\npious\n")
    assert load_words_from_file(path) == ["crane", "slate", "pious"]


def test_malformed_line_names_the_line(words_file):
    path = words_file("crane\nslates\npious\n")
    with pytest.raises(WordListLoadError, match=":2:"):
        load_words_from_file(path)


def test_non_letters_are_rejected(words_file):
    with pytest.raises(WordListLoadError):
        load_words_from_file(words_file("cr4ne\n"))


def test_missing_file(tmp_path):
    with pytest.raises(WordListLoadError):
        load_words_from_file(str(tmp_path / "nope.txt"))


def test_empty_file(words_file):
    with pytest.raises(WordListLoadError):
        load_words_from_file(words_file("\n\n"))
