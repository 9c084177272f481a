import io

import pytest
from rich.console import Console


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def words_file(tmp_path):
    def _write(text: str):
        path = tmp_path / "words.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def scripted():
    return _scripted


def _scripted(lines):
    """read_line stand-in: returns the given lines, then raises EOFError."""
    it = iter(lines)

    def _read(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _read
