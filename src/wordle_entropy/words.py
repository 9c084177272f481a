from typing import List

from .errors import InvalidWordFormat, WordListLoadError
from .feedback import normalize_word


# load_words_from_file loads a list of 5-letter words from a file, one per line
def load_words_from_file(path: str) -> List[str]:
    """Blank lines are skipped; any other malformed line is an error."""
    words: List[str] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    words.append(normalize_word(line))
                except InvalidWordFormat as e:
                    raise WordListLoadError(f"{path}:{lineno}: {e}") from e
    except OSError as e:
        raise WordListLoadError(f"Could not read word list {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise WordListLoadError(f"Word list {path} is not valid UTF-8: {e}") from e

    if not words:
        raise WordListLoadError(f"Loaded 0 usable words from {path}. Check the file.")

    # Deduplicate while keeping order
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
