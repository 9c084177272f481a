"""Errors raised by the solver core.

Everything derives from WordleError (a ValueError), so the REPL can catch a
single type at its boundary and keep going.
"""


class WordleError(ValueError):
    pass


class InvalidWordFormat(WordleError):
    """Word is not exactly 5 letters."""


class InvalidHintFormat(WordleError):
    """Hint is not 5 characters drawn from '_', '*' and letters."""


class InvalidArgument(WordleError):
    pass


class NothingToUndo(WordleError):
    pass


class WordListLoadError(WordleError):
    """The word list file is missing, unreadable, empty or malformed."""
