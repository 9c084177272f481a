from wordle_entropy.feedback import wordle_feedback
from wordle_entropy.filtering import filter_candidates, is_consistent, replay

WORDS = ["total", "stoal", "allot", "tally", "alloy", "atoll", "crane", "slate"]


def test_secret_is_consistent_with_its_own_hint():
    for g in WORDS:
        for s in WORDS:
            assert is_consistent(s, g, wordle_feedback(g, s))


def test_filter_after_allot():
    hint = wordle_feedback("allot", "total")
    assert filter_candidates(WORDS, "allot", hint) == ("total", "stoal")


def test_filter_never_grows_the_list():
    for g in WORDS:
        for s in WORDS:
            assert len(filter_candidates(WORDS, g, wordle_feedback(g, s))) <= len(WORDS)


def test_replay_matches_sequential_filtering():
    records = [
        ("allot", wordle_feedback("allot", "total")),
        ("stoal", wordle_feedback("stoal", "total")),
    ]
    step1 = filter_candidates(WORDS, *records[0])
    step2 = filter_candidates(step1, *records[1])
    assert replay(WORDS, records) == step2 == ("total",)
    # order of the records does not change the result
    assert replay(WORDS, list(reversed(records))) == step2


def test_replay_with_no_records_is_the_full_list():
    assert replay(WORDS, []) == tuple(WORDS)
