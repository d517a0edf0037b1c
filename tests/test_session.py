import sys
import pytest
from hacksolver.engine import Guess, FormatError, DuplicateError, LengthMismatchError
from hacksolver.session import (
    new_session, submit, remove_guess, reset, candidates, potential_words, autocomplete,
)

DICT = {
    4: ["WORD", "WARD", "BIRD", "CORD"],
    5: ["WORDS", "CRANE"],
}

# int() only caps digit count from 3.11 on
LONG_LIKENESS = pytest.param(
    "WORD " + "9" * 5000,
    marks=pytest.mark.skipif(sys.version_info < (3, 11), reason="no int digit limit"),
)


def test_no_guesses_no_candidates():
    s = new_session(DICT)
    assert s.guesses == () and s.error is None
    assert candidates(s) == []


def test_submit_appends_uppercased_and_trims():
    s = submit(new_session(DICT), "  word 3 ")
    assert s.guesses == (Guess("WORD", 3),)
    assert s.error is None
    assert candidates(s) == ["WARD", "CORD"]


def test_submit_does_not_mutate_previous_session():
    s0 = new_session(DICT)
    s1 = submit(s0, "WORD 3")
    assert s0.guesses == () and s1.guesses == (Guess("WORD", 3),)


def test_blank_submit_is_noop():
    s = submit(new_session(DICT), "bad")
    assert submit(s, "   ") is s


@pytest.mark.parametrize("text", ["12 WORD", "WORD", "WORD FOUR", LONG_LIKENESS])
def test_format_error_leaves_guesses(text):
    s = submit(new_session(DICT), "WORD 3")
    s2 = submit(s, text)
    assert isinstance(s2.error, FormatError)
    assert s2.guesses == s.guesses


def test_duplicate_error_leaves_guesses():
    s = submit(new_session(DICT), "WORD 3")
    s2 = submit(s, "word 2")
    assert isinstance(s2.error, DuplicateError)
    assert s2.guesses == s.guesses


def test_length_mismatch_leaves_guesses():
    s = submit(new_session(DICT), "WORD 3")
    s2 = submit(s, "CRANE 1")
    assert isinstance(s2.error, LengthMismatchError)
    assert s2.guesses == s.guesses


def test_new_attempt_replaces_error():
    s = submit(new_session(DICT), "WORD 3")
    s = submit(s, "WORD 3")
    assert isinstance(s.error, DuplicateError)
    s = submit(s, "nope")
    assert isinstance(s.error, FormatError)
    s = submit(s, "WARD 2")
    assert s.error is None
    assert candidates(s) == ["CORD"]


def test_remove_equals_never_added():
    base = submit(new_session(DICT), "WORD 3")
    added = submit(base, "WARD 2")
    removed = remove_guess(added, 1)
    assert removed.guesses == base.guesses
    assert candidates(removed) == candidates(base)

    # removing the first guess leaves the later one in charge
    only_ward = remove_guess(added, 0)
    assert only_ward.guesses == (Guess("WARD", 2),)
    assert candidates(only_ward) == candidates(submit(new_session(DICT), "WARD 2"))


def test_remove_out_of_range_is_noop():
    s = submit(submit(new_session(DICT), "WORD 3"), "WORD 1")
    assert remove_guess(s, 5) is s
    assert remove_guess(s, -1) is s


def test_remove_keeps_current_error():
    s = submit(submit(new_session(DICT), "WORD 3"), "WARD 2")
    s = submit(s, "WORD 1")
    assert isinstance(s.error, DuplicateError)
    r = remove_guess(s, 1)
    assert r.guesses == (Guess("WORD", 3),)
    assert r.error is s.error


def test_reset_clears_everything():
    s = submit(submit(new_session(DICT), "WORD 3"), "bad")
    r = reset(s)
    assert r.guesses == () and r.error is None and r.dictionary is DICT


def test_potential_words_before_first_guess_searches_everything():
    s = new_session(DICT)
    assert potential_words(s, "") == []
    assert potential_words(s, "wor") == ["WORD", "WORDS"]
    assert potential_words(s, "c 2") == ["CORD", "CRANE"]


def test_potential_words_after_guess_uses_candidates():
    s = submit(new_session(DICT), "WORD 3")
    assert potential_words(s, "c") == ["CORD"]
    assert autocomplete(s, "w") == "WARD"
    assert autocomplete(s, "zz") == "zz"
