import sys
import pytest
from hacksolver.engine import (
    likeness, filter_candidates, LikenessIndex, Guess,
    parse_guess, validate_guess, add_guess,
    FormatError, DuplicateError, LengthMismatchError, GuessError,
)

WORDS4 = {4: ["WORD", "WARD", "BIRD", "CORD"]}

# int() only caps digit count from 3.11 on
LONG_LIKENESS = pytest.param(
    "WORD " + "9" * 5000,
    marks=pytest.mark.skipif(sys.version_info < (3, 11), reason="no int digit limit"),
)


# --- likeness golden tests ---
@pytest.mark.parametrize("a,b,expected", [
    ("ABC", "ABD", 2),
    ("ABC", "XYZ", 0),
    ("AB", "ABCDE", 2),
    ("", "ABC", 0),
    ("WORD", "WARD", 3),
    ("WORD", "BIRD", 2),
    ("abc", "ABC", 0),
])
def test_likeness_golden(a, b, expected):
    assert likeness(a, b) == expected
    assert likeness(b, a) == expected


@pytest.mark.parametrize("w", ["", "A", "TERMINAL", "ARCHITECTS"])
def test_likeness_self_is_length(w):
    assert likeness(w, w) == len(w)


# --- candidate filter ---
def test_filter_no_guesses_is_empty():
    assert filter_candidates(WORDS4, []) == []
    assert filter_candidates({}, []) == []


def test_filter_exact_match():
    assert filter_candidates(WORDS4, [("WORD", 4)]) == ["WORD"]


def test_filter_keeps_exact_likeness_only():
    cand = filter_candidates(WORDS4, [Guess("WORD", 2)])
    assert cand == [w for w in WORDS4[4] if likeness(w, "WORD") == 2]
    assert cand == ["BIRD"]
    assert filter_candidates(WORDS4, [Guess("WORD", 3)]) == ["WARD", "CORD"]


def test_filter_unknown_length_is_empty():
    assert filter_candidates(WORDS4, [("WORDS", 1)]) == []


def test_filter_is_order_independent():
    a = [Guess("WORD", 3), Guess("WARD", 2)]
    assert filter_candidates(WORDS4, a) == filter_candidates(WORDS4, a[::-1]) == ["CORD"]


def test_filter_preserves_dictionary_order():
    d = {4: ["CORD", "WARD", "WORD"]}
    assert filter_candidates(d, [("BIRD", 2)]) == ["CORD", "WARD", "WORD"]


# --- numpy index agrees with the plain filter ---
@pytest.mark.parametrize("guesses", [
    [],
    [("WORD", 4)],
    [("WORD", 2)],
    [("WORD", 3), ("WARD", 2)],
    [("WORD", 0)],
    [("WORDS", 2)],
    [("WORD", 3), ("WAR", 2)],
])
def test_index_matches_filter(guesses):
    idx = LikenessIndex(WORDS4)
    assert idx.candidates(guesses) == filter_candidates(WORDS4, guesses)


def test_index_handles_mis_sized_words():
    d = {4: ["WORD", "WOR", "WORDY"]}
    idx = LikenessIndex(d)
    assert idx.candidates([("WORD", 3)]) == filter_candidates(d, [("WORD", 3)]) == ["WOR"]


def test_index_empty_slice():
    assert LikenessIndex({4: []}).candidates([("WORD", 1)]) == []


# --- parsing / validation ---
def test_parse_guess_uppercases():
    assert parse_guess("architects 3") == Guess("ARCHITECTS", 3)


@pytest.mark.parametrize("text", ["12 WORD", "WORD", "WORD FOUR", "WORD  3", " WORD 3",
                                  "WORD 3 ", "WO-RD 3", "", "WORD ３", "WORD 3\n",
                                  LONG_LIKENESS])
def test_parse_guess_format_errors(text):
    with pytest.raises(FormatError):
        parse_guess(text)


def test_validate_guess_duplicate_and_length():
    guesses = (Guess("WORD", 2),)
    with pytest.raises(DuplicateError):
        validate_guess(guesses, Guess("WORD", 3))
    with pytest.raises(LengthMismatchError):
        validate_guess(guesses, Guess("WORDS", 1))
    validate_guess(guesses, Guess("WARD", 1))


def test_add_guess_returns_new_tuple():
    before = (Guess("WORD", 2),)
    after = add_guess(before, "ward 1")
    assert before == (Guess("WORD", 2),)
    assert after == (Guess("WORD", 2), Guess("WARD", 1))


def test_add_guess_duplicate_is_case_insensitive():
    with pytest.raises(DuplicateError):
        add_guess((Guess("WORD", 2),), "word 1")


def test_errors_carry_user_messages():
    assert "GUESS LIKENESS" in str(FormatError())
    assert str(DuplicateError()) == "This guess has already been added"
    assert str(LengthMismatchError()) == "This guess is a different length to the first guess"
    assert issubclass(FormatError, GuessError) and issubclass(GuessError, ValueError)
