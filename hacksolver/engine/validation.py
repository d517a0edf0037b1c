"""
Guess parsing and validation.

This module answers the question: "Can this text be added as a guess right now?"
A raw entry is accepted iff:
  - it has the shape `WORD LIKENESS` (letters, one space, digits)
  - its word (uppercased) has not been guessed already
  - its word has the same length as the first recorded guess

Every failure is a GuessError subclass carrying the message shown to the user.
Checks run before anything is appended, so a rejected entry never changes the
guess sequence.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Sequence, Tuple

# ASCII only: str patterns would otherwise accept non-ASCII digits for \d
GUESS_RE = re.compile(r"([A-Za-z]+) ([0-9]+)", re.ASCII)


class Guess(NamedTuple):
    """A submitted word and the likeness the terminal reported for it."""
    word: str
    likeness: int


class GuessError(ValueError):
    """Base class for rejected guess entries."""
    message = "Invalid guess"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return self.args[0]


class FormatError(GuessError):
    message = "Guesses should be in the form: GUESS LIKENESS. For example; ARCHITECTS 3"


class DuplicateError(GuessError):
    message = "This guess has already been added"


class LengthMismatchError(GuessError):
    message = "This guess is a different length to the first guess"


def parse_guess(text: str) -> Guess:
    """
    Parse `WORD LIKENESS` into a Guess.

    The word is uppercased here and treated as canonical from then on.
    Surrounding whitespace is NOT stripped; that is the caller's job.

    Raises:
      FormatError if `text` is not exactly letters, one space, digits.
    """
    m = GUESS_RE.fullmatch(text)
    if m is None:
        raise FormatError()
    try:
        n = int(m.group(2))
    except ValueError:
        # more digits than int() will convert
        raise FormatError() from None
    return Guess(m.group(1).upper(), n)


def validate_guess(guesses: Sequence[Guess], guess: Guess) -> None:
    """
    Check `guess` against the guesses recorded so far.

    Raises:
      DuplicateError      if the word was already guessed
      LengthMismatchError if the word length differs from the first guess
    """
    if any(g.word == guess.word for g in guesses):
        raise DuplicateError()

    if guesses and len(guesses[0].word) != len(guess.word):
        raise LengthMismatchError()


def add_guess(guesses: Sequence[Guess], text: str) -> Tuple[Guess, ...]:
    """
    Parse and validate `text`, returning a new tuple with the guess appended.

    `guesses` itself is never modified.
    """
    guess = parse_guess(text)
    validate_guess(guesses, guess)
    return tuple(guesses) + (guess,)
