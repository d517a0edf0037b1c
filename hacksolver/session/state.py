"""
Session state for the interactive solver.

A Session is an immutable record: the dictionary, the ordered guesses, and at
most one current error. Every operation returns a new Session; the caller
decides when to replace the one it holds.

Error handling:
  - submit() never raises for bad input. A rejected entry comes back as
    `session.error` (a GuessError) with the guesses untouched.
  - Any new attempt replaces the previous error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Mapping, Optional, Sequence, Tuple

from hacksolver.engine import Guess, GuessError, LikenessIndex, add_guess

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    dictionary: Mapping[int, Sequence[str]]
    guesses: Tuple[Guess, ...] = ()
    error: Optional[GuessError] = None
    # shared between derived sessions; only caches, never changes results
    index: Optional[LikenessIndex] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.index is None:
            object.__setattr__(self, "index", LikenessIndex(self.dictionary))


def new_session(dictionary: Mapping[int, Sequence[str]]) -> Session:
    """Fresh session over `dictionary` with no guesses."""
    return Session(dictionary)


def submit(session: Session, text: str) -> Session:
    """
    Try to add a `WORD LIKENESS` entry.

    Returns:
      - `session` unchanged if `text` is blank
      - a session with the guess appended and no error on success
      - a session with the same guesses and `error` set on failure
    """
    text = text.strip()
    if not text:
        return session

    try:
        guesses = add_guess(session.guesses, text)
    except GuessError as e:
        log.debug("rejected %r: %s", text, type(e).__name__)
        return replace(session, error=e)

    log.debug("added guess %s %d", *guesses[-1])
    return replace(session, guesses=guesses, error=None)


def remove_guess(session: Session, index: int) -> Session:
    """
    Drop the guess at position `index` (0-based).
    An out-of-range index returns `session` unchanged. The current error is
    kept; only a new attempt replaces it.
    """
    if not 0 <= index < len(session.guesses):
        return session
    guesses = session.guesses[:index] + session.guesses[index + 1:]
    log.debug("removed guess %s", session.guesses[index].word)
    return replace(session, guesses=guesses)


def reset(session: Session) -> Session:
    """Forget every guess and the current error; keep the dictionary."""
    return replace(session, guesses=(), error=None)


def candidates(session: Session) -> List[str]:
    """Dictionary words still consistent with every guess."""
    return session.index.candidates(session.guesses)


def potential_words(session: Session, text: str) -> List[str]:
    """
    Words starting with the first token of `text` (case-insensitive).

    Before the first guess the whole dictionary is searched (shortest words
    first); afterwards only the current candidates.
    """
    if text == "":
        return []

    prefix = text.split(" ", 1)[0].upper()
    if session.guesses:
        pool = candidates(session)
    else:
        pool = [w for n in sorted(session.dictionary) for w in session.dictionary[n]]
    return [w for w in pool if w.startswith(prefix)]


def autocomplete(session: Session, text: str) -> str:
    """First potential word for `text`, or `text` itself if there is none."""
    words = potential_words(session, text)
    return words[0] if words else text
