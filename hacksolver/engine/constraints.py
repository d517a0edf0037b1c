"""
Candidate filtering given the guesses recorded so far.

Given:
  - a dictionary mapping word length -> ordered words of that length
  - a sequence of (guess, likeness) pairs

Return:
  - the dictionary words of the first guess's length whose likeness against
    EVERY guess equals the likeness the terminal reported.

The filter is a plain conjunction, so guess order does not matter. No guesses
means no candidates (not "everything"), and a length with no dictionary entry
yields an empty list. Nothing here raises.

`LikenessIndex` is a numpy-backed cache of the same computation for callers
that refilter on every keystroke; its output is identical to
`filter_candidates` for every input.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .scoring import likeness

log = logging.getLogger(__name__)

# Dictionary is keyed by word length; guesses are (word, likeness) pairs.
Dictionary = Mapping[int, Sequence[str]]
Guesses = Sequence[Tuple[str, int]]


def filter_candidates(dictionary: Dictionary, guesses: Guesses) -> List[str]:
    """
    Keep only words of the first guess's length that reproduce every
    recorded likeness.

    Args:
      dictionary : mapping length -> ordered words of that length
      guesses    : sequence of (word, likeness) in submission order

    Returns:
      List[str] of consistent candidates (dictionary order preserved).
    """
    if not guesses:
        return []

    words = dictionary.get(len(guesses[0][0]))
    if words is None:
        # No words of this length
        return []

    out: List[str] = []
    for w in words:
        if all(likeness(w, g) == l for g, l in guesses):
            out.append(w)
    return out


class LikenessIndex:
    """
    Per-length matrix of character codes for vectorised filtering.

    Matrices are built lazily, one per word length, the first time that
    length is queried. A slice whose words do not all have the key's length
    cannot be laid out as a matrix; such slices (and guesses of a different
    length) go through `filter_candidates` instead.
    """

    def __init__(self, dictionary: Dictionary):
        self.dictionary = dictionary
        self._matrices: Dict[int, Optional[np.ndarray]] = {}

    def _matrix(self, n: int) -> Optional[np.ndarray]:
        if n not in self._matrices:
            words = self.dictionary.get(n, ())
            if all(len(w) == n for w in words):
                codes = np.array([[ord(c) for c in w] for w in words], dtype=np.uint32)
                self._matrices[n] = codes.reshape(len(words), n)
                log.debug("built likeness matrix for length %d (%d words)", n, len(words))
            else:
                self._matrices[n] = None
                log.debug("length %d has mis-sized words; using plain filter", n)
        return self._matrices[n]

    def candidates(self, guesses: Guesses) -> List[str]:
        """Same contract as filter_candidates(self.dictionary, guesses)."""
        if not guesses:
            return []

        n = len(guesses[0][0])
        if n not in self.dictionary:
            return []

        codes = self._matrix(n)
        if codes is None or any(len(g) != n for g, _ in guesses):
            return filter_candidates(self.dictionary, guesses)

        keep = np.ones(codes.shape[0], dtype=bool)
        for g, l in guesses:
            row = np.array([ord(c) for c in g], dtype=np.uint32)
            keep &= (codes == row).sum(axis=1) == l

        words = self.dictionary[n]
        return [words[i] for i in np.flatnonzero(keep)]
