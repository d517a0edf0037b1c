"""
Likeness scoring for a single (word, word) pair.

The terminal reports a "likeness" for every wrong password attempt: the number
of positions where the attempted word and the password hold the same letter.

Properties:
  - symmetric: likeness(a, b) == likeness(b, a)
  - likeness(a, a) == len(a)
  - strings of different length are compared up to the shorter one; this is
    not an error, the count just stops early.
"""


def likeness(a: str, b: str) -> int:
    """
    Count positions i < min(len(a), len(b)) where a[i] == b[i].

    Comparison is exact (case-sensitive); callers normalise case once when
    the guess is created.

    Examples:
      likeness("ABC", "ABD")   -> 2
      likeness("ABC", "XYZ")   -> 0
      likeness("AB", "ABCDE")  -> 2
    """
    # zip() stops at the shorter string
    return sum(1 for x, y in zip(a, b) if x == y)
