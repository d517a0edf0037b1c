from .scoring import likeness
from .constraints import filter_candidates, LikenessIndex
from .validation import (
    Guess,
    GuessError,
    FormatError,
    DuplicateError,
    LengthMismatchError,
    parse_guess,
    validate_guess,
    add_guess,
)

__all__ = [
    "likeness",
    "filter_candidates",
    "LikenessIndex",
    "Guess",
    "GuessError",
    "FormatError",
    "DuplicateError",
    "LengthMismatchError",
    "parse_guess",
    "validate_guess",
    "add_guess",
]
