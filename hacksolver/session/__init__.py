from .state import (
    Session,
    new_session,
    submit,
    remove_guess,
    reset,
    candidates,
    potential_words,
    autocomplete,
)

__all__ = [
    "Session",
    "new_session",
    "submit",
    "remove_guess",
    "reset",
    "candidates",
    "potential_words",
    "autocomplete",
]
