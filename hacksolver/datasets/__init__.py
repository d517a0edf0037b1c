from .io import DEFAULT_DICTIONARY, read_lines, group_by_length, load_dictionary
from .validator import validate_dictionary, pretty_summary

__all__ = [
    "DEFAULT_DICTIONARY",
    "read_lines",
    "group_by_length",
    "load_dictionary",
    "validate_dictionary",
    "pretty_summary",
]
