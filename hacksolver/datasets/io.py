"""
Dictionary loading.

Two on-disk formats are accepted:
  - `.json`: {"<length>": ["WORD", ...], ...}  (keys are strings in JSON)
  - anything else: one word per line

Both come back as Dict[int, List[str]] in ascending length order, words
uppercase and in file order within each length.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY = Path(__file__).parent / "data" / "words.json"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def group_by_length(words: Iterable[str]) -> Dict[int, List[str]]:
    """
    Uppercase, drop blanks and duplicates, and bucket by length.
    First occurrence wins; buckets are returned shortest first.
    """
    buckets: Dict[int, List[str]] = {}
    seen = set()
    for raw in words:
        w = raw.strip().upper()
        if not w or w in seen:
            continue
        seen.add(w)
        buckets.setdefault(len(w), []).append(w)
    return {n: buckets[n] for n in sorted(buckets)}


def load_dictionary(path: Path | str = DEFAULT_DICTIONARY) -> Dict[int, List[str]]:
    """
    Load a length-keyed dictionary from `path`.

    JSON keys must be integers written as strings and values lists of words;
    anything else raises ValueError. Raises FileNotFoundError if the path
    doesn't exist.
    """
    p = Path(path)
    if p.suffix.lower() != ".json":
        out = group_by_length(read_lines(p))
    else:
        if not p.exists():
            raise FileNotFoundError(p)
        raw = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"{p}: expected an object keyed by word length")
        for k, v in raw.items():
            if not isinstance(v, list):
                raise ValueError(f"{p}: length {k} must map to a list of words")
        try:
            out = {int(k): list(v) for k, v in sorted(raw.items(), key=lambda kv: int(kv[0]))}
        except (TypeError, ValueError) as e:
            raise ValueError(f"{p}: dictionary keys must be word lengths") from e

    log.info("loaded %d words in %d lengths from %s",
             sum(len(v) for v in out.values()), len(out), p)
    return out
