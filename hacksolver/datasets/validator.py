"""
Dictionary validator.

What this module does:
- Validate a length-keyed JSON dictionary ({"<length>": [WORD, ...]}).
- Enforce formatting rules (uppercase A–Z only, length equal to its key).
- Detect duplicates and invalid entries; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hacksolver.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("hacksolver/datasets/data/words.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List

WORD_RE = re.compile(r"[A-Z]+")


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class LengthReport:
    """Per-length diagnostics."""
    length: int
    count: int            # number of VALID words under this key
    unique_count: int     # unique valid words
    invalid_entries: int  # wrong length, not A–Z, or not uppercase


@dataclass
class ValidationReport:
    """Top-level validation result for one dictionary file."""
    path: str
    exists: bool
    sha256: str
    lengths: List[LengthReport] = field(default_factory=list)
    total: int = 0
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_bucket(n: int, words: list) -> LengthReport:
    valid = [w for w in words if isinstance(w, str) and len(w) == n and WORD_RE.fullmatch(w)]
    return LengthReport(
        length=n,
        count=len(valid),
        unique_count=len(set(valid)),
        invalid_entries=len(words) - len(valid),
    )


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a length-keyed dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - per-length counts, duplicate/invalid flags
          - SHA-256 of the raw file
          - `passed` boolean (strict: non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path=str(path), exists=False, sha256="",
                               issues=[f"dictionary file not found: {path}"])
        return asdict(rep)

    rep = ValidationReport(path=str(p), exists=True, sha256=_sha256_file(p))

    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except ValueError as e:
        rep.issues.append(f"not valid JSON: {e}")
        return asdict(rep)
    if not isinstance(raw, dict):
        rep.issues.append("top level must be an object keyed by word length")
        return asdict(rep)

    for key, words in raw.items():
        if not (key.isascii() and key.isdigit()):
            rep.issues.append(f"key {key!r} is not a word length")
            continue
        if not isinstance(words, list):
            rep.issues.append(f"length {key}: expected a list of words")
            continue
        lr = _check_bucket(int(key), words)
        rep.lengths.append(lr)
        if lr.invalid_entries:
            rep.issues.append(f"length {key} has {lr.invalid_entries} invalid entr(y/ies)")
        if lr.count != lr.unique_count:
            rep.issues.append(f"length {key} contains duplicate words")

    rep.lengths.sort(key=lambda lr: lr.length)
    rep.total = sum(lr.count for lr in rep.lengths)
    if rep.total == 0:
        rep.issues.append("dictionary contains 0 valid words")

    rep.passed = not rep.issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words.json | total=74 | 4:14 5:15 6:14 | sha=abc123def456 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sizes = " ".join(f"{lr['length']}:{lr['count']}" for lr in report["lengths"]) or "-"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | total={report['total']} | {sizes} "
        f"| sha={sha} | {status}"
    )
