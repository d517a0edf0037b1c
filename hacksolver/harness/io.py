"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-terminal results into a tidy CSV (one row per case).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List


def write_csv(results: List[Dict], path: str, max_attempts: int) -> str:
    """
    Serialize a batch of simulation results to CSV.

    Schema (columns):
      N, target, success, attempts, time_ms,
      guess_1, like_1, ..., guess_<max_attempts>, like_<max_attempts>

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["N", "target", "success", "attempts", "time_ms"]
    for i in range(1, max_attempts + 1):
        fields += [f"guess_{i}", f"like_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "N": r["N"],
                "target": r["target"],
                "success": r["success"],
                "attempts": r["attempts"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_attempts + 1):
                if i <= len(hist):
                    g, lk = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"like_{i}"] = lk
                else:
                    row[f"guess_{i}"] = ""
                    row[f"like_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - dictionary: output of datasets.validate_dictionary(...)
      - num_cases, success_rate
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
