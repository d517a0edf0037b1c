# apps/cli/simulate.py
"""
Batch terminal simulation.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Draws random boards of one word length and hacks each one by picking
     among the remaining candidates after every likeness report.
  3) Writes:
       - CSV:  per-terminal results + guess/likeness history columns
       - JSON: manifest with config, dictionary report, git commit, etc.

Usage:
    python -m apps.cli.simulate --N 7 --board-size 12 --cases 500
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from hacksolver.datasets import DEFAULT_DICTIONARY, load_dictionary, validate_dictionary, pretty_summary
from hacksolver.harness import TERMINAL_MAX_ATTEMPTS, run_batch
from hacksolver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

log = logging.getLogger("apps.cli.simulate")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Simulate terminal hacks against a dictionary")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="path to length-keyed JSON dictionary")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--board-size", type=int, default=10, help="words shown per terminal")
    ap.add_argument("--cases", type=int, default=100, help="number of terminals to hack")
    ap.add_argument("--attempts", type=int, default=TERMINAL_MAX_ATTEMPTS,
                    help="attempts before lockout")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", action="store_true", help="show a progress bar")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary; only JSON dictionaries carry a report
    rep = None
    if args.dictionary.endswith(".json"):
        rep = validate_dictionary(args.dictionary)
        print(pretty_summary(rep))
        if not rep["passed"]:
            for issue in rep["issues"]:
                log.warning("%s", issue)

    dictionary = load_dictionary(args.dictionary)

    # 2) Run
    try:
        results = run_batch(
            dictionary, N=args.N, board_size=args.board_size, cases=args.cases,
            max_attempts=args.attempts, seed=args.seed, progress=args.progress,
        )
    except ValueError as e:
        log.error("%s", e)
        return 2

    wins = sum(1 for r in results if r["success"])
    rate = wins / len(results) if results else 0.0
    print(f"Hacked {wins}/{len(results)} terminals ({100.0 * rate:.1f}%)")

    # 3) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=args.attempts)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "success_rate": rate,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
