"""
Build a length-keyed JSON dictionary from a plain word list.

What it does:
- Reads a newline-separated word list from a local file or downloads it.
- Keeps alphabetic tokens within a length range, uppercases, de-duplicates
  while preserving input order, and buckets by length.
- Writes {"<length>": [WORD, ...]} JSON, the format the solver loads.

Usage:
    python -m script.build_dictionary --in words.txt --out hacksolver/datasets/data/words.json
    python -m script.build_dictionary --url https://example.org/words.txt --min-len 4 --max-len 15
"""

import argparse
import json
from pathlib import Path

import requests

from hacksolver.datasets import group_by_length, read_lines


def fetch_words(url: str) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return r.text.splitlines()


def build(words, min_len: int, max_len: int, sort: bool = False) -> dict[str, list[str]]:
    kept = [w.strip() for w in words if w.strip().isascii() and w.strip().isalpha()
            and min_len <= len(w.strip()) <= max_len]
    buckets = group_by_length(kept)
    if sort:
        buckets = {n: sorted(ws) for n, ws in buckets.items()}
    return {str(n): ws for n, ws in buckets.items()}


def main():
    ap = argparse.ArgumentParser(description="Build a length-keyed word dictionary")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="input .txt word list")
    src.add_argument("--url", help="download the word list from this URL")
    ap.add_argument("--out", default="hacksolver/datasets/data/words.json")
    ap.add_argument("--min-len", type=int, default=4)
    ap.add_argument("--max-len", type=int, default=15)
    ap.add_argument("--sort", action="store_true", help="sort each length alphabetically "
                                                        "instead of keeping input order")
    args = ap.parse_args()

    words = fetch_words(args.url) if args.url else read_lines(args.inp)
    out = build(words, args.min_len, args.max_len, sort=args.sort)

    p = Path(args.out)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(out, indent=2) + "\n", encoding="utf-8")
    total = sum(len(ws) for ws in out.values())
    print(f"Wrote {total} words in {len(out)} lengths -> {args.out}")


if __name__ == "__main__":
    main()
