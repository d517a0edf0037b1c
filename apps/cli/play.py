# apps/cli/play.py
"""
Interactive terminal hacking assistant.

Enter each password attempt with the likeness the terminal reported:

    > ARCHITECTS 3

Commands:
    :rm K        remove guess K (1-based, as listed)
    :tab PREFIX  autocomplete PREFIX against the current candidates
    :reset       forget every guess
    :quit        exit (Ctrl-D works too)

Usage:
    python -m apps.cli.play --dictionary hacksolver/datasets/data/words.json
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from hacksolver.datasets import DEFAULT_DICTIONARY, load_dictionary
from hacksolver.session import (
    Session, new_session, submit, remove_guess, reset, candidates, potential_words, autocomplete,
)


def render(session: Session) -> str:
    """Candidates, guesses and the current error as printable text."""
    lines: List[str] = ["Possible words:"]
    if not session.guesses:
        lines.append("  Enter your first guess to see possible words.")
    else:
        words = candidates(session)
        if words:
            lines += [f"  {w}" for w in words]
        else:
            lines.append("  No words match the guesses.")

    lines.append("Guesses:")
    if not session.guesses:
        lines.append("  No guesses have been added yet.")
    for i, (word, lk) in enumerate(session.guesses, 1):
        lines.append(f"  {i}. {word} {lk}")

    if session.error is not None:
        lines.append(f"! {session.error}")
    return "\n".join(lines)


def handle(session: Session, line: str) -> Tuple[Session, Optional[str], bool]:
    """
    Apply one input line.

    Returns (new session, text to print or None, quit?).
    """
    cmd, _, arg = line.strip().partition(" ")

    if cmd == ":quit":
        return session, None, True
    if cmd == ":reset":
        session = reset(session)
        return session, render(session), False
    if cmd == ":rm":
        if not arg.strip().isdigit():
            return session, "usage: :rm K", False
        session = remove_guess(session, int(arg) - 1)
        return session, render(session), False
    if cmd == ":tab":
        matches = potential_words(session, arg)
        return session, f"{autocomplete(session, arg)}  ({len(matches)} match(es))", False

    session = submit(session, line)
    return session, render(session), False


def main(argv: List[str] | None = None):
    ap = argparse.ArgumentParser(description="Terminal hacking assistant")
    ap.add_argument("--dictionary", default=str(DEFAULT_DICTIONARY),
                    help="length-keyed JSON dictionary or one-word-per-line text file")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    session = new_session(load_dictionary(args.dictionary))
    print(render(session))

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break
        session, out, done = handle(session, line)
        if done:
            break
        if out:
            print(out)


if __name__ == "__main__":
    main()
