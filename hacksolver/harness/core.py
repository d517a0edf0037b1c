"""
Terminal simulation primitives.

- run_case:  hack one terminal (one hidden password on a board of words).
- run_batch: hack many randomly drawn boards in sequence.

The player here picks uniformly at random among the words still consistent
with every likeness reported so far; there is no ranking. These runs exist to
exercise the candidate filter end to end, not to find a best strategy.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Mapping, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from hacksolver.engine import likeness, filter_candidates

log = logging.getLogger(__name__)

# Attempts before the terminal locks out.
TERMINAL_MAX_ATTEMPTS = 4


def run_case(
        target: str,
        board: Sequence[str],
        *,
        max_attempts: int = TERMINAL_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Play one terminal until the password is found or attempts run out.

    Args:
        target:        the hidden password (must be on `board`)
        board:         words shown on the terminal, all of the target's length
        max_attempts:  lockout limit
        seed:          RNG seed to make picks reproducible

    Returns:
        dict with keys:
            success (bool), attempts (int), time_ms (float),
            history (list[(guess, likeness)]), target (str), N (int)
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive; got {max_attempts}")

    rng = random.Random(seed)
    N = len(target)
    words = {N: list(board)}
    history: List[Tuple[str, int]] = []
    candidates = list(board)

    t0 = time.perf_counter()
    success = False
    for _ in range(max_attempts):
        if not candidates:
            # target was not on the board
            break
        guess = candidates[rng.randrange(len(candidates))]
        history.append((guess, likeness(guess, target)))
        if guess == target:
            success = True
            break
        candidates = filter_candidates(words, history)

    dt = (time.perf_counter() - t0) * 1000.0
    log.debug("target=%s success=%s attempts=%d", target, success, len(history))
    return {
        "success": success, "attempts": len(history), "time_ms": dt,
        "history": history, "target": target, "N": N,
    }


def run_batch(
        dictionary: Mapping[int, Sequence[str]],
        *,
        N: int,
        board_size: int,
        cases: int,
        max_attempts: int = TERMINAL_MAX_ATTEMPTS,
        seed: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Draw `cases` boards of `board_size` distinct length-N words, hide a
    password on each and play it with run_case.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(dictionary.get(N, ()))
    if board_size < 1 or board_size > len(pool):
        raise ValueError(
            f"board_size must be between 1 and {len(pool)} for N={N}; got {board_size}")

    rng = np.random.default_rng(seed)
    iterator = range(1, cases + 1)
    if progress:
        iterator = tqdm(iterator, ncols=80, desc="Hacking", unit="terminal")

    out: List[Dict] = []
    for idx in iterator:
        picks = rng.choice(len(pool), size=board_size, replace=False)
        board = [pool[i] for i in picks]
        target = board[int(rng.integers(board_size))]
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(target, board, max_attempts=max_attempts, seed=case_seed))
    return out
