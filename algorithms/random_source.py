"""
random_source.py — Randomness Seam
===================================
The only generators that sample randomness are the two searches (target
choice) and the three graph traversals (graph synthesis).  They all get
their randomness from a `random.Random` passed in by the caller, so a
test (or ALGOVIZ_SEED) can pin the trace.  Production runs pass nothing
and get an unseeded instance.
"""

import random
from typing import List, Optional

from algorithms.payloads import Number

# 30% of targets come from this fixed range, so they may or may not be present
TARGET_RANGE = (1, 20)
RANGE_PROBABILITY = 0.3


def make_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Return `rng` unchanged, or a fresh unseeded Random."""
    return rng if rng is not None else random.Random()


def pick_search_target(values: List[Number], rng: random.Random) -> Number:
    """
    Choose the value a search looks for.

    With probability RANGE_PROBABILITY (or always, when `values` is empty)
    draw an integer from TARGET_RANGE; otherwise sample an element of
    `values`, which guarantees a hit.
    """
    if not values or rng.random() < RANGE_PROBABILITY:
        return rng.randint(*TARGET_RANGE)
    return values[rng.randrange(len(values))]
